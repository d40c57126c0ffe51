import numpy as np


def round_half_away(t):
    """
    Round to the nearest integer, ties away from zero.

    Args:
        t (float): Value to be rounded.

    Returns:
        int: Rounded value.
    """
    return int(np.sign(t) * np.floor(np.abs(t) + 0.5))


def construct_stable_partitions(signal):
    """
    Construct the stable partition points of a Boolean signal.

    A partition point is added wherever the truth value of any predicate changes between two
    consecutive samples. The time of the sample where the change is first observed is rounded to
    the nearest integer.

    Args:
        signal (Signal): Synthesized signal.

    Returns:
        list: Sorted, unique integer partition points.
    """
    if len(signal) < 2:
        return []

    changes = np.any(signal.values[1:] != signal.values[:-1], axis=1)
    idxs = np.nonzero(changes)[0] + 1

    return sorted({round_half_away(signal.times[idx]) for idx in idxs})
