import numpy as np


# Labels of the three step predicates, in sample order
SIGNAL_LABELS = ["y < 2", "z > 1", "x > 0.3"]


class Signal:
    def __init__(self, times, values, labels=SIGNAL_LABELS):
        """
        Discrete-time Boolean signal.

        Args:
            times (np.array): Sample times, shape (N,).
            values (np.array): Truth values of each predicate, boolean array of shape (N, len(labels)).
            labels (list): Predicate names.
        """
        self.times = np.asarray(times, dtype=float)
        self.values = np.asarray(values, dtype=bool)
        self.labels = list(labels)

    def __len__(self):
        return len(self.times)

    def __iter__(self):
        for t, value in zip(self.times, self.values):
            yield float(t), tuple(bool(v) for v in value)

    def at(self, t):
        """
        Truth values of the sample closest to time t.

        Args:
            t (float): Time.

        Returns:
            tuple: Truth value of each predicate.
        """
        idx = int(np.argmin(np.abs(self.times - t)))
        return tuple(bool(v) for v in self.values[idx])


def y_predicate(t):
    # y(t) < 2 for t in [0, 10)
    return t < 10


def z_predicate(t):
    # z(t) > 1 for t in [5, 15)
    return (t >= 5) & (t < 15)


def x_predicate(t):
    # x(t) > 0.3 for t in [8, 20)
    return (t >= 8) & (t < 20)


def synthesize_signal(horizon=30., sample_time=0.1):
    """
    Synthesize the example signal over [0, horizon], both ends included.

    Sample times are integer multiples of the sample time, rounded to 10 decimals so that
    boundaries such as t = 10 are hit exactly.

    Args:
        horizon (float): Time horizon T.
        sample_time (float): Sampling period.

    Returns:
        Signal: Samples of (y < 2, z > 1, x > 0.3). Empty if the sample time is not positive.
    """
    if not sample_time > 0:
        print(f"Invalid sample time {sample_time}, it must be positive")
        return Signal([], np.zeros((0, len(SIGNAL_LABELS)), dtype=bool))

    n_samples = int(np.floor(horizon / sample_time + 1e-9)) + 1
    times = np.round(np.arange(n_samples) * sample_time, 10)
    values = np.column_stack([y_predicate(times), z_predicate(times), x_predicate(times)])

    return Signal(times, values)
