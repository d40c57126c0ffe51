import re


# G [a, b] ((p2) U (p3)), the only shape rewritten by the partitioner
G_UNTIL_PATTERN = r'\bG\s*\[\s*([\d.]+)\s*,\s*([\d.]+)\s*\]\s*\(\(p2\)\s*U\s*\(p3\)\)'
UNTIL_SUBFORMULA = "((p2) U (p3))"
CONJUNCTION = " ∧ "


def split_interval(lower, upper, partition_points):
    """
    Split the integer interval [lower, upper] at the partition points.

    Each sub-interval ends at a partition point and the next one starts right after it. The last
    sub-interval ends at upper.

    Args:
        lower (int): Lower bound a.
        upper (int): Upper bound b.
        partition_points (list): Integer partition points.

    Returns:
        list: List of (start, end) tuples.

    Example:
        split_interval(0, 20, [5, 8, 10, 15, 20]) -> [(0, 5), (6, 8), (9, 10), (11, 15), (16, 20)]
    """
    sub_intervals = []
    prev = lower
    for t in sorted(set(partition_points)):
        if t < lower:
            continue
        if t > upper:
            break
        sub_intervals.append((prev, t))
        prev = t + 1

    if prev <= upper:
        sub_intervals.append((prev, upper))

    return sub_intervals


def partition_temporal_operators(mitl_formula, partition_points):
    """
    Partition the first G [a, b] ((p2) U (p3)) of the MITL formula at the stable partition points.

    The operator is replaced by the conjunction
        G [a, t1] ((p2) U (p3)) ∧ G [t1+1, t2] ((p2) U (p3)) ∧ ... ∧ G [tn+1, b] ((p2) U (p3))
    Interval bounds are truncated to integers. Further occurrences are left untouched.

    Args:
        mitl_formula (str): MITL formula with Boolean variables.
        partition_points (list): Integer partition points.

    Returns:
        str: Partitioned MITL formula. The input formula if the pattern is not found.
    """
    match = re.search(G_UNTIL_PATTERN, mitl_formula)
    if match is None:
        return mitl_formula

    try:
        lower = int(float(match.group(1)))
        upper = int(float(match.group(2)))
    except ValueError:
        print(f"Invalid interval bounds in {match.group(0)}")
        return mitl_formula

    if lower > upper:
        print(f"Empty interval [{lower}, {upper}] in {match.group(0)}")
        return mitl_formula

    conjuncts = [f"G [{start}, {end}] {UNTIL_SUBFORMULA}"
                 for start, end in split_interval(lower, upper, partition_points)]
    replacement = CONJUNCTION.join(conjuncts)

    return mitl_formula[:match.start()] + replacement + mitl_formula[match.end():]
