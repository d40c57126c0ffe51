# tests/mitl_tests/test_temporal_partitioner.py
#
# Test suite for the partitioning of G [a, b] ((p2) U (p3))

import pytest

from stl_to_mitl.scripts.mitl.temporal_partitioner import partition_temporal_operators, split_interval


class TestSplitInterval:
    """Sub-interval boundaries, each start advanced by one past the previous point."""

    def test_example_points(self, example_partition_points):
        assert split_interval(0, 20, example_partition_points) == [(0, 5), (6, 8), (9, 10), (11, 15), (16, 20)]

    def test_upper_bound_after_last_point(self, example_partition_points):
        assert split_interval(0, 25, example_partition_points) == [(0, 5), (6, 8), (9, 10), (11, 15), (16, 20), (21, 25)]

    def test_points_outside_interval_are_ignored(self, example_partition_points):
        assert split_interval(7, 12, example_partition_points) == [(7, 8), (9, 10), (11, 12)]

    def test_point_on_lower_bound(self, example_partition_points):
        assert split_interval(5, 9, example_partition_points) == [(5, 5), (6, 8), (9, 9)]

    def test_no_points(self):
        assert split_interval(0, 20, []) == [(0, 20)]

    def test_unsorted_points(self):
        assert split_interval(0, 20, [15, 5]) == [(0, 5), (6, 15), (16, 20)]


class TestPartitionTemporalOperators:
    """Rewriting of the first G [a, b] ((p2) U (p3))."""

    def test_example(self, example_partition_points):
        formula = "G [0, 20] ((p2) U (p3))"
        expected = ("G [0, 5] ((p2) U (p3)) ∧ G [6, 8] ((p2) U (p3)) ∧ G [9, 10] ((p2) U (p3)) ∧ "
                    "G [11, 15] ((p2) U (p3)) ∧ G [16, 20] ((p2) U (p3))")
        assert partition_temporal_operators(formula, example_partition_points) == expected

    def test_compact_spacing(self, example_partition_points):
        formula = "G[0,10]((p2)U(p3))"
        expected = "G [0, 5] ((p2) U (p3)) ∧ G [6, 8] ((p2) U (p3)) ∧ G [9, 10] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == expected

    def test_surrounding_text_is_kept(self, example_partition_points):
        formula = "F [0, 30] (p1) ∧ G [12, 18] ((p2) U (p3))"
        expected = "F [0, 30] (p1) ∧ G [12, 15] ((p2) U (p3)) ∧ G [16, 18] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == expected

    def test_decimal_bounds_are_truncated(self, example_partition_points):
        formula = "G [0.9, 6.7] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == "G [0, 5] ((p2) U (p3)) ∧ G [6, 6] ((p2) U (p3))"

    def test_only_first_occurrence(self, example_partition_points):
        formula = "G [0, 6] ((p2) U (p3)) ∧ G [0, 6] ((p2) U (p3))"
        expected = "G [0, 5] ((p2) U (p3)) ∧ G [6, 6] ((p2) U (p3)) ∧ G [0, 6] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == expected

    @pytest.mark.parametrize("formula", [
        "",
        "G [0, 20] ((p1) U (p2))",
        "F [0, 20] ((p2) U (p3))",
        "G [0, 20] ((p2) R (p3))",
        "AG [0, 20] ((p2) U (p3))",
    ])
    def test_pattern_absent(self, formula, example_partition_points):
        assert partition_temporal_operators(formula, example_partition_points) == formula

    def test_no_partition_points(self):
        formula = "G [0, 20] ((p2) U (p3))"
        assert partition_temporal_operators(formula, []) == formula

    def test_empty_interval_is_left_unchanged(self, example_partition_points, capsys):
        formula = "G [9, 3] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == formula
        assert "Empty interval" in capsys.readouterr().out

    def test_invalid_bound_is_left_unchanged(self, example_partition_points, capsys):
        formula = "G [., 3] ((p2) U (p3))"
        assert partition_temporal_operators(formula, example_partition_points) == formula
        assert "Invalid interval bounds" in capsys.readouterr().out
