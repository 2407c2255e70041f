"""Pure ordering rules, no database involved."""
from __future__ import annotations

import pytest

from projectboard.domain import ordering


def test_sort_by_orden_puts_missing_last_and_is_stable():
    rows = [("a", 3), ("b", None), ("c", 1), ("d", 3), ("e", 10000)]
    result = ordering.sort_by_orden(rows, lambda r: r[1])
    assert [r[0] for r in result] == ["c", "a", "d", "b", "e"]


def test_reorder_shifts_moving_up_pushes_range_down():
    others = [("a", 1), ("b", 2), ("c", 3), ("e", 5)]
    # d moves from 4 to 2
    assert ordering.reorder_shifts(others, old_orden=4, new_orden=2) == {"b": 3, "c": 4}


def test_reorder_shifts_moving_down_pulls_range_up():
    others = [("b", 2), ("c", 3), ("d", 4), ("e", 5)]
    # a moves from 1 to 4
    assert ordering.reorder_shifts(others, old_orden=1, new_orden=4) == {"b": 1, "c": 2, "d": 3}


def test_reorder_shifts_same_position_is_empty():
    assert ordering.reorder_shifts([("a", 1), ("b", 2)], 2, 2) == {}


def test_reorder_shifts_skips_records_without_orden_and_handles_duplicates():
    others = [("a", 1), ("b", 3), ("c", 3), ("d", None)]
    assert ordering.reorder_shifts(others, old_orden=7, new_orden=3) == {"b": 4, "c": 4}


def test_compaction_shifts_only_touches_higher_orden():
    remaining = [("a", 1), ("c", 3), ("d", 4), ("x", None)]
    assert ordering.compaction_shifts(remaining, 2) == {"c": 2, "d": 3}


def test_compaction_shifts_without_deleted_orden_is_noop():
    assert ordering.compaction_shifts([("a", 1), ("b", 2)], None) == {}


def test_swap_adjacent_swaps_values():
    ordered = [("a", 1), ("b", 2), ("c", 3)]
    assert ordering.swap_adjacent(ordered, "b", -1) == {"b": 1, "a": 2}
    assert ordering.swap_adjacent(ordered, "b", 1) == {"b": 3, "c": 2}


def test_swap_adjacent_out_of_bounds_and_unknown():
    ordered = [("a", 1), ("b", 2)]
    assert ordering.swap_adjacent(ordered, "a", -1) == {}
    assert ordering.swap_adjacent(ordered, "b", 1) == {}
    assert ordering.swap_adjacent(ordered, "zzz", 1) is None


def test_swap_adjacent_defaults_missing_orden_to_index():
    ordered = [("a", 5), ("b", None)]
    assert ordering.swap_adjacent(ordered, "b", -1) == {"b": 5, "a": 1}


def test_swap_adjacent_rejects_bad_direction():
    with pytest.raises(ValueError):
        ordering.swap_adjacent([("a", 1)], "a", 2)
