"""
Ordering rules for the project list.

Projects carry an integer ``orden``; lower values render first. The helpers
here compute which rows must change for each order-affecting mutation.
They only look at ``(id, orden)`` pairs and return ``{id: new_orden}``
mappings, so the repository can commit them as one batch.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, TypeVar

MISSING_ORDEN = 9999
MIN_ORDEN = 1
# upper bound of a 32-bit SQL INTEGER
MAX_ORDEN = 2**31 - 1

T = TypeVar("T")


def sort_key(orden: Optional[int]) -> int:
    return MISSING_ORDEN if orden is None else orden


def sort_by_orden(items: Iterable[T], orden_of: Callable[[T], Optional[int]]) -> list[T]:
    """Stable ascending sort; items without ``orden`` go last."""
    return sorted(items, key=lambda item: sort_key(orden_of(item)))


def reorder_shifts(
    others: Iterable[tuple[str, Optional[int]]],
    old_orden: int,
    new_orden: int,
) -> dict[str, int]:
    """Shifts needed to move one record from ``old_orden`` to ``new_orden``.

    ``others`` are every record except the one being moved. Moving up
    (``new < old``) pushes records in ``[new, old)`` down by one; moving down
    (``new > old``) pulls records in ``(old, new]`` up by one. Records outside
    the range, or without ``orden``, are left alone.
    """
    shifts: dict[str, int] = {}
    if new_orden < old_orden:
        for ident, orden in others:
            if orden is not None and new_orden <= orden < old_orden:
                shifts[ident] = orden + 1
    elif new_orden > old_orden:
        for ident, orden in others:
            if orden is not None and old_orden < orden <= new_orden:
                shifts[ident] = orden - 1
    return shifts


def compaction_shifts(
    remaining: Iterable[tuple[str, Optional[int]]],
    deleted_orden: Optional[int],
) -> dict[str, int]:
    """Close the gap left by deleting the record at ``deleted_orden``."""
    if deleted_orden is None:
        return {}
    return {
        ident: orden - 1
        for ident, orden in remaining
        if orden is not None and orden > deleted_orden
    }


def swap_adjacent(
    ordered: Sequence[tuple[str, Optional[int]]],
    ident: str,
    direction: int,
) -> Optional[dict[str, int]]:
    """Swap ``ident`` with its neighbour in an already sorted list.

    Returns ``None`` when ``ident`` is not in the list, ``{}`` when the
    neighbour would be out of bounds. A missing ``orden`` defaults to the
    record's list index before swapping.
    """
    if direction not in (-1, 1):
        raise ValueError("direction must be -1 or 1")
    index = next((i for i, (rid, _) in enumerate(ordered) if rid == ident), None)
    if index is None:
        return None
    target = index + direction
    if target < 0 or target >= len(ordered):
        return {}
    current_id, current_orden = ordered[index]
    other_id, other_orden = ordered[target]
    if current_orden is None:
        current_orden = index
    if other_orden is None:
        other_orden = target
    return {current_id: other_orden, other_id: current_orden}
