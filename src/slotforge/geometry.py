"""Border geometry for slot-indexed surfaces.

Row based surfaces are 9 slots wide; dispenser-like surfaces are a fixed 3x3
grid; hoppers are a single row of 5 whose "border" is just the two ends.
Everything else has no border.

Rules applied to a ``rows x per_row`` grid of ``size`` slots:
  - first and last slot of every row
  - interior of the first row (``1 .. per_row - 2``)
  - bridging segment ``size - 2 .. (rows - 1) * per_row + 1`` (only when ascending)
  - the whole last row
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .config.settings import HOPPER_BORDER, SLOTS_PER_ROW
from .models import ShapeKind

__all__ = ["border_slots", "grid_dimensions", "slot_to_cell", "cell_to_slot"]

Cell = Tuple[int, int]


def grid_dimensions(shape: ShapeKind, size: int) -> Tuple[int, int]:
    """Return ``(rows, per_row)`` for a shape, or ``(0, 0)`` when it has no grid."""
    if shape is ShapeKind.ROWS:
        if size <= 0 or size % SLOTS_PER_ROW:
            return (0, 0)
        return (size // SLOTS_PER_ROW, SLOTS_PER_ROW)
    if shape is ShapeKind.GRID_3X3:
        return (3, 3)
    return (0, 0)


def _rectangle_border(rows: int, per_row: int) -> Tuple[int, ...]:
    size = rows * per_row
    slots: set[int] = set()
    for r in range(rows):
        slots.add(r * per_row)
        slots.add(r * per_row + per_row - 1)
    slots.update(range(1, per_row - 1))
    slots.update(range(size - 2, (rows - 1) * per_row + 2))
    slots.update(range(size - per_row, size))
    return tuple(sorted(slots))


def border_slots(shape: ShapeKind | str, size: int) -> Tuple[int, ...]:
    """Sorted border slot indexes for ``shape``/``size``; empty when unsupported.

    ``shape`` may be a `ShapeKind` or its string value. It is normalised before
    the cache is consulted so ``"rows"`` and ``ShapeKind.ROWS`` share one entry.
    """
    try:
        kind = ShapeKind(shape)
    except ValueError:
        return ()
    if isinstance(size, bool) or not isinstance(size, int):
        return ()
    return _border_slots(kind, size)


@lru_cache(maxsize=64)
def _border_slots(shape: ShapeKind, size: int) -> Tuple[int, ...]:
    if shape is ShapeKind.HOPPER:
        return HOPPER_BORDER
    rows, per_row = grid_dimensions(shape, size)
    if rows == 0:
        return ()
    return _rectangle_border(rows, per_row)


def slot_to_cell(slot: int, per_row: int) -> Cell:
    return divmod(slot, per_row)


def cell_to_slot(row: int, col: int, per_row: int) -> int:
    return row * per_row + col
