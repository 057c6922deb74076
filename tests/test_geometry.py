import pytest

from slotforge.geometry import border_slots, cell_to_slot, grid_dimensions, slot_to_cell
from slotforge.models import ShapeKind


@pytest.mark.parametrize("rows", [2, 3, 4, 5, 6])
def test_row_border_matches_rectangle_perimeter(rows):
    size = rows * 9
    slots = border_slots(ShapeKind.ROWS, size)
    assert len(slots) == 2 * rows + 2 * (9 - 2)
    assert len(set(slots)) == len(slots)
    assert all(0 <= s < size for s in slots)


def test_single_row_border_is_every_slot():
    assert border_slots(ShapeKind.ROWS, 9) == tuple(range(9))


def test_three_row_border_exact():
    expected = tuple(range(0, 9)) + (9, 17) + tuple(range(18, 27))
    assert border_slots(ShapeKind.ROWS, 27) == expected


def test_interior_of_large_chest_not_in_border():
    slots = set(border_slots(ShapeKind.ROWS, 54))
    for row in range(1, 5):
        for col in range(1, 8):
            assert row * 9 + col not in slots


def test_grid_3x3_excludes_center_regardless_of_size():
    expected = (0, 1, 2, 3, 5, 6, 7, 8)
    assert border_slots(ShapeKind.GRID_3X3, 9) == expected
    assert border_slots(ShapeKind.GRID_3X3, 27) == expected


@pytest.mark.parametrize("size", [5, 0, 27])
def test_hopper_border_is_ends(size):
    assert border_slots(ShapeKind.HOPPER, size) == (0, 4)


def test_other_and_unsupported_sizes_are_empty():
    assert border_slots(ShapeKind.OTHER, 27) == ()
    assert border_slots(ShapeKind.ROWS, 10) == ()
    assert border_slots(ShapeKind.ROWS, 0) == ()


def test_grid_dimensions_and_cells():
    assert grid_dimensions(ShapeKind.ROWS, 36) == (4, 9)
    assert grid_dimensions(ShapeKind.GRID_3X3, 9) == (3, 3)
    assert grid_dimensions(ShapeKind.HOPPER, 5) == (0, 0)
    assert slot_to_cell(17, 9) == (1, 8)
    assert cell_to_slot(1, 8, 9) == 17


def test_string_shape_does_not_shadow_enum_lookup():
    assert border_slots("rows", 27) == border_slots(ShapeKind.ROWS, 27)
    assert len(border_slots(ShapeKind.ROWS, 27)) == 20
    assert border_slots("hopper", 5) == (0, 4)
    assert border_slots(ShapeKind.HOPPER, 5) == (0, 4)


def test_unknown_shape_values_are_empty():
    assert border_slots("pentagon", 27) == ()
    assert border_slots(ShapeKind.ROWS, True) == ()
    assert border_slots(ShapeKind.ROWS, "27") == ()
