import pytest

from maze import Cell, Direction, InvalidLinkError, Point


def test_point_offsets_follow_screen_coordinates():
    p = Point(3, 4)
    assert p.north() == Point(3, 3)
    assert p.south() == Point(3, 5)
    assert p.east() == Point(4, 4)
    assert p.west() == Point(2, 4)
    for direction in Direction:
        assert p.step(direction) == p + direction.offset
        assert p.step(direction).step(direction.opposite) == p


def test_point_arithmetic_is_vector_not_tuple_concat():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
    assert Point.zero() == (0, 0)


def test_direction_to_only_for_unit_steps():
    p = Point(0, 0)
    assert p.direction_to(Point(0, -1)) is Direction.NORTH
    assert p.direction_to(Point(1, 0)) is Direction.EAST
    assert p.direction_to(Point(1, 1)) is None
    assert p.direction_to(Point(0, 0)) is None
    assert not p.is_adjacent(Point(2, 0))


def test_cell_links_reported_north_south_east_west():
    cell = Cell(Point(1, 1))
    cell.link(Point(0, 1))
    cell.link(Point(2, 1))
    cell.link(Point(1, 2))
    cell.link(Point(1, 0))
    assert cell.links() == [Point(1, 0), Point(1, 2), Point(2, 1), Point(0, 1)]
    assert cell.visited


def test_cell_rejects_non_adjacent_and_self_links():
    cell = Cell(Point(1, 1))
    with pytest.raises(InvalidLinkError):
        cell.link(Point(3, 1))
    with pytest.raises(InvalidLinkError):
        cell.link(Point(1, 1))
    assert cell.links() == []
    assert not cell.visited


def test_is_linked_handles_absent_cells():
    a, b = Cell(Point(0, 0)), Cell(Point(1, 0))
    assert not a.is_linked(None)
    a.link(b.point)
    assert a.is_linked(b)
    assert not b.is_linked(a)  # cells do not enforce symmetry themselves
    assert a.is_linked_towards(Direction.EAST)


def test_slot_returns_the_live_neighbor_slot():
    cell = Cell(Point(2, 2))
    for direction in Direction:
        slot = cell.slot(direction)
        assert slot.point == cell.point.step(direction)
        assert slot is cell.slot(direction)
    cell.slot(Direction.SOUTH).linked = True
    assert cell.links() == [Point(2, 3)]
    assert cell.is_linked_towards(Direction.SOUTH)
