# tests/test_grid.py
import pytest

from snake_engine.grid import Direction, Point, in_interior, is_border, shift


@pytest.mark.parametrize("d", list(Direction))
def test_opposite_is_an_involution(d):
    assert d.opposite() != d
    assert d.opposite().opposite() == d


def test_point_equality_by_value():
    assert Point(3, 4) == Point(3, 4)
    assert Point(3, 4) == (3, 4)
    assert len({Point(1, 1), Point(1, 1)}) == 1


def test_shift_moves_one_cell():
    p = Point(5, 5)
    assert shift(p, Direction.UP) == (5, 4)
    assert shift(p, Direction.DOWN) == (5, 6)
    assert shift(p, Direction.LEFT) == (4, 5)
    assert shift(p, Direction.RIGHT) == (6, 5)


def test_shift_saturates_at_zero():
    assert shift(Point(0, 3), Direction.LEFT) == (0, 3)
    assert shift(Point(3, 0), Direction.UP) == (3, 0)


def test_border_and_interior():
    w, h = 20, 15
    for p in [(0, 7), (19, 7), (10, 0), (10, 14)]:
        assert is_border(Point(*p), w, h)
        assert not in_interior(Point(*p), w, h)
    for p in [(1, 1), (18, 13), (10, 7)]:
        assert not is_border(Point(*p), w, h)
        assert in_interior(Point(*p), w, h)
