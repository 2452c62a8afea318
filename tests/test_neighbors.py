"""Tests for neighbor enumeration on unwrapped grids.

Checks counts at corners, edges and interior cells, the documented
clockwise ordering, directional lookups, and that nothing wraps around.
"""

import pytest

from gridindex.core.boundary import corners, interior_indices
from gridindex.core.errors import CoordinateOutOfBounds, IndexOutOfBounds
from gridindex.core.grid import GridDescriptor
from gridindex.core.neighbors import (
    has_full_neighbor_set, iter_neighbors, neighbor_count, neighbor_in_direction,
    neighbor_indices, neighbors, neighbors_of_index, offsets_for,
)
from gridindex.core.types import Direction, NeighborMode

FOUR = NeighborMode.FOUR_CONNECTED
EIGHT = NeighborMode.EIGHT_CONNECTED


class TestOffsetTables:
    """Test the fixed enumeration order."""

    def test_eight_connected_order(self):
        """Clockwise starting at the right-hand neighbor."""
        assert offsets_for(EIGHT) == (
            (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))

    def test_four_connected_order(self):
        assert offsets_for(FOUR) == ((1, 0), (0, 1), (-1, 0), (0, -1))

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown neighbor mode"):
            offsets_for(6)


class TestThreeByThree:
    """Neighbor counts on the smallest grid with an interior cell."""

    def test_corner_neighbors(self):
        grid = GridDescriptor(3, 3)
        assert neighbors(grid, (0, 0), EIGHT) == [(1, 0), (1, 1), (0, 1)]
        assert neighbors(grid, (0, 0), FOUR) == [(1, 0), (0, 1)]

    def test_edge_neighbors(self):
        grid = GridDescriptor(3, 3)
        result = neighbors(grid, (1, 0), EIGHT)
        assert len(result) == 5
        assert set(result) == {(2, 0), (2, 1), (1, 1), (0, 1), (0, 0)}
        assert len(neighbors(grid, (1, 0), FOUR)) == 3

    def test_interior_neighbors(self):
        grid = GridDescriptor(3, 3)
        result = neighbors(grid, (1, 1), EIGHT)
        assert result == [(2, 1), (2, 2), (1, 2), (0, 2), (0, 1), (0, 0), (1, 0), (2, 0)]
        assert has_full_neighbor_set(grid, (1, 1), EIGHT)
        assert has_full_neighbor_set(grid, (1, 1), FOUR)

    def test_boundary_cells_not_full(self):
        grid = GridDescriptor(3, 3)
        for y in range(3):
            for x in range(3):
                if (x, y) != (1, 1):
                    assert not has_full_neighbor_set(grid, (x, y), EIGHT)
                    assert not has_full_neighbor_set(grid, (x, y), FOUR)

    def test_default_mode_is_eight(self):
        grid = GridDescriptor(3, 3)
        assert neighbors(grid, (1, 1)) == neighbors(grid, (1, 1), EIGHT)


class TestDegenerateGrids:
    """Strips and the 2x2 grid."""

    def test_two_by_two(self):
        """Every cell sees the other three."""
        grid = GridDescriptor(2, 2)
        for i in range(4):
            others = sorted(set(range(4)) - {i})
            assert sorted(neighbors_of_index(grid, i, EIGHT)) == others
            assert len(neighbors_of_index(grid, i, FOUR)) == 2

    def test_strip_counts(self):
        grid = GridDescriptor(2, 5)
        assert neighbor_count(grid, (0, 0), EIGHT) == 3
        assert neighbor_count(grid, (0, 2), EIGHT) == 5
        assert neighbor_count(grid, (0, 0), FOUR) == 2
        assert neighbor_count(grid, (1, 2), FOUR) == 3

    def test_strip_never_full(self):
        grid = GridDescriptor(2, 5)
        for y in range(5):
            for x in range(2):
                assert not has_full_neighbor_set(grid, (x, y), EIGHT)


class TestNoWraparound:
    """Cells on opposite boundaries are never neighbors."""

    def test_left_edge_does_not_reach_right_edge(self):
        grid = GridDescriptor(5, 5)
        result = neighbors(grid, (0, 2), EIGHT)
        assert all(x <= 1 for x, _ in result)

    def test_previous_row_end_not_a_neighbor(self):
        """Index 5 on a 5-wide grid starts row 1; index 4 ends row 0."""
        grid = GridDescriptor(5, 3)
        assert 4 not in neighbors_of_index(grid, 5, EIGHT)
        assert neighbor_in_direction(grid, 5, Direction.LEFT) is None

    def test_top_row_has_no_up(self):
        grid = GridDescriptor(4, 4)
        for i in range(4):
            assert neighbor_in_direction(grid, i, Direction.UP) is None


class TestIndexForms:
    """Index-returning variants agree with coordinate enumeration."""

    def test_neighbor_indices(self):
        grid = GridDescriptor(4, 3)
        # (1, 1) is index 5
        assert neighbor_indices(grid, (1, 1), FOUR) == [6, 9, 4, 1]
        assert neighbors_of_index(grid, 5, FOUR) == [6, 9, 4, 1]

    def test_iter_neighbors_validates_eagerly(self):
        """Bad input fails at call time, not on first iteration."""
        grid = GridDescriptor(3, 3)
        with pytest.raises(CoordinateOutOfBounds):
            iter_neighbors(grid, (5, 5))

    def test_invalid_inputs(self):
        grid = GridDescriptor(3, 3)
        with pytest.raises(CoordinateOutOfBounds):
            neighbors(grid, (-1, 0))
        with pytest.raises(IndexOutOfBounds):
            neighbors_of_index(grid, 9)
        with pytest.raises(IndexOutOfBounds):
            neighbor_in_direction(grid, -1, Direction.RIGHT)


@pytest.mark.parametrize("width,height", [
    (8, 8), (8, 4), (2, 2), (8, 7), (5, 3), (12, 10), (10, 5), (20, 20), (123, 115),
])
class TestDirectionalNeighbors:
    """Directional lookups at the four corners and the interior."""

    def test_corner_directions(self, width, height):
        g = GridDescriptor(width, height)
        w = g.width
        tl, tr, bl, br = (g.top_left_corner, g.top_right_corner,
                          g.bottom_left_corner, g.bottom_right_corner)

        expected = {
            tl: {Direction.RIGHT: tl + 1, Direction.DOWN_RIGHT: tl + w + 1,
                 Direction.DOWN: tl + w},
            tr: {Direction.DOWN: tr + w, Direction.DOWN_LEFT: tr + w - 1,
                 Direction.LEFT: tr - 1},
            bl: {Direction.RIGHT: bl + 1, Direction.UP: bl - w,
                 Direction.UP_RIGHT: bl - w + 1},
            br: {Direction.LEFT: br - 1, Direction.UP_LEFT: br - w - 1,
                 Direction.UP: br - w},
        }
        for corner, present in expected.items():
            for direction in Direction:
                assert neighbor_in_direction(g, corner, direction) == present.get(direction)

    def test_interior_directions(self, width, height):
        g = GridDescriptor(width, height)
        w = g.width
        for i in interior_indices(g):
            assert neighbor_in_direction(g, i, Direction.RIGHT) == i + 1
            assert neighbor_in_direction(g, i, Direction.DOWN_RIGHT) == i + w + 1
            assert neighbor_in_direction(g, i, Direction.DOWN) == i + w
            assert neighbor_in_direction(g, i, Direction.DOWN_LEFT) == i + w - 1
            assert neighbor_in_direction(g, i, Direction.LEFT) == i - 1
            assert neighbor_in_direction(g, i, Direction.UP_LEFT) == i - w - 1
            assert neighbor_in_direction(g, i, Direction.UP) == i - w
            assert neighbor_in_direction(g, i, Direction.UP_RIGHT) == i - w + 1

    def test_corner_counts(self, width, height):
        g = GridDescriptor(width, height)
        for corner in corners(g):
            assert neighbor_count(g, corner, FOUR) == 2
            assert neighbor_count(g, corner, EIGHT) == 3

    def test_directions_match_enumeration(self, width, height):
        """Non-None directional lookups, in Direction order, equal neighbors_of_index."""
        g = GridDescriptor(width, height)
        for i in (0, g.cell_count // 2, g.cell_count - 1):
            looked_up = [neighbor_in_direction(g, i, d) for d in Direction]
            assert [n for n in looked_up if n is not None] == neighbors_of_index(g, i, EIGHT)
