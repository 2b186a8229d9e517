"""Tests for shared grid helpers."""

from pastime.core.grid import (
    cells,
    flood_fill,
    freeze,
    in_bounds,
    make_grid,
    neighbors4,
    neighbors8,
    replace_cell,
    rotate90,
    thaw,
)


class TestNeighbors:
    def test_corner_has_two_orthogonal_neighbors(self):
        grid = make_grid(3, 3, lambda r, c: 0)
        assert sorted(neighbors4(grid, 0, 0)) == [(0, 1), (1, 0)]

    def test_corner_has_three_surrounding_neighbors(self):
        grid = make_grid(3, 3, lambda r, c: 0)
        assert sorted(neighbors8(grid, 0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_center_has_all_neighbors(self):
        grid = make_grid(3, 3, lambda r, c: 0)
        assert len(neighbors4(grid, 1, 1)) == 4
        assert len(neighbors8(grid, 1, 1)) == 8

    def test_in_bounds(self):
        grid = make_grid(2, 3, lambda r, c: 0)
        assert in_bounds(grid, 1, 2)
        assert not in_bounds(grid, 2, 0)
        assert not in_bounds(grid, 0, -1)


class TestFloodFill:
    def test_stays_inside_walls(self):
        grid = (
            (0, 1, 0),
            (0, 1, 0),
            (0, 1, 0),
        )
        region = flood_fill(grid, (0, 0), lambda r, c: grid[r][c] == 0)
        assert region == {(0, 0), (1, 0), (2, 0)}

    def test_diagonal_gap_needs_eight_neighbors(self):
        grid = (
            (0, 1),
            (1, 0),
        )
        passable = lambda r, c: grid[r][c] == 0  # noqa: E731
        assert flood_fill(grid, (0, 0), passable) == {(0, 0)}
        assert flood_fill(grid, (0, 0), passable, neighbors=neighbors8) == {(0, 0), (1, 1)}

    def test_impassable_start_is_empty(self):
        grid = ((1,),)
        assert flood_fill(grid, (0, 0), lambda r, c: grid[r][c] == 0) == set()

    def test_large_open_board(self):
        grid = make_grid(100, 100, lambda r, c: 0)
        assert len(flood_fill(grid, (50, 50), lambda r, c: True)) == 10_000


class TestTransforms:
    def test_rotate_clockwise(self):
        grid = ((1, 2), (3, 4))
        assert rotate90(grid) == ((3, 1), (4, 2))

    def test_four_rotations_is_identity(self):
        grid = ((1, 2, 3), (4, 5, 6))
        result = grid
        for _ in range(4):
            result = rotate90(result)
        assert result == grid

    def test_replace_cell_leaves_original(self):
        grid = freeze([[1, 2], [3, 4]])
        updated = replace_cell(grid, 1, 0, 9)
        assert updated == ((1, 2), (9, 4))
        assert grid == ((1, 2), (3, 4))

    def test_thaw_is_deep_copy(self):
        grid = ((1, 2), (3, 4))
        copy = thaw(grid)
        copy[0][0] = 7
        assert grid[0][0] == 1

    def test_cells_row_major(self):
        assert list(cells(((0, 0), (0, 0)))) == [(0, 0), (0, 1), (1, 0), (1, 1)]
