"""Tests for Hitori rules."""

import pytest

from pastime.core.difficulty import Difficulty
from pastime.core.hitori import (
    HitoriCell,
    apply_hint,
    apply_shading,
    bank_puzzles,
    check_adjacent_shaded,
    check_connectivity,
    check_duplicates,
    new_game,
    toggle_cell,
    validate,
)
from pastime.core.grid import freeze


def grid_of(values, shaded=()):
    return freeze(
        [[HitoriCell(v, (r, c) in shaded) for c, v in enumerate(row)] for r, row in enumerate(values)]
    )


# Fixtures
@pytest.fixture
def puzzle():
    return bank_puzzles(Difficulty.EASY)[0]


@pytest.fixture
def game(puzzle):
    return new_game(puzzle)


def shade_solution(state):
    for r, row in enumerate(state.puzzle.solution):
        for c, shaded in enumerate(row):
            if shaded:
                state = toggle_cell(state, r, c)
    return state


class TestRules:
    def test_row_duplicate(self):
        grid = grid_of([[1, 2, 1], [2, 3, 4], [3, 4, 2]])
        assert check_duplicates(grid) == [((0, 2), (0, 0))]

    def test_column_duplicate(self):
        grid = grid_of([[1, 2], [1, 3]])
        assert check_duplicates(grid) == [((1, 0), (0, 0))]

    def test_shaded_cells_are_not_duplicates(self):
        grid = grid_of([[1, 2, 1], [2, 3, 4], [3, 4, 2]], shaded={(0, 2)})
        assert check_duplicates(grid) == []

    def test_adjacent_shaded(self):
        grid = grid_of([[1, 1], [2, 3]], shaded={(0, 0), (0, 1)})
        assert check_adjacent_shaded(grid) == [((0, 0), (0, 1))]

    def test_diagonal_shading_allowed(self):
        grid = grid_of([[1, 1], [2, 3]], shaded={(0, 0), (1, 1)})
        assert check_adjacent_shaded(grid) == []

    def test_connectivity(self):
        values = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert check_connectivity(grid_of(values))
        assert check_connectivity(grid_of(values, shaded={(0, 0), (1, 1)}))
        assert not check_connectivity(grid_of(values, shaded={(0, 1), (1, 0)}))

    def test_all_shaded_is_disconnected(self):
        assert not check_connectivity(grid_of([[1]], shaded={(0, 0)}))

    def test_error_cells(self):
        grid = grid_of([[1, 1], [2, 3]], shaded={(1, 0), (1, 1)})
        result = validate(grid)
        assert not result.is_valid
        assert result.error_cells() == {(0, 0), (0, 1), (1, 0), (1, 1)}


class TestGame:
    def test_starts_unshaded(self, game):
        assert not any(cell.is_shaded for row in game.grid for cell in row)
        assert not game.is_complete

    def test_solution_is_valid(self, puzzle):
        assert validate(apply_shading(puzzle, puzzle.solution)).is_valid

    def test_toggle(self, game):
        state = toggle_cell(game, 0, 0)
        assert state.grid[0][0].is_shaded
        state = toggle_cell(state, 0, 0)
        assert not state.grid[0][0].is_shaded

    def test_shading_solution_completes(self, game):
        assert shade_solution(game).is_complete

    def test_complete_game_ignores_toggles(self, game):
        state = shade_solution(game)
        assert toggle_cell(state, 0, 0) is state

    def test_out_of_range_ignored(self, game):
        assert toggle_cell(game, 5, 0) is game

    def test_hint_fixes_wrong_shading(self, game):
        state = toggle_cell(game, 0, 0)
        state, hint = apply_hint(state)
        assert hint == (0, 0)
        assert not state.grid[0][0].is_shaded

    def test_hints_solve_the_puzzle(self, game):
        state = game
        while not state.is_complete:
            state, hint = apply_hint(state)
            assert hint is not None
