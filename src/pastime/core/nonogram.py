"""Pure Nonogram rules - clue checking, cell cycling, completion and hints."""

import random
from dataclasses import dataclass, replace
from enum import Enum

from .banks import NONOGRAM_PUZZLES
from .difficulty import Difficulty, require_supported
from .grid import Grid, cells, freeze, make_grid, replace_cell

DIFFICULTIES = (Difficulty.EASY, Difficulty.MEDIUM)


class CellState(Enum):
    EMPTY = "empty"
    FILLED = "filled"
    MARKED = "marked"  # Player's "definitely blank" note


_NEXT_STATE = {
    CellState.EMPTY: CellState.FILLED,
    CellState.FILLED: CellState.MARKED,
    CellState.MARKED: CellState.EMPTY,
}


@dataclass(frozen=True)
class NonogramPuzzle:
    row_clues: tuple[tuple[int, ...], ...]
    col_clues: tuple[tuple[int, ...], ...]
    solution: Grid

    @property
    def rows(self) -> int:
        return len(self.solution)

    @property
    def cols(self) -> int:
        return len(self.solution[0])

    def columns(self) -> list[tuple[int, ...]]:
        return [tuple(row[c] for row in self.solution) for c in range(self.cols)]


@dataclass(frozen=True)
class NonogramState:
    puzzle: NonogramPuzzle
    grid: Grid
    mistakes: int = 0
    is_complete: bool = False


def clues_for_line(values) -> tuple[int, ...]:
    """Run lengths of consecutive 1s in a solution line."""
    runs = []
    current = 0
    for v in values:
        if v:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return tuple(runs)


def line_runs(line) -> tuple[int, ...]:
    """Run lengths of FILLED cells; EMPTY and MARKED both count as gaps."""
    return clues_for_line(state == CellState.FILLED for state in line)


def validate_line(line, clues) -> bool:
    return line_runs(line) == tuple(clues)


def bank_puzzles(difficulty: Difficulty) -> list[NonogramPuzzle]:
    require_supported("Nonogram", difficulty, DIFFICULTIES)
    return [
        NonogramPuzzle(row_clues=freeze(rows), col_clues=freeze(cols), solution=freeze(solution))
        for rows, cols, solution in NONOGRAM_PUZZLES[difficulty]
    ]


def random_puzzle(difficulty: Difficulty, rng: random.Random | None = None) -> NonogramPuzzle:
    rng = rng or random.Random()
    return rng.choice(bank_puzzles(difficulty))


def new_game(puzzle: NonogramPuzzle) -> NonogramState:
    grid = make_grid(puzzle.rows, puzzle.cols, lambda r, c: CellState.EMPTY)
    return NonogramState(puzzle=puzzle, grid=grid)


def check_completion(puzzle: NonogramPuzzle, grid) -> bool:
    """Every line matches its clues AND the fill pattern equals the authored solution."""
    for r in range(puzzle.rows):
        if not validate_line(grid[r], puzzle.row_clues[r]):
            return False
    for c in range(puzzle.cols):
        if not validate_line([row[c] for row in grid], puzzle.col_clues[c]):
            return False
    return all(
        (grid[r][c] == CellState.FILLED) == bool(puzzle.solution[r][c])
        for r, c in cells(puzzle.solution)
    )


def _set_state(state: NonogramState, row: int, col: int, new: CellState, mistakes: int) -> NonogramState:
    grid = replace_cell(state.grid, row, col, new)
    return replace(
        state,
        grid=grid,
        mistakes=mistakes,
        is_complete=check_completion(state.puzzle, grid),
    )


def _playable(state: NonogramState, row: int, col: int) -> bool:
    return not state.is_complete and 0 <= row < state.puzzle.rows and 0 <= col < state.puzzle.cols


def handle_cell_press(state: NonogramState, row: int, col: int) -> NonogramState:
    """Cycle empty -> filled -> marked -> empty. Filling a blank cell counts a mistake."""
    if not _playable(state, row, col):
        return state
    new = _NEXT_STATE[state.grid[row][col]]
    mistakes = state.mistakes
    if new == CellState.FILLED and not state.puzzle.solution[row][col]:
        mistakes += 1
    return _set_state(state, row, col, new, mistakes)


def handle_cell_long_press(state: NonogramState, row: int, col: int) -> NonogramState:
    """Toggle the marked state directly, skipping filled."""
    if not _playable(state, row, col):
        return state
    new = CellState.EMPTY if state.grid[row][col] == CellState.MARKED else CellState.MARKED
    return _set_state(state, row, col, new, state.mistakes)


def find_hint(state: NonogramState) -> tuple[int, int] | None:
    for r, c in cells(state.puzzle.solution):
        if state.puzzle.solution[r][c] and state.grid[r][c] != CellState.FILLED:
            return r, c
    return None


def apply_hint(state: NonogramState) -> tuple[NonogramState, tuple[int, int] | None]:
    """Fill the first cell the solution needs filled."""
    if state.is_complete:
        return state, None
    hint = find_hint(state)
    if hint is None:
        return state, None
    row, col = hint
    return _set_state(state, row, col, CellState.FILLED, state.mistakes), hint
