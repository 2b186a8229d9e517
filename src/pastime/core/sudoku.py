"""Pure Sudoku rules - board model, backtracking solver, moves and hints."""

import random
from dataclasses import dataclass, replace
from enum import Enum

from .banks import SUDOKU_PUZZLES
from .difficulty import Difficulty, require_supported
from .grid import Grid, freeze, map_grid, replace_cell, thaw

SIZE = 9
BOX = 3
DIFFICULTIES = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


class PuzzleBankError(ValueError):
    """Raised when a puzzle cannot be turned into a playable game."""

    pass


class SudokuStatus(Enum):
    """Lifecycle of a Sudoku game."""

    LOADING = "loading"
    READY = "ready"
    PLAYING = "playing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SudokuCell:
    value: int
    is_fixed: bool
    is_error: bool = False


@dataclass(frozen=True)
class Hint:
    row: int
    col: int
    value: int


@dataclass(frozen=True)
class SudokuState:
    """A game in progress. Every move returns a new state."""

    board: Grid
    solution: Grid
    mistakes: int = 0
    status: SudokuStatus = SudokuStatus.READY

    @property
    def values(self) -> list[list[int]]:
        return board_values(self.board)

    @property
    def is_complete(self) -> bool:
        return self.status == SudokuStatus.COMPLETE


# ============== Board checks ==============


def is_valid_move(values, row: int, col: int, num: int) -> bool:
    """False iff num already appears in the row, column or 3x3 box (ignoring the cell itself)."""
    for x in range(SIZE):
        if x != col and values[row][x] == num:
            return False
        if x != row and values[x][col] == num:
            return False

    box_row = (row // BOX) * BOX
    box_col = (col // BOX) * BOX
    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if (r, c) != (row, col) and values[r][c] == num:
                return False
    return True


def is_board_filled(values) -> bool:
    return all(v != 0 for row in values for v in row)


def is_board_valid(values) -> bool:
    """Check every placed digit against the rest of the board."""
    for r in range(SIZE):
        for c in range(SIZE):
            num = values[r][c]
            if num != 0 and not is_valid_move(values, r, c, num):
                return False
    return True


def is_solved(values) -> bool:
    return is_board_filled(values) and is_board_valid(values)


# ============== Solver ==============


def _find_empty(values) -> tuple[int, int] | None:
    for r in range(SIZE):
        for c in range(SIZE):
            if values[r][c] == 0:
                return r, c
    return None


def _used_digits(values) -> tuple[list[set], list[set], list[set]]:
    rows = [set() for _ in range(SIZE)]
    cols = [set() for _ in range(SIZE)]
    boxes = [set() for _ in range(SIZE)]
    for r in range(SIZE):
        for c in range(SIZE):
            num = values[r][c]
            if num:
                rows[r].add(num)
                cols[c].add(num)
                boxes[(r // BOX) * BOX + c // BOX].add(num)
    return rows, cols, boxes


def _search(values, used, limit: int) -> int:
    """
    Depth-first backtracking over the first empty cell in row-major order.

    Digits are tried in ascending order. Returns the number of solutions found
    (stopping at limit); when it returns >= 1 with limit == 1, values holds the
    first solution.
    """
    empty = _find_empty(values)
    if empty is None:
        return 1

    rows, cols, boxes = used
    row, col = empty
    box = (row // BOX) * BOX + col // BOX
    found = 0

    for num in range(1, SIZE + 1):
        if num in rows[row] or num in cols[col] or num in boxes[box]:
            continue

        values[row][col] = num
        rows[row].add(num)
        cols[col].add(num)
        boxes[box].add(num)

        found += _search(values, used, limit - found)
        if found >= limit:
            return found

        # Backtrack
        values[row][col] = 0
        rows[row].discard(num)
        cols[col].discard(num)
        boxes[box].discard(num)

    return found


def solve(values: list[list[int]]) -> bool:
    """
    Solve a board in place using exhaustive backtracking.

    Returns True and leaves values fully solved when a solution exists;
    returns False and leaves values unchanged otherwise.
    """
    if not is_board_valid(values):
        return False
    return _search(values, _used_digits(values), limit=1) == 1


def count_solutions(values, limit: int = 2) -> int:
    """Count solutions up to limit. Does not modify values."""
    scratch = thaw(values)
    if not is_board_valid(scratch):
        return 0
    return _search(scratch, _used_digits(scratch), limit)


# ============== Generation ==============


def random_bank_puzzle(difficulty: Difficulty, rng: random.Random | None = None) -> list[list[int]]:
    """Pick a bank puzzle for the difficulty and return a mutable deep copy."""
    require_supported("Sudoku", difficulty, DIFFICULTIES)
    rng = rng or random.Random()
    return thaw(rng.choice(SUDOKU_PUZZLES[difficulty]))


def validate_puzzle_shape(puzzle) -> list[list[int]]:
    """Return a 9x9 int copy of puzzle, or raise ValueError describing the problem."""
    if not isinstance(puzzle, (list, tuple)) or len(puzzle) != SIZE:
        raise ValueError("Puzzle must have 9 rows")
    grid = []
    for row in puzzle:
        if not isinstance(row, (list, tuple)) or len(row) != SIZE:
            raise ValueError("Every puzzle row must have 9 cells")
        for v in row:
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= SIZE:
                raise ValueError(f"Invalid cell value: {v!r}")
        grid.append(list(row))
    return grid


def create_initial_board(puzzle) -> Grid:
    """Wrap puzzle digits in cells; every given digit is fixed."""
    return map_grid(puzzle, lambda v: SudokuCell(value=v, is_fixed=v != 0))


def new_game(puzzle) -> SudokuState:
    """Build a READY state, solving a deep copy of the puzzle for the solution."""
    values = validate_puzzle_shape(puzzle)
    solution = thaw(values)
    if not solve(solution):
        raise PuzzleBankError("Puzzle has no solution")
    return SudokuState(board=create_initial_board(values), solution=freeze(solution))


# ============== Moves ==============


def board_values(board: Grid) -> list[list[int]]:
    return [[cell.value for cell in row] for row in board]


def _with_completion(state: SudokuState) -> SudokuState:
    status = SudokuStatus.COMPLETE if is_solved(state.values) else SudokuStatus.PLAYING
    return replace(state, status=status)


def apply_move(state: SudokuState, row: int, col: int, value: int) -> SudokuState:
    """
    Set a cell value. Fixed cells and finished games are left untouched.

    Entering a wrong digit marks the cell as an error and counts a mistake;
    clearing (value 0) never does.
    """
    if state.is_complete or not (0 <= row < SIZE and 0 <= col < SIZE) or not 0 <= value <= SIZE:
        return state
    cell = state.board[row][col]
    if cell.is_fixed:
        return state

    wrong = value != 0 and value != state.solution[row][col]
    board = replace_cell(state.board, row, col, replace(cell, value=value, is_error=wrong))
    mistakes = state.mistakes + 1 if wrong else state.mistakes
    return _with_completion(replace(state, board=board, mistakes=mistakes))


def clear_cell(state: SudokuState, row: int, col: int) -> SudokuState:
    return apply_move(state, row, col, 0)


def get_hint(values, solution) -> Hint | None:
    """First empty cell (row-major) that the solution can fill."""
    for r in range(SIZE):
        for c in range(SIZE):
            if values[r][c] == 0 and solution[r][c] != 0:
                return Hint(r, c, solution[r][c])
    return None


def apply_hint(state: SudokuState) -> tuple[SudokuState, Hint | None]:
    """Fill the next hinted cell. Hints never count as mistakes."""
    if state.is_complete:
        return state, None
    hint = get_hint(state.values, state.solution)
    if hint is None:
        return state, None
    cell = state.board[hint.row][hint.col]
    board = replace_cell(
        state.board, hint.row, hint.col, replace(cell, value=hint.value, is_error=False)
    )
    return _with_completion(replace(state, board=board)), hint
