"""Pure Hitori rules - duplicate, adjacency and connectivity checks."""

import random
from dataclasses import dataclass, field, replace

from .banks import HITORI_PUZZLES
from .difficulty import Difficulty, require_supported
from .grid import Coord, Grid, cells, flood_fill, freeze, in_bounds, map_grid, replace_cell

DIFFICULTIES = (Difficulty.EASY, Difficulty.MEDIUM)


@dataclass(frozen=True)
class HitoriCell:
    value: int
    is_shaded: bool = False


@dataclass(frozen=True)
class HitoriPuzzle:
    initial: Grid
    solution: Grid

    @property
    def size(self) -> int:
        return len(self.initial)


@dataclass(frozen=True)
class HitoriValidation:
    """Result of the three shading rules."""

    duplicates: list[tuple[Coord, Coord]] = field(default_factory=list)
    adjacent: list[tuple[Coord, Coord]] = field(default_factory=list)
    connected: bool = True

    @property
    def is_valid(self) -> bool:
        return not self.duplicates and not self.adjacent and self.connected

    def error_cells(self) -> set[Coord]:
        """Every cell involved in a duplicate or adjacency error."""
        return {coord for pair in self.duplicates + self.adjacent for coord in pair}


@dataclass(frozen=True)
class HitoriState:
    puzzle: HitoriPuzzle
    grid: Grid
    is_complete: bool = False


def bank_puzzles(difficulty: Difficulty) -> list[HitoriPuzzle]:
    require_supported("Hitori", difficulty, DIFFICULTIES)
    return [
        HitoriPuzzle(initial=freeze(initial), solution=freeze(solution))
        for initial, solution in HITORI_PUZZLES[difficulty]
    ]


def random_puzzle(difficulty: Difficulty, rng: random.Random | None = None) -> HitoriPuzzle:
    rng = rng or random.Random()
    return rng.choice(bank_puzzles(difficulty))


def new_game(puzzle: HitoriPuzzle) -> HitoriState:
    return HitoriState(puzzle=puzzle, grid=map_grid(puzzle.initial, lambda v: HitoriCell(value=v)))


def apply_shading(puzzle: HitoriPuzzle, shading) -> Grid:
    """Grid for the puzzle's numbers with the given shading applied."""
    return freeze(
        [
            [HitoriCell(value=v, is_shaded=bool(shading[r][c])) for c, v in enumerate(row)]
            for r, row in enumerate(puzzle.initial)
        ]
    )


def check_duplicates(grid) -> list[tuple[Coord, Coord]]:
    """
    Repeated values among unshaded cells.

    Each row and column is scanned independently; a repeat is reported as
    (repeat, first occurrence).
    """
    errors = []
    rows, cols = len(grid), len(grid[0]) if grid else 0

    for r in range(rows):
        seen: dict[int, int] = {}
        for c in range(cols):
            cell = grid[r][c]
            if cell.is_shaded:
                continue
            if cell.value in seen:
                errors.append(((r, c), (r, seen[cell.value])))
            else:
                seen[cell.value] = c

    for c in range(cols):
        seen = {}
        for r in range(rows):
            cell = grid[r][c]
            if cell.is_shaded:
                continue
            if cell.value in seen:
                errors.append(((r, c), (seen[cell.value], c)))
            else:
                seen[cell.value] = r

    return errors


def check_adjacent_shaded(grid) -> list[tuple[Coord, Coord]]:
    """Pairs of orthogonally touching shaded cells, each pair reported once."""
    errors = []
    for r, c in cells(grid):
        if not grid[r][c].is_shaded:
            continue
        # Right and down only, so no pair is seen twice
        for nr, nc in ((r, c + 1), (r + 1, c)):
            if in_bounds(grid, nr, nc) and grid[nr][nc].is_shaded:
                errors.append(((r, c), (nr, nc)))
    return errors


def check_connectivity(grid) -> bool:
    """All unshaded cells form one orthogonally connected region. All-shaded is not connected."""
    unshaded = [(r, c) for r, c in cells(grid) if not grid[r][c].is_shaded]
    if not unshaded:
        return False
    reachable = flood_fill(grid, unshaded[0], lambda r, c: not grid[r][c].is_shaded)
    return len(reachable) == len(unshaded)


def validate(grid) -> HitoriValidation:
    return HitoriValidation(
        duplicates=check_duplicates(grid),
        adjacent=check_adjacent_shaded(grid),
        connected=check_connectivity(grid),
    )


def matches_solution(puzzle: HitoriPuzzle, grid) -> bool:
    return all(grid[r][c].is_shaded == bool(puzzle.solution[r][c]) for r, c in cells(grid))


def is_solved(puzzle: HitoriPuzzle, grid) -> bool:
    """Rules satisfied AND shading identical to the authored solution."""
    return validate(grid).is_valid and matches_solution(puzzle, grid)


def toggle_cell(state: HitoriState, row: int, col: int) -> HitoriState:
    """Flip a cell's shading. Rules are reported, never enforced, on toggle."""
    if state.is_complete or not in_bounds(state.grid, row, col):
        return state
    cell = state.grid[row][col]
    grid = replace_cell(state.grid, row, col, replace(cell, is_shaded=not cell.is_shaded))
    return replace(state, grid=grid, is_complete=is_solved(state.puzzle, grid))


def find_hint(state: HitoriState) -> Coord | None:
    for r, c in cells(state.grid):
        if state.grid[r][c].is_shaded != bool(state.puzzle.solution[r][c]):
            return r, c
    return None


def apply_hint(state: HitoriState) -> tuple[HitoriState, Coord | None]:
    """Correct the first cell whose shading differs from the solution."""
    if state.is_complete:
        return state, None
    hint = find_hint(state)
    if hint is None:
        return state, None
    return toggle_cell(state, *hint), hint
