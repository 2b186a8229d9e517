"""Pure 2048 rules - sliding, merging, spawning and game-over detection."""

import random
from dataclasses import dataclass, replace
from enum import Enum

from .grid import Grid, cells, freeze, make_grid, replace_cell, rotate90

SIZE = 4
WIN_TILE = 2048
FOUR_PROBABILITY = 0.1

# Keyboard shortcuts accepted by Direction.parse (wasd and vi keys)
_KEY_ALIASES = {
    "a": "left", "d": "right", "w": "up", "s": "down",
    "h": "left", "l": "right", "k": "up", "j": "down",
}


class Direction(Enum):
    """Move direction, valued by the clockwise turns that make it a left move."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 3

    @property
    def rotations(self) -> int:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Direction":
        key = (text or "").strip().lower()
        key = _KEY_ALIASES.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {text!r}") from None


@dataclass(frozen=True)
class MoveResult:
    grid: Grid
    moved: bool
    score: int


@dataclass(frozen=True)
class TilesState:
    grid: Grid
    score: int = 0
    best_score: int = 0
    won: bool = False
    game_over: bool = False


def empty_cells(grid) -> list[tuple[int, int]]:
    return [(r, c) for r, c in cells(grid) if grid[r][c] == 0]


def add_random_tile(grid: Grid, rng: random.Random | None = None) -> Grid:
    """Spawn a 2 (90%) or 4 (10%) in a random empty cell. Full grids are returned as-is."""
    rng = rng or random.Random()
    empty = empty_cells(grid)
    if not empty:
        return grid
    row, col = rng.choice(empty)
    value = 4 if rng.random() < FOUR_PROBABILITY else 2
    return replace_cell(grid, row, col, value)


def initialize_grid(rng: random.Random | None = None, size: int = SIZE) -> Grid:
    """Empty board with two spawned tiles."""
    rng = rng or random.Random()
    grid = make_grid(size, size, lambda r, c: 0)
    grid = add_random_tile(grid, rng)
    return add_random_tile(grid, rng)


def merge_line(line) -> tuple[tuple[int, ...], int]:
    """
    Slide one row to the left.

    Zeros are compacted, then equal neighbours merge pairwise from the left;
    a merged tile never merges again in the same move.
    """
    tiles = [v for v in line if v != 0]
    merged = []
    score = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged.append(tiles[i] * 2)
            score += tiles[i] * 2
            i += 2
        else:
            merged.append(tiles[i])
            i += 1
    merged.extend([0] * (len(line) - len(merged)))
    return tuple(merged), score


def move_left(grid) -> MoveResult:
    rows = []
    moved = False
    score = 0
    for row in grid:
        new_row, gained = merge_line(row)
        if new_row != tuple(row):
            moved = True
        score += gained
        rows.append(new_row)
    return MoveResult(grid=freeze(rows), moved=moved, score=score)


def _rotate(grid, times: int) -> Grid:
    grid = freeze(grid)
    for _ in range(times % 4):
        grid = rotate90(grid)
    return grid


def move(grid, direction: Direction) -> MoveResult:
    """Rotate so the move becomes a left move, slide, then rotate back."""
    result = move_left(_rotate(grid, direction.rotations))
    restored = _rotate(result.grid, (4 - direction.rotations) % 4)
    return replace(result, grid=restored)


def check_game_over(grid) -> bool:
    """True when the board is full and no adjacent tiles are equal."""
    rows, cols = len(grid), len(grid[0])
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == 0:
                return False
            if c + 1 < cols and grid[r][c] == grid[r][c + 1]:
                return False
            if r + 1 < rows and grid[r][c] == grid[r + 1][c]:
                return False
    return True


def has_won(grid) -> bool:
    return any(v >= WIN_TILE for row in grid for v in row)


def new_game(rng: random.Random | None = None, best_score: int = 0) -> TilesState:
    return TilesState(grid=initialize_grid(rng), best_score=best_score)


def apply_move(state: TilesState, direction: Direction, rng: random.Random | None = None) -> TilesState:
    """
    Commit a move if it changes the board.

    A committed move spawns a tile and adds its score; a move that changes
    nothing leaves the state untouched.
    """
    if state.game_over:
        return state

    result = move(state.grid, direction)
    if not result.moved:
        return state

    grid = add_random_tile(result.grid, rng)
    score = state.score + result.score
    return TilesState(
        grid=grid,
        score=score,
        best_score=max(state.best_score, score),
        won=state.won or has_won(grid),
        game_over=check_game_over(grid),
    )
