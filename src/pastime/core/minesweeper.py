"""Pure Minesweeper rules - deferred mine placement, cascading reveal, flags."""

import random
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from .difficulty import Difficulty, require_supported
from .grid import Grid, cells, flood_fill, freeze, in_bounds, make_grid, map_grid, neighbors8, replace_cell, thaw


class MinesweeperStatus(Enum):
    """Game phases. FIRST_CLICK means no mines have been placed yet."""

    FIRST_CLICK = "first_click"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class BoardConfig:
    rows: int
    cols: int
    mine_count: int


DIFFICULTIES: dict[Difficulty, BoardConfig] = {
    Difficulty.BEGINNER: BoardConfig(rows=8, cols=8, mine_count=10),
    Difficulty.INTERMEDIATE: BoardConfig(rows=12, cols=12, mine_count=25),
    Difficulty.EXPERT: BoardConfig(rows=14, cols=14, mine_count=40),
}


def config_for(difficulty: Difficulty) -> BoardConfig:
    require_supported("Minesweeper", difficulty, tuple(DIFFICULTIES))
    return DIFFICULTIES[difficulty]


@dataclass(frozen=True)
class MineCell:
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0


@dataclass(frozen=True)
class MinesweeperState:
    config: BoardConfig
    grid: Grid
    status: MinesweeperStatus = MinesweeperStatus.FIRST_CLICK
    flag_count: int = 0

    @property
    def is_initialized(self) -> bool:
        return self.status != MinesweeperStatus.FIRST_CLICK

    @property
    def is_over(self) -> bool:
        return self.status in (MinesweeperStatus.WON, MinesweeperStatus.LOST)

    @property
    def remaining_mines(self) -> int:
        """Mine budget left for flagging."""
        return self.config.mine_count - self.flag_count


def _blank_grid(rows: int, cols: int) -> Grid:
    return make_grid(rows, cols, lambda r, c: MineCell())


def start_new_game(config: BoardConfig) -> MinesweeperState:
    """All-hidden, mine-free board. Mines are placed on the first reveal."""
    return MinesweeperState(config=config, grid=_blank_grid(config.rows, config.cols))


def in_safe_zone(row: int, col: int, safe_row: int, safe_col: int) -> bool:
    """True for the safe cell and its 8 neighbours."""
    return abs(row - safe_row) <= 1 and abs(col - safe_col) <= 1


def count_adjacent_mines(grid, row: int, col: int) -> int:
    return sum(1 for r, c in neighbors8(grid, row, col) if grid[r][c].is_mine)


def generate_board(
    rows: int,
    cols: int,
    mine_count: int,
    safe_row: int,
    safe_col: int,
    rng: random.Random | None = None,
) -> Grid:
    """
    Place mines uniformly at random outside the 3x3 zone around the safe cell.

    Raises:
        ValueError: if mine_count does not fit outside the safe zone.
    """
    rng = rng or random.Random()
    safe_cells = sum(
        1 for r in range(rows) for c in range(cols) if in_safe_zone(r, c, safe_row, safe_col)
    )
    if mine_count < 0 or mine_count > rows * cols - safe_cells:
        raise ValueError(
            f"Cannot place {mine_count} mines on a {rows}x{cols} board with a {safe_cells}-cell safe zone"
        )

    mines: set[tuple[int, int]] = set()
    while len(mines) < mine_count:
        row = rng.randrange(rows)
        col = rng.randrange(cols)
        if (row, col) in mines or in_safe_zone(row, col, safe_row, safe_col):
            continue
        mines.add((row, col))

    mined = make_grid(rows, cols, lambda r, c: MineCell(is_mine=(r, c) in mines))
    return make_grid(
        rows,
        cols,
        lambda r, c: mined[r][c]
        if mined[r][c].is_mine
        else replace(mined[r][c], adjacent_mines=count_adjacent_mines(mined, r, c)),
    )


def check_win(grid) -> bool:
    """Won when every non-mine cell is revealed."""
    return all(cell.is_revealed for row in grid for cell in row if not cell.is_mine)


def _reveal_all_mines(grid: Grid) -> Grid:
    return map_grid(grid, lambda cell: replace(cell, is_revealed=True) if cell.is_mine else cell)


def cascade_region(grid, row: int, col: int) -> set[tuple[int, int]]:
    """
    Cells uncovered by revealing a zero-count cell.

    The 8-connected region of hidden, unflagged zero-count cells plus every
    hidden, unflagged cell bordering it. Numbered border cells do not spread.
    """

    def is_open_zero(r: int, c: int) -> bool:
        cell = grid[r][c]
        return not cell.is_revealed and not cell.is_flagged and not cell.is_mine and cell.adjacent_mines == 0

    zeros = flood_fill(grid, (row, col), is_open_zero, neighbors=neighbors8)
    region = set(zeros)
    for r, c in zeros:
        for nr, nc in neighbors8(grid, r, c):
            neighbor = grid[nr][nc]
            if not neighbor.is_revealed and not neighbor.is_flagged:
                region.add((nr, nc))
    return region


def reveal(
    state: MinesweeperState,
    row: int,
    col: int,
    rng: random.Random | None = None,
) -> MinesweeperState:
    """
    Reveal a cell. The first reveal of a game places the mines around it.

    Revealed and flagged cells, out-of-range coordinates and finished games are
    ignored.
    """
    if state.is_over or not in_bounds(state.grid, row, col):
        return state

    if not state.is_initialized:
        cfg = state.config
        grid = generate_board(cfg.rows, cfg.cols, cfg.mine_count, row, col, rng)
        state = replace(state, grid=grid, status=MinesweeperStatus.PLAYING)

    grid = state.grid
    cell = grid[row][col]
    if cell.is_revealed or cell.is_flagged:
        return state

    if cell.is_mine:
        grid = _reveal_all_mines(replace_cell(grid, row, col, replace(cell, is_revealed=True)))
        return replace(state, grid=grid, status=MinesweeperStatus.LOST)

    if cell.adjacent_mines == 0:
        to_reveal = cascade_region(grid, row, col)
        mutable = thaw(grid)
        for r, c in to_reveal:
            mutable[r][c] = replace(mutable[r][c], is_revealed=True)
        grid = freeze(mutable)
    else:
        grid = replace_cell(grid, row, col, replace(cell, is_revealed=True))

    status = MinesweeperStatus.WON if check_win(grid) else MinesweeperStatus.PLAYING
    return replace(state, grid=grid, status=status)


def toggle_flag(state: MinesweeperState, row: int, col: int) -> MinesweeperState:
    """
    Flag or unflag a hidden cell while playing.

    New flags are refused once the flag count reaches the mine count.
    """
    if state.status != MinesweeperStatus.PLAYING or not in_bounds(state.grid, row, col):
        return state

    cell = state.grid[row][col]
    if cell.is_revealed:
        return state

    if cell.is_flagged:
        flag_count = state.flag_count - 1
    elif state.flag_count < state.config.mine_count:
        flag_count = state.flag_count + 1
    else:
        return state

    grid = replace_cell(state.grid, row, col, replace(cell, is_flagged=not cell.is_flagged))
    return replace(state, grid=grid, flag_count=flag_count)


def mine_positions(grid) -> set[tuple[int, int]]:
    return {(r, c) for r, c in cells(grid) if grid[r][c].is_mine}


class GameTimer:
    """
    Whole-second stopwatch for a single game.

    start() only takes effect once; stop() freezes the reading the first time
    it is called and is ignored afterwards.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._started_at: float | None = None
        self._stopped_at: float | None = None

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    @property
    def stopped(self) -> bool:
        return self._stopped_at is not None

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None and self._stopped_at is None:
            self._stopped_at = self._clock()

    @property
    def elapsed(self) -> int:
        if self._started_at is None:
            return 0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return int(end - self._started_at)
