"""Shared session layer between the CLI and tests.

Wires the pure engines to their collaborators: puzzle sources with a local
fallback, the key-value store for best scores, and the Minesweeper clock.
"""

import logging
import random
import time
from pathlib import Path
from typing import Callable

from .adapters.json_store import JsonFileStore
from .adapters.sugoku_api import SugokuPuzzleSource
from .config import DATA_DIR, Config
from .core import hitori, minesweeper, nonogram, sudoku, tiles
from .core.banks import HITORI_PUZZLES, NONOGRAM_PUZZLES, SUDOKU_PUZZLES
from .core.difficulty import Difficulty
from .core.minesweeper import BoardConfig, GameTimer, MinesweeperState
from .core.sudoku import SudokuState, SudokuStatus
from .core.tiles import Direction, TilesState
from .ports.persistence import PersistenceStore
from .ports.puzzle_source import PuzzleSource, PuzzleSourceError

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "best_score"


def get_store(config: Config) -> JsonFileStore:
    """Resolve the store file from config."""
    if config.store_file:
        return JsonFileStore(Path(config.store_file).expanduser())
    return JsonFileStore(DATA_DIR / "store.json")


def get_puzzle_source(config: Config) -> PuzzleSource | None:
    """Remote Sudoku source, or None when disabled in config."""
    if not config.use_puzzle_api:
        return None
    return SugokuPuzzleSource(url=config.puzzle_api_url, timeout=config.puzzle_api_timeout)


# ============== Sudoku ==============


def fetch_sudoku_puzzle(
    difficulty: Difficulty,
    source: PuzzleSource | None = None,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """
    Get a puzzle from the source, falling back to the local bank.

    A source error, a malformed board or a board with no solution all fall
    back silently (logged at WARNING). Errors from the bank itself propagate.
    """
    if source is not None:
        try:
            puzzle = sudoku.validate_puzzle_shape(source.fetch(difficulty))
            if sudoku.count_solutions(puzzle, limit=1) == 0:
                raise ValueError("Puzzle has no solution")
            return puzzle
        except (PuzzleSourceError, ValueError) as e:
            logger.warning(f"Puzzle source failed, using local bank: {e}")

    return sudoku.random_bank_puzzle(difficulty, rng)


def new_sudoku_game(
    difficulty: Difficulty,
    source: PuzzleSource | None = None,
    rng: random.Random | None = None,
) -> SudokuState:
    puzzle = fetch_sudoku_puzzle(difficulty, source, rng)
    return sudoku.new_game(puzzle)


class SudokuSession:
    """A Sudoku game that reports LOADING until its puzzle is in hand."""

    def __init__(
        self,
        difficulty: Difficulty,
        source: PuzzleSource | None = None,
        rng: random.Random | None = None,
    ):
        self.difficulty = difficulty
        self._source = source
        self._rng = rng
        self.state: SudokuState | None = None

    @property
    def status(self) -> SudokuStatus:
        if self.state is None:
            return SudokuStatus.LOADING
        return self.state.status

    def load(self) -> SudokuState:
        self.state = None
        self.state = new_sudoku_game(self.difficulty, self._source, self._rng)
        return self.state


# ============== Minesweeper ==============


class MinesweeperSession:
    """A Minesweeper game plus its stopwatch."""

    def __init__(
        self,
        config: BoardConfig,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self._rng = rng or random.Random()
        self._clock = clock
        self.state: MinesweeperState = minesweeper.start_new_game(config)
        self.timer = GameTimer(clock)

    def reveal(self, row: int, col: int) -> MinesweeperState:
        self.state = minesweeper.reveal(self.state, row, col, self._rng)
        if self.state.is_initialized:
            self.timer.start()
        if self.state.is_over:
            self.timer.stop()
        return self.state

    def toggle_flag(self, row: int, col: int) -> MinesweeperState:
        self.state = minesweeper.toggle_flag(self.state, row, col)
        return self.state

    def restart(self) -> None:
        self.state = minesweeper.start_new_game(self.config)
        self.timer = GameTimer(self._clock)


# ============== 2048 ==============


def load_best_score(store: PersistenceStore | None) -> int:
    """Stored best score, or 0 if missing or unreadable."""
    if store is None:
        return 0
    try:
        raw = store.get(BEST_SCORE_KEY)
    except OSError as e:
        logger.warning(f"Failed to read best score: {e}")
        return 0
    if raw is None:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning(f"Ignoring invalid best score {raw!r}")
        return 0


def save_best_score(store: PersistenceStore | None, score: int) -> None:
    """Persist the best score. Failures are logged, never raised."""
    if store is None:
        return
    try:
        store.set(BEST_SCORE_KEY, str(score))
    except OSError as e:
        logger.warning(f"Failed to save best score: {e}")


class TilesSession:
    """
    A 2048 game with a persisted best score.

    The win is reported once per game through just_won; play continues after it.
    """

    def __init__(self, store: PersistenceStore | None = None, rng: random.Random | None = None):
        self._store = store
        self._rng = rng or random.Random()
        self.state: TilesState = tiles.new_game(self._rng, load_best_score(store))
        self.just_won = False
        self._win_reported = False

    def move(self, direction: Direction) -> bool:
        """Apply a move. Returns True if the board changed."""
        previous = self.state
        self.state = tiles.apply_move(previous, direction, self._rng)
        self.just_won = False

        if self.state.best_score > previous.best_score:
            save_best_score(self._store, self.state.best_score)

        if self.state.won and not self._win_reported:
            self._win_reported = True
            self.just_won = True

        return self.state is not previous

    def restart(self) -> None:
        self.state = tiles.new_game(self._rng, self.state.best_score)
        self.just_won = False
        self._win_reported = False


# ============== Bank checks ==============


def validate_banks() -> list[str]:
    """Check every static puzzle. Returns a description of each problem found."""
    problems = []

    for difficulty, puzzles in SUDOKU_PUZZLES.items():
        for i, puzzle in enumerate(puzzles, 1):
            label = f"sudoku {difficulty.value} #{i}"
            try:
                sudoku.new_game(puzzle)
            except ValueError as e:
                problems.append(f"{label}: {e}")

    for difficulty in NONOGRAM_PUZZLES:
        for i, puzzle in enumerate(nonogram.bank_puzzles(difficulty), 1):
            label = f"nonogram {difficulty.value} #{i}"
            rows = tuple(nonogram.clues_for_line(row) for row in puzzle.solution)
            cols = tuple(nonogram.clues_for_line(col) for col in puzzle.columns())
            if rows != puzzle.row_clues:
                problems.append(f"{label}: row clues do not match solution")
            if cols != puzzle.col_clues:
                problems.append(f"{label}: column clues do not match solution")

    for difficulty in HITORI_PUZZLES:
        for i, puzzle in enumerate(hitori.bank_puzzles(difficulty), 1):
            label = f"hitori {difficulty.value} #{i}"
            result = hitori.validate(hitori.apply_shading(puzzle, puzzle.solution))
            if result.duplicates:
                problems.append(f"{label}: solution leaves duplicates")
            if result.adjacent:
                problems.append(f"{label}: solution shades adjacent cells")
            if not result.connected:
                problems.append(f"{label}: solution splits the unshaded cells")

    return problems
