"""Tests for the session layer."""

import random
from unittest.mock import MagicMock

import pytest

from pastime.adapters.json_store import JsonFileStore
from pastime.adapters.sugoku_api import SugokuPuzzleSource
from pastime.config import Config
from pastime.core.banks import SUDOKU_PUZZLES
from pastime.core.difficulty import Difficulty
from pastime.core.minesweeper import BoardConfig, MinesweeperStatus
from pastime.core.sudoku import SudokuStatus
from pastime.core.tiles import Direction, TilesState
from pastime.ports.puzzle_source import PuzzleSourceError
from pastime.sessions import (
    BEST_SCORE_KEY,
    MinesweeperSession,
    SudokuSession,
    TilesSession,
    fetch_sudoku_puzzle,
    get_puzzle_source,
    get_store,
    load_best_score,
    new_sudoku_game,
    save_best_score,
)

REMOTE = [list(row) for row in SUDOKU_PUZZLES[Difficulty.EASY][1]]


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "store.json")


class TestFactories:
    def test_default_store_path(self):
        with_default = get_store(Config())
        assert with_default.path.name == "store.json"

    def test_configured_store_path(self, tmp_path):
        store = get_store(Config(store_file=str(tmp_path / "mine.json")))
        assert store.path == tmp_path / "mine.json"

    def test_puzzle_source_disabled(self):
        assert get_puzzle_source(Config(use_puzzle_api=False)) is None

    def test_puzzle_source_from_config(self):
        source = get_puzzle_source(Config(puzzle_api_url="http://x.test/board", puzzle_api_timeout=1.0))
        assert isinstance(source, SugokuPuzzleSource)
        assert source.url == "http://x.test/board"
        assert source.timeout == 1.0


class TestSudokuFetch:
    def test_uses_source(self):
        source = MagicMock()
        source.fetch.return_value = REMOTE
        assert fetch_sudoku_puzzle(Difficulty.EASY, source) == REMOTE
        source.fetch.assert_called_once_with(Difficulty.EASY)

    def test_source_error_falls_back(self, caplog):
        source = MagicMock()
        source.fetch.side_effect = PuzzleSourceError("timeout")
        puzzle = fetch_sudoku_puzzle(Difficulty.MEDIUM, source, random.Random(0))
        assert tuple(map(tuple, puzzle)) in SUDOKU_PUZZLES[Difficulty.MEDIUM]
        assert "using local bank" in caplog.text

    def test_malformed_board_falls_back(self):
        source = MagicMock()
        source.fetch.return_value = [[0] * 9] * 3
        puzzle = fetch_sudoku_puzzle(Difficulty.EASY, source, random.Random(0))
        assert tuple(map(tuple, puzzle)) in SUDOKU_PUZZLES[Difficulty.EASY]

    def test_unsolvable_board_falls_back(self):
        board = [[0] * 9 for _ in range(9)]
        board[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
        board[1][8] = 9
        source = MagicMock()
        source.fetch.return_value = board
        puzzle = fetch_sudoku_puzzle(Difficulty.EASY, source, random.Random(0))
        assert tuple(map(tuple, puzzle)) in SUDOKU_PUZZLES[Difficulty.EASY]

    def test_no_source_uses_bank(self):
        puzzle = fetch_sudoku_puzzle(Difficulty.HARD, None, random.Random(0))
        assert tuple(map(tuple, puzzle)) in SUDOKU_PUZZLES[Difficulty.HARD]

    def test_new_game_is_ready(self):
        source = MagicMock()
        source.fetch.return_value = REMOTE
        state = new_sudoku_game(Difficulty.EASY, source)
        assert state.status == SudokuStatus.READY
        assert state.values == REMOTE


class TestSudokuSession:
    def test_loading_until_puzzle_arrives(self):
        seen = []
        source = MagicMock()
        session = SudokuSession(Difficulty.EASY, source)

        def fetch(difficulty):
            seen.append(session.status)
            return REMOTE

        source.fetch.side_effect = fetch
        assert session.status == SudokuStatus.LOADING
        session.load()
        assert seen == [SudokuStatus.LOADING]
        assert session.status == SudokuStatus.READY

    def test_status_follows_game(self):
        session = SudokuSession(Difficulty.EASY, None, random.Random(0))
        state = session.load()
        assert session.status == state.status


class TestMinesweeperSession:
    def test_timer_starts_on_first_reveal(self):
        clock = FakeClock()
        session = MinesweeperSession(BoardConfig(8, 8, 10), random.Random(5), clock)
        assert not session.timer.running
        session.reveal(0, 0)
        assert session.timer.running
        clock.now = 4.2
        assert session.timer.elapsed == 4

    def test_timer_stops_on_loss(self):
        clock = FakeClock()
        session = MinesweeperSession(BoardConfig(8, 8, 10), random.Random(5), clock)
        session.reveal(0, 0)
        mine = next(
            (r, c) for r, row in enumerate(session.state.grid) for c, cell in enumerate(row) if cell.is_mine
        )
        clock.now = 7
        session.reveal(*mine)
        assert session.state.status == MinesweeperStatus.LOST
        clock.now = 30
        assert session.timer.elapsed == 7
        assert session.timer.stopped

    def test_timer_stops_on_win(self):
        clock = FakeClock()
        session = MinesweeperSession(BoardConfig(4, 4, 1), random.Random(2), clock)
        session.reveal(0, 0)
        for r, row in enumerate(session.state.grid):
            for c, cell in enumerate(row):
                if not cell.is_mine and not cell.is_revealed:
                    session.reveal(r, c)
        assert session.state.status == MinesweeperStatus.WON
        assert session.timer.stopped

    def test_restart_resets_timer(self):
        session = MinesweeperSession(BoardConfig(8, 8, 10), random.Random(5), FakeClock())
        session.reveal(0, 0)
        session.restart()
        assert session.state.status == MinesweeperStatus.FIRST_CLICK
        assert not session.timer.running


class TestBestScore:
    def test_missing_is_zero(self, store):
        assert load_best_score(store) == 0
        assert load_best_score(None) == 0

    def test_saved_value(self, store):
        save_best_score(store, 512)
        assert load_best_score(store) == 512

    def test_invalid_value_is_zero(self, store):
        store.set(BEST_SCORE_KEY, "lots")
        assert load_best_score(store) == 0

    def test_store_failures_are_swallowed(self):
        store = MagicMock()
        store.get.side_effect = OSError("disk gone")
        store.set.side_effect = OSError("disk gone")
        assert load_best_score(store) == 0
        save_best_score(store, 10)


class TestTilesSession:
    def test_loads_best_score(self, store):
        save_best_score(store, 300)
        session = TilesSession(store, random.Random(1))
        assert session.state.best_score == 300

    def test_persists_new_best(self, store):
        session = TilesSession(store, random.Random(1))
        grid = ((2, 2, 0, 0),) + ((0, 0, 0, 0),) * 3
        session.state = TilesState(grid=grid)
        assert session.move(Direction.LEFT)
        assert load_best_score(store) == 4

    def test_noop_move(self, store):
        session = TilesSession(store, random.Random(1))
        grid = ((2, 0, 0, 0),) + ((0, 0, 0, 0),) * 3
        session.state = TilesState(grid=grid)
        assert not session.move(Direction.LEFT)
        assert store.get(BEST_SCORE_KEY) is None

    def test_win_reported_once(self, store):
        session = TilesSession(store, random.Random(1))
        grid = ((1024, 1024, 0, 0), (2, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0))
        session.state = TilesState(grid=grid)
        session.move(Direction.LEFT)
        assert session.just_won
        session.move(Direction.RIGHT)
        assert not session.just_won
        assert session.state.won

    def test_restart_keeps_best(self, store):
        session = TilesSession(store, random.Random(1))
        session.state = TilesState(grid=session.state.grid, best_score=64)
        session.restart()
        assert session.state.best_score == 64
        assert session.state.score == 0
