"""Functional core - pure game rules with no I/O."""

from .difficulty import Difficulty
from .grid import flood_fill, neighbors4, neighbors8, rotate90
from .sudoku import PuzzleBankError, SudokuState, SudokuStatus
from .minesweeper import BoardConfig, GameTimer, MinesweeperState, MinesweeperStatus
from .tiles import Direction, TilesState
from .memory import Card, MemoryState
from .nonogram import CellState, NonogramPuzzle, NonogramState
from .hitori import HitoriPuzzle, HitoriState, HitoriValidation

__all__ = [
    "Difficulty",
    # Grid
    "flood_fill",
    "neighbors4",
    "neighbors8",
    "rotate90",
    # Sudoku
    "PuzzleBankError",
    "SudokuState",
    "SudokuStatus",
    # Minesweeper
    "BoardConfig",
    "GameTimer",
    "MinesweeperState",
    "MinesweeperStatus",
    # 2048
    "Direction",
    "TilesState",
    # Memory Match
    "Card",
    "MemoryState",
    # Nonogram
    "CellState",
    "NonogramPuzzle",
    "NonogramState",
    # Hitori
    "HitoriPuzzle",
    "HitoriState",
    "HitoriValidation",
]
