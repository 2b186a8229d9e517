"""Puzzle source interface."""

from typing import Protocol

from pastime.core.difficulty import Difficulty


class PuzzleSourceError(Exception):
    """Raised when a puzzle source cannot supply a usable puzzle."""

    pass


class PuzzleSource(Protocol):
    """Interface for fetching Sudoku puzzles from any provider."""

    def fetch(self, difficulty: Difficulty) -> list[list[int]]:
        """Fetch a 9x9 puzzle (0 = blank). Raises PuzzleSourceError on failure."""
        ...
