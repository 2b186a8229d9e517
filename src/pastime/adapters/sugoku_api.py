"""Sugoku API adapter - HTTP client for Sudoku puzzles."""

import logging

import requests

from pastime.core.difficulty import Difficulty
from pastime.core.sudoku import DIFFICULTIES, validate_puzzle_shape
from pastime.ports.puzzle_source import PuzzleSourceError

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://sugoku.onrender.com/board"


class SugokuPuzzleSource:
    """
    Sugoku board API adapter.

    Implements PuzzleSource protocol. Only I/O and payload checks - difficulty
    is passed through as an opaque label.
    """

    def __init__(self, url: str = DEFAULT_URL, timeout: float = 5.0, session: requests.Session | None = None):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self, difficulty: Difficulty) -> list[list[int]]:
        """Fetch a 9x9 puzzle for the difficulty."""
        if difficulty not in DIFFICULTIES:
            raise PuzzleSourceError(f"Sugoku has no {difficulty.value!r} puzzles")

        try:
            resp = self._session.get(
                self.url,
                params={"difficulty": difficulty.value},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise PuzzleSourceError(f"Puzzle request failed: {e}") from e
        except ValueError as e:
            raise PuzzleSourceError(f"Puzzle response was not JSON: {e}") from e

        if not isinstance(data, dict) or "board" not in data:
            raise PuzzleSourceError("Puzzle response has no board")

        try:
            board = validate_puzzle_shape(data["board"])
        except ValueError as e:
            raise PuzzleSourceError(f"Malformed board: {e}") from e

        logger.debug(f"Fetched {difficulty.value} puzzle from {self.url}")
        return board
