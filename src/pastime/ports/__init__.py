"""Ports - interfaces/protocols for external dependencies."""

from .puzzle_source import PuzzleSource, PuzzleSourceError
from .persistence import PersistenceStore

__all__ = [
    "PuzzleSource",
    "PuzzleSourceError",
    "PersistenceStore",
]
