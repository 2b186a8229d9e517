"""Adapters - I/O implementations of ports."""

from .sugoku_api import SugokuPuzzleSource
from .json_store import JsonFileStore

__all__ = [
    "SugokuPuzzleSource",
    "JsonFileStore",
]
