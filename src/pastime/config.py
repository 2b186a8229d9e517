"""Configuration management for Pastime."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PASTIME_HOME = Path(os.environ.get("PASTIME_HOME", Path.home() / "pastime"))
CONFIG_FILE = PASTIME_HOME / "config" / "pastime.conf"
DATA_DIR = PASTIME_HOME / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Pastime configuration."""

    puzzle_api_url: str = "https://sugoku.onrender.com/board"
    puzzle_api_timeout: float = 5.0
    use_puzzle_api: bool = True
    store_file: str = ""
    memory_pairs: int = 8
    # Default difficulty per game
    sudoku_difficulty: str = "easy"
    minesweeper_difficulty: str = "beginner"
    nonogram_difficulty: str = "easy"
    hitori_difficulty: str = "easy"


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def _parse_number(key: str, value: str, default, cast):
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Invalid number for {key.upper()}: {value!r}, using {default}")
        return default


def load_config() -> Config:
    """Load configuration from pastime.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "puzzle_api_url":
                config.puzzle_api_url = value
            case "puzzle_api_timeout":
                config.puzzle_api_timeout = _parse_number(key, value, config.puzzle_api_timeout, float)
            case "use_puzzle_api":
                config.use_puzzle_api = _parse_bool(key, value, config.use_puzzle_api)
            case "store_file":
                config.store_file = value
            case "memory_pairs":
                config.memory_pairs = _parse_number(key, value, config.memory_pairs, int)
            case "sudoku_difficulty":
                config.sudoku_difficulty = value.lower()
            case "minesweeper_difficulty":
                config.minesweeper_difficulty = value.lower()
            case "nonogram_difficulty":
                config.nonogram_difficulty = value.lower()
            case "hitori_difficulty":
                config.hitori_difficulty = value.lower()

    return config
