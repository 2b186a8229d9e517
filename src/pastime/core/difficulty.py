"""Difficulty levels shared by all games."""

from enum import Enum


class Difficulty(Enum):
    """Difficulty tiers. Each game supports a subset."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    BEGINNER = "beginner"  # Minesweeper tiers
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """Look up a difficulty by its (case-insensitive) name."""
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None


def require_supported(game: str, difficulty: Difficulty, supported) -> None:
    """Raise ValueError if a game has no table entry for this difficulty."""
    if difficulty not in supported:
        names = ", ".join(d.value for d in supported)
        raise ValueError(f"{game} does not support {difficulty.value!r} (choose from: {names})")
