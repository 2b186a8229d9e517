"""Key-value persistence interface."""

from typing import Protocol


class PersistenceStore(Protocol):
    """Interface for small string values that outlive a game (best score, preferences)."""

    def get(self, key: str) -> str | None:
        """Read a value. Returns None if not set."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write/overwrite a value."""
        ...

    def set_many(self, values: dict[str, str]) -> None:
        """Write several values in one update."""
        ...
