"""JSON file key-value storage adapter."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    Single-file JSON storage.

    Implements PersistenceStore protocol. The whole file is one JSON object
    of string values; it is created on first write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.path}: expected a JSON object")
            return {}
        return data

    def get(self, key: str) -> str | None:
        """Read a value. Returns None if not set."""
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        """Write/overwrite a value."""
        self.set_many({key: value})

    def set_many(self, values: dict[str, str]) -> None:
        """Write several values with a single file write."""
        data = self._load()
        data.update(values)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True))
