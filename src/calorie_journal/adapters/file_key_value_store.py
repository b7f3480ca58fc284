"""Key-value store abstraction and a local JSON file implementation."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value storage used for whole JSON documents."""

    def get_item(self, key: str) -> str | None:
        """Return the value stored under a key, if any."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Key-value store persisted as one JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the value for a key from the file."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Write the value for a key, replacing the file atomically."""
        items = self._read()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Key-value file %s is not valid JSON", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Key-value file %s is not a JSON object", self.path)
            return {}
        return data
