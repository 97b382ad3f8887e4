"""Key-value storage backed by a single JSON document on disk."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the backing file cannot be read or written."""


class Database:
    """
    Durable key-value store.

    Every key lives in one JSON object written to ``path``. Values are any
    JSON-serialisable object. Reads go to disk each time so the file stays
    the single source of truth; writes replace the whole file atomically.
    """

    def __init__(self, path: Path):
        """Initialize storage at the given file path."""
        self.path = Path(path)

    def _read_all(self) -> dict:
        """
        Read the full document.

        Returns:
            Mapping of keys to values, empty if the file does not exist

        Raises:
            StorageError: If the file is unreadable or not a JSON object
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Expected a JSON object in {self.path}")

        return data

    def get(self, key: str) -> Optional[Any]:
        """
        Get the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if the key is absent

        Raises:
            StorageError: If the backing file is corrupt or unreadable
        """
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        """
        Store a value under a key, replacing any prior value.

        Other keys already in the document are preserved. A corrupt document
        is replaced rather than merged.

        Args:
            key: Storage key
            value: JSON-serialisable value

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            data = self._read_all()
        except StorageError:
            logger.warning(f"Overwriting unreadable storage file '{self.path}'")
            data = {}

        data[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
