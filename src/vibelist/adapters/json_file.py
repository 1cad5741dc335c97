"""JSON file key-value adapter.

Keeps every key in one JSON object on disk, the closest local analogue of
browser ``localStorage``. Writes go to a temporary sibling file that then
replaces the original, so a crashed write never leaves a half-written file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from vibelist.models.exceptions import StorageReadCorruptError, StorageWriteFailure
from vibelist.repositories import KeyValueRepository

logger = logging.getLogger(__name__)


class JsonFileKeyValueRepository(KeyValueRepository):
    """Key-value storage backed by a single JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageReadCorruptError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadCorruptError(f"{self.path} does not hold a JSON object")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.chmod(tmp_name, 0o600)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageWriteFailure(f"Cannot write {self.path}: {e}") from e

    def _read_for_update(self) -> dict[str, str]:
        try:
            return self._read_all()
        except StorageReadCorruptError:
            logger.warning("Replacing unreadable storage file %s", self.path)
            return {}

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageReadCorruptError(f"Value under {key!r} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        data = self._read_for_update()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_for_update()
        if key in data:
            del data[key]
            self._write_all(data)
