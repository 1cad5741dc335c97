"""In-memory key-value adapter.

Used for ephemeral sessions and tests. An optional byte quota reproduces
the "quota exceeded" failure mode of browser storage.
"""

from __future__ import annotations

from vibelist.models.exceptions import StorageWriteFailure
from vibelist.repositories import KeyValueRepository


class InMemoryKeyValueRepository(KeyValueRepository):
    """Key-value storage held in a dict for the lifetime of the process."""

    def __init__(self, quota_bytes: int | None = None):
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def _size_with(self, key: str, value: str) -> int:
        items = {**self._items, key: value}
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None and self._size_with(key, value) > self.quota_bytes:
            raise StorageWriteFailure(
                f"Storage quota exceeded ({self.quota_bytes} bytes)"
            )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
