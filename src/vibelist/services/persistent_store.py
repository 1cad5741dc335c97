"""Persistent store - durable snapshot of the task list.

The whole list is serialized and written under one fixed key on every
save, so storage never holds a partial update. Read and write failures
are absorbed here: corrupt data loads as an empty list and a rejected
write is dropped, both logged as warnings and reported via outcome models.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from vibelist.models import (
    LoadResult,
    SaveResult,
    StorageOutcome,
    StorageReadCorruptError,
    StorageWriteFailure,
    Task,
    dump_tasks,
    parse_tasks,
)
from vibelist.models.config_models import DEFAULT_STORAGE_KEY
from vibelist.repositories import KeyValueRepository

logger = logging.getLogger(__name__)


class PersistentStore:
    """Reads and writes the serialized task list under a single key."""

    def __init__(
        self,
        repository: KeyValueRepository,
        key: str = DEFAULT_STORAGE_KEY,
        indent: int | None = 2,
    ):
        """Initialize the store.

        Args:
            repository: Key-value backend holding the snapshot
            key: Namespace key the snapshot lives under
            indent: JSON indentation for the stored text (None for compact)
        """
        self.repository = repository
        self.key = key
        self.indent = indent
        self.last_save_result: SaveResult | None = None

    def read(self) -> LoadResult:
        """Read the snapshot, reporting how the read went.

        Returns:
            LoadResult with the restored tasks and an ``ok``, ``missing``
            or ``corrupt`` outcome. Never raises.
        """
        try:
            raw = self.repository.get_item(self.key)
            if raw is None:
                return LoadResult(outcome=StorageOutcome.MISSING)
            try:
                tasks = parse_tasks(raw)
            except ValidationError as e:
                raise StorageReadCorruptError(
                    f"Stored value under {self.key!r} is not a task list: "
                    f"{e.error_count()} error(s)"
                ) from e
        except StorageReadCorruptError as e:
            logger.warning("Ignoring unreadable task data: %s", e)
            return LoadResult(outcome=StorageOutcome.CORRUPT, message=str(e))

        return LoadResult(tasks=self._drop_duplicate_ids(tasks))

    def load(self) -> list[Task]:
        """Read the snapshot; missing or corrupt data yields an empty list."""
        return self.read().tasks

    def save(self, tasks: Sequence[Task]) -> SaveResult:
        """Serialize the full list and overwrite the stored value.

        Args:
            tasks: Complete task list in display order

        Returns:
            SaveResult, ``write_failed`` if the backend rejected the write
        """
        payload = dump_tasks(list(tasks), indent=self.indent)
        try:
            self.repository.set_item(self.key, payload)
        except StorageWriteFailure as e:
            logger.warning("Dropping task write of %d task(s): %s", len(tasks), e)
            result = SaveResult(outcome=StorageOutcome.WRITE_FAILED, message=str(e))
        else:
            logger.debug("Saved %d task(s) under %s", len(tasks), self.key)
            result = SaveResult()
        self.last_save_result = result
        return result

    def clear(self) -> SaveResult:
        """Remove the stored snapshot entirely."""
        try:
            self.repository.remove_item(self.key)
        except StorageWriteFailure as e:
            logger.warning("Could not clear stored tasks: %s", e)
            result = SaveResult(outcome=StorageOutcome.WRITE_FAILED, message=str(e))
        else:
            result = SaveResult()
        self.last_save_result = result
        return result

    @staticmethod
    def _drop_duplicate_ids(tasks: list[Task]) -> list[Task]:
        seen: set[str] = set()
        unique: list[Task] = []
        for task in tasks:
            if task.id in seen:
                logger.warning("Dropping stored task with duplicate id %s", task.id)
                continue
            seen.add(task.id)
            unique.append(task)
        return unique
