"""Outcome models for storage operations.

Storage failures never propagate to callers; they are reported through
these results instead so callers can inspect what happened.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from .task import Task


class StorageOutcome(StrEnum):
    """Result of a single storage round-trip."""

    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"
    WRITE_FAILED = "write_failed"


class LoadResult(BaseModel):
    """Outcome of reading the task snapshot.

    Attributes:
        tasks: Restored tasks (empty on missing or corrupt data)
        outcome: ``ok``, ``missing`` or ``corrupt``
        message: Failure detail, if any
    """

    tasks: list[Task] = Field(default_factory=list)
    outcome: StorageOutcome = StorageOutcome.OK
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is not StorageOutcome.CORRUPT


class SaveResult(BaseModel):
    """Outcome of writing the task snapshot."""

    outcome: StorageOutcome = StorageOutcome.OK
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is StorageOutcome.OK
