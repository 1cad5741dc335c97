"""Custom exceptions for VibeList."""

from __future__ import annotations

from enum import StrEnum


class VibeListError(Exception):
    """Base exception for all VibeList errors."""


class ValidationReason(StrEnum):
    """Why a task could not be created."""

    EMPTY_TEXT = "empty_text"


class TaskValidationError(VibeListError):
    """Raised when user input cannot become a task (e.g. blank text)."""

    def __init__(self, reason: ValidationReason, message: str | None = None):
        super().__init__(message or _REASON_MESSAGES[reason])
        self.reason = reason


class StorageReadCorruptError(VibeListError):
    """Raised when the stored task snapshot cannot be parsed."""


class StorageWriteFailure(VibeListError):
    """Raised when the underlying storage rejects a write (quota, I/O, locks)."""


_REASON_MESSAGES = {
    ValidationReason.EMPTY_TEXT: "Task text cannot be empty",
}
