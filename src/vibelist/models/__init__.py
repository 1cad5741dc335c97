"""VibeList domain models.

Pydantic models for tasks, storage outcomes, render snapshots and
configuration, plus the exception hierarchy.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig
from .exceptions import (
    StorageReadCorruptError,
    StorageWriteFailure,
    TaskValidationError,
    ValidationReason,
    VibeListError,
)
from .results import LoadResult, SaveResult, StorageOutcome
from .task import Task, dump_tasks, parse_tasks
from .view import ListView

__all__ = [
    # Task models
    "Task",
    "dump_tasks",
    "parse_tasks",
    "ListView",
    # Storage outcomes
    "LoadResult",
    "SaveResult",
    "StorageOutcome",
    # Errors
    "VibeListError",
    "TaskValidationError",
    "ValidationReason",
    "StorageReadCorruptError",
    "StorageWriteFailure",
    # Config models
    "AppConfig",
    "StorageConfig",
    "OutputConfig",
]
