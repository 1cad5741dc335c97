"""Services module for VibeList - Business logic layer."""

from .config_service import ConfigService
from .persistent_store import PersistentStore
from .task_service import TaskListService, pluralize_tasks

__all__ = [
    "TaskListService",
    "PersistentStore",
    "ConfigService",
    "pluralize_tasks",
]
