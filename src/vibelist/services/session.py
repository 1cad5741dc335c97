"""Session bootstrap for VibeList.

Builds the storage adapter named by the configuration and the single
TaskListService instance the CLI hands to every command.

Usage Pattern:
    from vibelist.services.session import get_task_list_service

    service = get_task_list_service()
    service.add_task("Buy milk")
"""

from __future__ import annotations

from functools import lru_cache

from vibelist.adapters import (
    InMemoryKeyValueRepository,
    JsonFileKeyValueRepository,
    SqliteKeyValueRepository,
)
from vibelist.repositories import KeyValueRepository
from vibelist.services.config_service import ConfigService, get_config_service
from vibelist.services.persistent_store import PersistentStore
from vibelist.services.task_service import TaskListService


def build_repository(config_svc: ConfigService) -> KeyValueRepository:
    """Create the key-value adapter for the configured backend."""
    backend = config_svc.config.storage.backend
    if backend == "memory":
        return InMemoryKeyValueRepository()
    if backend == "sqlite":
        return SqliteKeyValueRepository(config_svc.storage_path())
    if backend == "file":
        return JsonFileKeyValueRepository(config_svc.storage_path())
    raise ValueError(
        f"Invalid storage backend: {backend}. Must be 'file', 'sqlite' or 'memory'"
    )


def build_task_list_service(config_svc: ConfigService) -> TaskListService:
    """Wire repository, store and service from a configuration."""
    storage = config_svc.config.storage
    store = PersistentStore(
        build_repository(config_svc), key=storage.key, indent=storage.indent
    )
    return TaskListService(store)


@lru_cache(maxsize=1)
def get_task_list_service() -> TaskListService:
    """Get the cached TaskListService for this process."""
    return build_task_list_service(get_config_service())
