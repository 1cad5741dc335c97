"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
from itertools import count
from unittest.mock import patch

import pytest

from vibelist.adapters import InMemoryKeyValueRepository
from vibelist.services.persistent_store import PersistentStore
from vibelist.services.task_service import TaskListService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Point every platformdirs lookup at *tmp_path* and reset caches."""
    import vibelist.utils.logger as logger_mod
    from vibelist.services.config_service import get_config_service
    from vibelist.services.session import get_task_list_service

    tmpdir = str(tmp_path / "appdirs")
    get_config_service.cache_clear()
    get_task_list_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("vibelist").handlers.clear()

    with (
        patch("vibelist.services.config_service.user_config_dir", return_value=tmpdir),
        patch("vibelist.services.config_service.user_data_dir", return_value=tmpdir),
        patch("vibelist.utils.logger.user_log_dir", return_value=tmpdir),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    get_task_list_service.cache_clear()
    for handler in logging.getLogger("vibelist").handlers:
        handler.close()
    logging.getLogger("vibelist").handlers.clear()
    logging.getLogger("vibelist").propagate = True
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def repository():
    return InMemoryKeyValueRepository()


@pytest.fixture()
def store(repository):
    return PersistentStore(repository)


@pytest.fixture()
def clock():
    """Deterministic clock: 1_700_000_000_000, +1000 ms per call."""
    ticks = count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture()
def service(store, clock):
    return TaskListService(store, clock=clock)
