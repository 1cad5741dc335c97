"""Shared helpers for command modules."""

from vibelist.services.task_service import TaskListService
from vibelist.utils.ui.formatters import format_warning


def report_save_outcome(service: TaskListService) -> None:
    """Warn when the last write was dropped by the storage backend."""
    result = service.last_save_result
    if result is not None and not result.ok:
        format_warning(
            "Changes could not be saved and will be lost when this session ends "
            f"({result.message})"
        )
