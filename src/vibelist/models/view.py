"""Render model handed to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .task import Task


class ListView(BaseModel):
    """Immutable snapshot of everything needed to draw the task list.

    Attributes:
        tasks: Tasks in display order (newest first)
        remaining_count: Number of tasks not yet completed
        remaining_label: Display text such as "1 task remaining"
        is_empty: True when there are no tasks at all
        show_clear_completed: True when at least one task is completed
    """

    model_config = ConfigDict(frozen=True)

    tasks: tuple[Task, ...] = ()
    remaining_count: int = 0
    remaining_label: str = "0 tasks remaining"
    is_empty: bool = True
    show_clear_completed: bool = False
