"""Task list service - the authoritative task collection for a session.

This service layer sits between the presentation layer and the persistent
store. It owns the in-memory list (newest first), enforces the task
invariants, writes the full list through the store after every mutation
and hands out render snapshots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from vibelist.models import (
    ListView,
    SaveResult,
    Task,
    TaskValidationError,
    ValidationReason,
)
from vibelist.services.persistent_store import PersistentStore
from vibelist.utils.id_utils import generate_task_id, now_ms

logger = logging.getLogger(__name__)

Listener = Callable[[ListView], None]


def pluralize_tasks(count: int) -> str:
    """Return "1 task" for exactly one, "N tasks" for any other count."""
    return f"{count} {'task' if count == 1 else 'tasks'}"


class TaskListService:
    """Service for task list business logic.

    Instantiate once per session and pass it to the presentation layer.
    Only ``add_task`` raises (on blank text); storage failures are
    absorbed by the store and visible through ``last_save_result``.
    """

    def __init__(
        self,
        store: PersistentStore,
        *,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[int], str] = generate_task_id,
    ):
        """Initialize the service and restore the list from storage.

        Args:
            store: PersistentStore the list is loaded from and saved to
            clock: Returns the current time in epoch milliseconds
            id_factory: Builds a task ID from a creation timestamp
        """
        self.store = store
        self._clock = clock
        self._id_factory = id_factory
        self._listeners: list[Listener] = []
        self._tasks: list[Task] = store.load()
        logger.info("Task list restored with %d task(s)", len(self._tasks))

    # ---- commands ----

    def add_task(self, raw_text: str) -> Task:
        """Create a task at the head of the list.

        Args:
            raw_text: User input; surrounding whitespace is trimmed

        Returns:
            The created Task

        Raises:
            TaskValidationError: If the trimmed text is empty
        """
        text = (raw_text or "").strip()
        if not text:
            raise TaskValidationError(ValidationReason.EMPTY_TEXT)

        created_at = self._clock()
        task = Task(id=self._id_factory(created_at), text=text, created_at=created_at)
        self._tasks.insert(0, task)
        self._commit()
        logger.debug("Task added id=%s", task.id)
        return task.model_copy()

    def toggle_task(self, task_id: str) -> Task | None:
        """Flip the completion flag of a task.

        Returns:
            The updated Task, or None if no task has that ID (no-op)
        """
        task = self._find(task_id)
        if task is None:
            logger.debug("Toggle ignored, unknown id=%s", task_id)
            return None
        task.completed = not task.completed
        self._commit()
        return task.model_copy()

    def delete_task(self, task_id: str) -> Task | None:
        """Remove a task.

        Returns:
            The removed Task, or None if no task has that ID (no-op)
        """
        task = self._find(task_id)
        if task is None:
            logger.debug("Delete ignored, unknown id=%s", task_id)
            return None
        self._tasks.remove(task)
        self._commit()
        return task

    def clear_completed(self) -> list[Task]:
        """Remove every completed task in one batch and persist once.

        Returns:
            The removed tasks, in their former display order
        """
        removed = [t for t in self._tasks if t.completed]
        self._tasks = [t for t in self._tasks if not t.completed]
        self._commit(notify=bool(removed))
        logger.debug("Cleared %d completed task(s)", len(removed))
        return removed

    # ---- queries ----

    def all_tasks(self) -> tuple[Task, ...]:
        """Read-only view of the list, newest first."""
        return tuple(t.model_copy() for t in self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        task = self._find(task_id)
        return task.model_copy() if task else None

    def remaining_count(self) -> int:
        return sum(1 for t in self._tasks if not t.completed)

    def has_completed(self) -> bool:
        return any(t.completed for t in self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def remaining_label(self) -> str:
        return f"{pluralize_tasks(self.remaining_count())} remaining"

    def view(self) -> ListView:
        """Snapshot of everything the presentation layer needs to render."""
        return ListView(
            tasks=self.all_tasks(),
            remaining_count=self.remaining_count(),
            remaining_label=self.remaining_label(),
            is_empty=self.is_empty(),
            show_clear_completed=self.has_completed(),
        )

    @property
    def last_save_result(self) -> SaveResult | None:
        return self.store.last_save_result

    # ---- change notification ----

    def subscribe(self, listener: Listener) -> None:
        """Register a listener and send it the current snapshot."""
        if listener not in self._listeners:
            self._listeners.append(listener)
        listener(self.view())

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---- internals ----

    def _find(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _commit(self, notify: bool = True) -> None:
        self.store.save(self._tasks)
        if notify and self._listeners:
            snapshot = self.view()
            for listener in list(self._listeners):
                listener(snapshot)
