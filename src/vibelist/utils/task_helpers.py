"""Task helper utilities."""

from vibelist.services.task_service import TaskListService
from vibelist.utils.id_utils import find_shortest_unique_suffix


class TaskResolutionError(ValueError):
    """Raised when an ID or suffix matches no task, or more than one."""

    def __init__(self, message: str, ambiguous: bool = False):
        super().__init__(message)
        self.ambiguous = ambiguous


def resolve_task_id(task_service: TaskListService, task_id_or_suffix: str) -> str:
    """
    Resolve a task ID or suffix to a full task ID.

    Args:
        task_service: The task list service
        task_id_or_suffix: Full task ID or a suffix of one

    Returns:
        The full task ID

    Raises:
        TaskResolutionError: If no task matches or the suffix is ambiguous
    """
    needle = task_id_or_suffix.strip().lstrip("#")
    if not needle:
        raise TaskResolutionError("Task ID is required")

    if task_service.get_task(needle) is not None:
        return needle

    tasks = task_service.all_tasks()
    matching_tasks = [task for task in tasks if task.id.endswith(needle)]

    if not matching_tasks:
        raise TaskResolutionError(f"No task found with ID or suffix '{needle}'")

    if len(matching_tasks) > 1:
        all_task_ids = [t.id for t in tasks]
        suggestions = []
        for task in matching_tasks:
            unique_suffix = find_shortest_unique_suffix(all_task_ids, task.id)
            text = task.text
            if len(text) > 70:
                text = text[:67] + "..."
            suggestions.append(f"  [{unique_suffix}] {text}")

        raise TaskResolutionError(
            f"Multiple tasks match suffix '{needle}':\n"
            + "\n".join(suggestions)
            + "\n\nUse the suffix in brackets to select a specific task.",
            ambiguous=True,
        )

    return matching_tasks[0].id
