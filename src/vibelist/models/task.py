"""Task data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Task(BaseModel):
    """A single to-do item.

    Attributes:
        id: Unique identifier within the list, immutable
        text: Trimmed, non-empty task text, immutable
        completed: Completion flag, the only mutable field
        created_at: Creation time in epoch milliseconds (persisted as ``createdAt``)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1, frozen=True)
    text: str = Field(min_length=1, frozen=True)
    completed: bool = False
    created_at: int = Field(default=0, alias="createdAt", frozen=True)


# Persisted layout: a JSON array of task records.
TaskListAdapter = TypeAdapter(list[Task])


def dump_tasks(tasks: list[Task], indent: int | None = 2) -> str:
    """Serialize tasks to the persisted JSON text."""
    return TaskListAdapter.dump_json(tasks, by_alias=True, indent=indent).decode("utf-8")


def parse_tasks(raw: str | bytes) -> list[Task]:
    """Parse persisted JSON text back into tasks.

    Raises:
        pydantic.ValidationError: If the text is not a JSON array of task records
    """
    return TaskListAdapter.validate_json(raw)
