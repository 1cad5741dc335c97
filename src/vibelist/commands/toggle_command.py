"""Command 'toggle' of vibelist"""

import typer

from vibelist.services.session import get_task_list_service
from vibelist.utils.task_helpers import resolve_task_id
from vibelist.utils.ui.console import get_console
from vibelist.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import report_save_outcome

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
def toggle(
    task_ids: list[str] = typer.Argument(..., help="Task ID(s) or suffix(es)"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Mark tasks completed, or reopen them if already completed."""
    task_service = get_task_list_service()

    # Resolve everything first so a bad ID changes nothing
    resolved_ids = [resolve_task_id(task_service, task_id) for task_id in task_ids]

    toggled = []
    for resolved_id in resolved_ids:
        task = task_service.toggle_task(resolved_id)
        if task is not None:
            toggled.append(task)
    report_save_outcome(task_service)

    if output in ("json", "yaml", "quiet"):
        format_output([t.model_dump(by_alias=True) for t in toggled], output)
        return

    for task in toggled:
        verb = "Completed" if task.completed else "Reopened"
        format_success(f"{verb}: {task.text}")
    console.print(f"[dim]{task_service.remaining_label()}[/dim]")
