"""Command 'delete' of vibelist"""

import typer

from vibelist.services.session import get_task_list_service
from vibelist.utils.task_helpers import resolve_task_id
from vibelist.utils.ui.console import get_console
from vibelist.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import report_save_outcome

app = typer.Typer()
console = get_console()


@app.command("delete")
@command_wrapper
def delete(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    task_service = get_task_list_service()

    resolved_id = resolve_task_id(task_service, task_id)
    task = task_service.get_task(resolved_id)

    if not force and task is not None:
        confirm = typer.confirm(f"Delete task '{task.text}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    removed = task_service.delete_task(resolved_id)
    report_save_outcome(task_service)
    if removed is not None:
        format_success(f"Deleted: {removed.text}")
    console.print(f"[dim]{task_service.remaining_label()}[/dim]")
