"""Command 'clear' of vibelist"""

import typer

from vibelist.services.session import get_task_list_service
from vibelist.utils.ui.console import get_console
from vibelist.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import report_save_outcome

app = typer.Typer()
console = get_console()


@app.command("clear")
@command_wrapper
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove all completed tasks."""
    task_service = get_task_list_service()

    if not task_service.has_completed():
        format_info("No completed tasks to clear")
        return

    if not yes:
        confirm = typer.confirm("Remove all completed tasks?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    removed = task_service.clear_completed()
    report_save_outcome(task_service)
    format_success(f"Cleared {len(removed)} completed task(s)")
    console.print(f"[dim]{task_service.remaining_label()}[/dim]")
