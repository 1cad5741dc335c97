"""Command 'add' of vibelist"""

import sys

import typer

from vibelist.services.session import get_task_list_service
from vibelist.utils.ui.console import get_console
from vibelist.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import report_save_outcome

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add(
    text: str | None = typer.Argument(None, help="Task text (read from stdin if omitted)"),
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format (pretty/json/yaml/quiet)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """
    Add a task to the top of the list.

    Examples:
      vibelist add "Buy milk"
      echo "Walk dog" | vibelist add
    """
    if json_opt:
        output = "json"

    if text is None and not sys.stdin.isatty():
        text = sys.stdin.read()

    task_service = get_task_list_service()
    task = task_service.add_task(text or "")
    report_save_outcome(task_service)

    if output in ("json", "yaml", "quiet"):
        format_output(task.model_dump(by_alias=True), output)
        return

    format_success(f"Added: {task.text}")
    console.print(f"[dim]{task_service.remaining_label()}[/dim]")
