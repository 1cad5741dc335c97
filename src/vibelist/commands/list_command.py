"""Command 'list' of vibelist"""

import typer

from vibelist.services.config_service import get_config_service
from vibelist.services.session import get_task_list_service
from vibelist.utils.ui.formatters import format_list_view

from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/table/json/yaml/quiet)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List tasks, newest first, with the remaining count."""
    if json_opt:
        output = "json"
    if output is None:
        output = get_config_service().get("output.format") or "pretty"

    format_list_view(get_task_list_service().view(), output)
