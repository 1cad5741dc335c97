"""Main entry point for the VibeList CLI."""

import typer

from vibelist import __version__
from vibelist.commands import (
    add_command,
    clear_command,
    config_command,
    delete_command,
    list_command,
    toggle_command,
)
from vibelist.services.config_service import get_config_service
from vibelist.utils.logger import get_logger, log_file_path
from vibelist.utils.typer_helpers import SuggestingGroup
from vibelist.utils.ui.console import get_console, set_color

app = typer.Typer(
    name="vibelist",
    cls=SuggestingGroup,
    help="A calm, minimal task list that remembers your tasks between sessions",
    no_args_is_help=True,
)

console = get_console()

# Top-level task commands
app.command("add")(add_command.add)
app.command("toggle")(toggle_command.toggle)
app.command("delete")(delete_command.delete)
app.command("clear")(clear_command.clear)
app.command("list")(list_command.list_tasks)

app.add_typer(config_command.app, name="config", help="Configuration management")


@app.callback()
def apply_output_settings() -> None:
    try:
        color = get_config_service().config.output.color
    except RuntimeError as e:
        # Commands that need the config report the failure themselves
        get_logger().warning("Using default output settings: %s", e)
        return
    set_color(color)


@app.command()
def version() -> None:
    """Show version, storage location and log file."""
    console.print(f"[bold]VibeList[/bold] version [cyan]{__version__}[/cyan]")
    try:
        config_svc = get_config_service()
        storage = config_svc.config.storage
        location = "in memory" if storage.backend == "memory" else str(config_svc.storage_path())
        console.print(f"[dim]Storage: {storage.backend} ({location})[/dim]")
    except RuntimeError as e:
        console.print(f"[yellow]Configuration unavailable: {e}[/yellow]")
    console.print(f"[dim]Log: {log_file_path()}[/dim]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
