"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from vibelist.models import ListView
from vibelist.utils.id_utils import find_shortest_unique_suffix
from vibelist.utils.ui.console import get_console

console = get_console()

STATUS_ICONS = {
    "open": "○",
    "completed": "✓",
}


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, str]:
    """Map each task ID to the shortest suffix that identifies it."""
    return {tid: find_shortest_unique_suffix(task_ids, tid) for tid in task_ids}


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "table":
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format a list of task dicts (or a single dict) as a table."""
    if not data:
        console.print("[yellow]No items found[/yellow]")
        return

    if isinstance(data, dict):
        format_single_item(data)
        return

    suffixes = calculate_unique_suffixes([item["id"] for item in data])
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Status")
    table.add_column("Task")
    table.add_column("Created", style="cyan")
    for item in data:
        done = item.get("completed", False)
        table.add_row(
            suffixes[item["id"]],
            STATUS_ICONS["completed" if done else "open"],
            Text(item.get("text", ""), style="dim strike" if done else ""),
            format_created_at(item.get("createdAt", 0)),
        )
    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key/value lines."""
    for key, value in item.items():
        console.print(f"[cyan]{key}:[/cyan] {value}")


def format_pretty(data: Any) -> None:
    """Format a list of task dicts with status icons and ID suffixes."""
    if isinstance(data, dict):
        format_single_item(data)
        return
    if not data:
        console.print("[dim]Nothing to do. Add a task to get started.[/dim]")
        return

    suffixes = calculate_unique_suffixes([item["id"] for item in data])
    for item in data:
        format_task_item(item, suffixes.get(item["id"], item["id"]))


def format_task_item(task: dict, suffix: str) -> None:
    """Format a single task line."""
    line = Text()
    if task.get("completed"):
        line.append(f"{STATUS_ICONS['completed']} ", style="green")
        line.append(task.get("text", ""), style="dim strike")
    else:
        line.append(f"{STATUS_ICONS['open']} ", style="cyan")
        line.append(task.get("text", ""))
    line.append(f"  #{suffix}", style="dim")
    console.print(line)


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs only)."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict) and "id" in item:
                print(item["id"])
    elif isinstance(data, dict) and "id" in data:
        print(data["id"])


def format_list_view(view: ListView, output_format: str = "pretty") -> None:
    """Render a full list snapshot: tasks, remaining count and hints."""
    tasks = [task.model_dump(by_alias=True) for task in view.tasks]

    if output_format in ("json", "yaml"):
        format_output(
            {
                "tasks": tasks,
                "remaining": view.remaining_count,
                "has_completed": view.show_clear_completed,
            },
            output_format,
        )
        return
    if output_format == "quiet":
        format_quiet(tasks)
        return

    if output_format == "table" and not view.is_empty:
        format_table(tasks)
    else:
        format_pretty(tasks)

    console.print()
    console.print(view.remaining_label, style="bold")
    if view.show_clear_completed:
        console.print("[dim]Run 'vibelist clear' to remove completed tasks.[/dim]")


def format_created_at(value: int) -> str:
    """Format epoch milliseconds as a local timestamp ("-" when unknown)."""
    if not value:
        return "-"
    return datetime.fromtimestamp(value / 1000).strftime("%Y-%m-%d %H:%M")


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
