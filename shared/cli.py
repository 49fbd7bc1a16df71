"""Console helpers shared by the CLI entry points."""

import sys
from functools import wraps
from typing import Callable, Optional

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[cyan]ℹ[/cyan] {message}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/bold green] {message}")


def warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[bold red]✗ {message}[/bold red]")


def create_table(title: Optional[str] = None, *columns: str) -> Table:
    """
    Create a rich table with the common style.

    Args:
        title: Table title
        *columns: Column headers

    Returns:
        Table ready for add_row()
    """
    table = Table(title=title, show_header=bool(columns), header_style="bold magenta")
    for column in columns:
        table.add_column(column)
    return table


def print_table(table: Table) -> None:
    """Render a table on the console."""
    console.print(table)


def handle_errors(func: Callable) -> Callable:
    """Turn interrupts into a clean exit for click commands."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)

    return wrapper
