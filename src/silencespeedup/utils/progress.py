"""Rich console diagnostics for the plugin and the CLI.

Everything goes to stderr so CLI results on stdout stay pipeable.
"""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console(stderr=True)


def _emit(message: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {message}", highlight=False)


def log(message: str) -> None:
    """Log a timestamped message."""
    _emit(message)


def log_step(step: str, message: str) -> None:
    """Log a named step, e.g. ``Simulate`` or ``Inspect``."""
    _emit(f"[bold cyan]{step}[/bold cyan] {message}")


def log_success(message: str) -> None:
    _emit(f"[green]✓[/green] {message}")


def log_warning(message: str) -> None:
    """Report a recovered problem; the caller carries on with safe defaults."""
    _emit(f"[yellow]⚠[/yellow] {message}")


def log_error(message: str) -> None:
    _emit(f"[red]✗[/red] {message}")


def show_summary(title: str, details: dict) -> None:
    """Show a key/value summary panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()

    for key, value in details.items():
        table.add_row(key, str(value))

    console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="green"))
