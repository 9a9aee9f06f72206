"""
CLI Utilities for TomlStash

Rich-based helpers for consistent CLI output.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .constants import HASH_DISPLAY_LENGTH

console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print styled header with optional subtitle"""
    content = f"[bold cyan]{escape(title)}[/bold cyan]"
    if subtitle:
        content += f"\n[dim]{escape(subtitle)}[/dim]"

    panel = Panel(content, border_style="cyan")
    console.print(panel)


def print_success(message: str):
    """Print success message with green checkmark"""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str):
    """Print error message with red X"""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str):
    """Print warning message with yellow warning symbol"""
    console.print(f"[yellow]⚠[/yellow]  {escape(message)}")


def print_info(message: str):
    """Print info message with cyan arrow"""
    console.print(f"[cyan]→[/cyan] {escape(message)}")


def create_table(title: str, columns: List[tuple]) -> Table:
    """
    Create a styled Rich table

    Args:
        title: Table title
        columns: List of (name, style, width) tuples, width may be None

    Returns:
        Rich Table instance
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for name, style, width in columns:
        table.add_column(name, style=style, width=width)
    return table


def short_hash(digest: str, length: Optional[int] = None) -> str:
    """Shorten a hex digest for display ('-' when empty)."""
    if not digest:
        return "-"
    return digest[: length or HASH_DISPLAY_LENGTH]


def print_toml(text: str, title: str = ""):
    """Print TOML text with syntax highlighting"""
    syntax = Syntax(text, "toml", theme="ansi_dark", word_wrap=True)
    if title:
        console.print(Panel(syntax, title=f"[bold cyan]{escape(title)}[/bold cyan]", border_style="cyan"))
    else:
        console.print(syntax)
