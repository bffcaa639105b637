#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from leaguestats.helpers.dto.awards_dto import AwardValue, NumericValue
from leaguestats.helpers.dto.league_dto import Competitor
from leaguestats.helpers.parse_helper import format_number

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_GOLD = "bold yellow"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for league listings.
    """

    @staticmethod
    def show_rows(title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]], empty: str = "Nothing to show"):
        """Show a simple table; the first column is right-aligned (positions, counts)."""
        if not rows:
            console.print(f"[dim]{empty}[/dim]")
            return

        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style=f"bold {COLOR_INFO}")
        for i, column in enumerate(columns):
            table.add_column(column, justify="right" if i == 0 else "left")
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        console.print(table)

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Show key/value pairs in a bordered panel."""
        content = "\n".join(f"[bold]{key}:[/bold] {value}" for key, value in data.items())
        InfoPanel.show(title, content, border_style)


def competitor_label(competitor: Competitor | None) -> str:
    return competitor.name if competitor else "[dim]-[/dim]"


def award_value_text(value: AwardValue) -> str:
    """Headline text for a tagged award value."""
    if isinstance(value, NumericValue):
        return f"{format_number(value.value)} points"
    return value.text


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[bold {COLOR_INFO}]ℹ[/bold {COLOR_INFO}] {message}")
