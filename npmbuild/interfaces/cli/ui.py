#!/usr/bin/env python3
"""
Rich UI components for the CLI.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel

console = Console()
err_console = Console(stderr=True)

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info without progress tracking.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message to stderr."""
    err_console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}", markup=True, highlight=False)
