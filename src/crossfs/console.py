"""Rich console output for the crossfs CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from crossfs.path import Path


class Output:
    """Text output for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. A new one if not provided.
        """
        self.console = console or Console()

    def show_locations(self, locations: dict[str, str]) -> None:
        """Display system directory locations.

        Args:
            locations: Mapping of label to location string.
        """
        table = Table(title="System Directories")
        table.add_column("Location", style="cyan")
        table.add_column("Path")

        for label, value in locations.items():
            table.add_row(label, value)

        self.console.print(table)

    def show_entries(self, root: Path, entries: list[tuple[Path, bool]]) -> None:
        """Display directory entries relative to their root.

        Args:
            root: Directory that was listed.
            entries: Pairs of entry path and whether it is a directory.
        """
        if not entries:
            self.console.print(f"[yellow]No entries in {root}[/yellow]")
            return

        table = Table(title=str(root))
        table.add_column("Entry", style="cyan")
        table.add_column("Type")

        prefix = root.value + root.platform.separator
        for entry, is_dir in entries:
            name = entry.value[len(prefix) :] if entry.value.startswith(prefix) else entry.filename()
            table.add_row(name, "Directory" if is_dir else "File")

        self.console.print(table)

    def show_text(self, text: str) -> None:
        """Print raw text without markup processing."""
        self.console.print(text, markup=False, highlight=False, end="")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")
