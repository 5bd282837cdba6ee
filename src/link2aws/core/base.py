"""Base class for UI components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table

from .navigation import select_with_navigation


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select_with_nav(self, prompt: str, choices: list[dict[str, str]], back_text: str | None) -> str | None:
        """Standard selection with back/exit navigation."""
        return select_with_navigation(prompt, choices, back_text)

    def display_table(
        self, title: str, columns: Sequence[tuple[str, dict[str, object]]], rows: Iterable[Sequence[str]]
    ) -> Table:
        """Print a table. Columns are (header, rich column options) pairs."""
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for header, options in columns:
            table.add_column(header, **options)
        for row in rows:
            table.add_row(*row)

        self.console.print(table)
        return table
