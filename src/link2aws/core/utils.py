"""Output helpers for the link2aws CLI."""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_link(url: str) -> None:
    """Print a link on its own line, unwrapped and unstyled so it can be piped or copied."""
    console.print(url, soft_wrap=True, markup=False, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"❌ {message}", style="red", markup=False, highlight=False)

