"""Main application logic for the link2aws CLI."""

from __future__ import annotations

import webbrowser
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.arn import parse
from ..core.errors import ArnError
from ..core.navigation import handle_navigation, parse_selection, say_goodbye
from ..core.utils import print_error, print_link

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..core.arn import ParsedArn
    from ..ui import LinkUI


def resolve_links(texts: Iterable[str], open_links: bool = False) -> int:
    """Print the console link for every ARN. Returns the number of failures.

    A bad ARN is reported and skipped, it never stops the remaining ones.
    """
    failures = 0
    for text in texts:
        try:
            link = parse(text).console_link
        except ArnError as e:
            print_error(f"{text.strip()}: {e}")
            failures += 1
            continue

        print_link(link)
        if open_links:
            webbrowser.open(link)
    return failures


def read_arns(lines: Iterable[str]) -> Iterable[str]:
    """ARNs from a text stream, one per non-blank line."""
    for line in lines:
        if line.strip():
            yield line


def run_interactive(ui: LinkUI) -> None:
    """Prompt for ARNs until the user leaves."""
    while True:
        text = ui.prompt_arn()
        if not text:
            say_goodbye()
            break

        arn, link = ui.resolve(text)
        if arn is None:
            continue

        if not handle_arn_actions(ui, arn, link):
            break


def handle_arn_actions(ui: LinkUI, arn: ParsedArn, link: str | None) -> bool:
    """Offer actions for a parsed ARN. Returns True to look up another ARN, False to exit."""
    while True:
        selection = ui.select_arn_action(link)

        should_continue, should_exit = handle_navigation(selection)
        if not should_continue:
            return not should_exit

        selection_type, action_name, _ = parse_selection(selection)
        if selection_type == "action":
            dispatch_arn_action(ui, arn, link, action_name)


def get_arn_action_handlers() -> dict[str, Callable[[LinkUI, ParsedArn, str | None], None]]:
    return {
        "open_console": lambda ui, _arn, link: ui.open_in_console(link),
        "show_fields": lambda ui, arn, _link: ui.display_arn_fields(arn),
    }


def dispatch_arn_action(ui: LinkUI, arn: ParsedArn, link: str | None, action_name: str) -> None:
    handler = get_arn_action_handlers().get(action_name)
    if handler:
        handler(ui, arn, link)
