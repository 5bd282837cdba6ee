"""Selection prompts for the interactive ARN lookup."""

from __future__ import annotations

import questionary
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.key_binding.key_processor import KeyPress, KeyPressEvent
from prompt_toolkit.keys import Keys
from rich.console import Console

console = Console()

BACK = "navigation:back"
EXIT = "navigation:exit"


def parse_selection(selected: str | None) -> tuple[str, str, str]:
    """Split ``kind:value[:extra]``. A value without a colon is of kind ``unknown``."""
    if not selected or ":" not in selected:
        return ("unknown", selected or "", "")

    kind, value, *extra = selected.split(":", 2)
    return (kind, value, extra[0] if extra else "")


def say_goodbye() -> None:
    console.print("\n👋 Goodbye!", style="cyan")


def handle_navigation(selected: str | None) -> tuple[bool, bool]:
    """Returns (should_continue, should_exit). Ctrl-C at a prompt selects None and exits."""
    if not selected or selected == EXIT:
        say_goodbye()
        return False, True
    if selected == BACK:
        return False, False
    return True, False


def get_questionary_style() -> questionary.Style:
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan"),
            ("selected", "fg:green"),
        ]
    )


def add_navigation_choices_with_shortcuts(
    choices: list[dict[str, str]], back_text: str | None
) -> list[questionary.Choice]:
    """Menu entries plus back (``b``, only with back_text) and exit (``q``)."""
    menu = [questionary.Choice(choice["name"], choice["value"]) for choice in choices]
    if back_text:
        menu.append(questionary.Choice(f"⬅️ {back_text} (b)", BACK, shortcut_key="b"))
    menu.append(questionary.Choice("❌ Exit (q)", EXIT, shortcut_key="q"))
    return menu


def _escape_goes_back() -> KeyBindings:
    bindings = KeyBindings()

    @bindings.add(Keys.Escape, eager=True)
    def _(event: KeyPressEvent) -> None:
        # same as pressing the back shortcut and Enter
        event.app.key_processor.feed(KeyPress("b", ""))
        event.app.key_processor.feed(KeyPress(Keys.ControlM, ""))

    return bindings


def select_with_navigation(prompt: str, choices: list[dict[str, str]], back_text: str | None) -> str | None:
    question = questionary.select(
        prompt,
        choices=add_navigation_choices_with_shortcuts(choices, back_text),
        style=get_questionary_style(),
        use_shortcuts=True,
    )

    application = getattr(question, "application", None)
    if application is not None and application.key_bindings:
        application.key_bindings = merge_key_bindings([application.key_bindings, _escape_goes_back()])

    return question.ask()


def prompt_text(prompt: str) -> str | None:
    """Free text prompt. Returns None on Ctrl-C or empty input."""
    answer = questionary.text(prompt, style=get_questionary_style()).ask()
    if not answer or not answer.strip():
        return None
    return answer.strip()
