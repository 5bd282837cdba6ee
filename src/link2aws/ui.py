"""UI layer - handles all user interaction and display logic."""

from __future__ import annotations

from .core.arn import ParsedArn, parse
from .core.base import BaseUIComponent
from .core.errors import ArnError
from .core.navigation import prompt_text
from .core.types import ServiceCoverage


class LinkUI(BaseUIComponent):
    """Interactive ARN lookups."""

    def prompt_arn(self) -> str | None:
        """Ask for an ARN. Returns None when the user is done."""
        return prompt_text("Paste an ARN (empty to quit):")

    def resolve(self, text: str) -> tuple[ParsedArn | None, str | None]:
        """Parse and link an ARN, reporting the outcome.

        Returns (arn, link); arn is None when parsing failed, link is None
        when the ARN parsed but cannot be linked.
        """
        try:
            arn = parse(text)
        except ArnError as e:
            self.console.print(f"\n❌ {e}", style="red", markup=False)
            return None, None

        try:
            link = arn.console_link
        except ArnError as e:
            self.console.print(f"\n⚠️ {e}", style="yellow", markup=False)
            return arn, None

        self.console.print("\n🔗 Console link:", style="bold cyan")
        self.console.print(link, soft_wrap=True, markup=False, highlight=False)
        return arn, link

    def select_arn_action(self, link: str | None) -> str | None:
        choices = []
        if link:
            choices.append({"name": "🌐 Open in AWS console", "value": "action:open_console"})
        choices.append({"name": "🔍 Show ARN fields", "value": "action:show_fields"})

        return self.select_with_nav("What next?", choices, "Look up another ARN")

    def open_in_console(self, link: str | None) -> None:
        """Open the link in the default browser."""
        if not link:
            return

        import webbrowser

        self.console.print(f"\n🌐 Opening in AWS console: {link}", style="cyan", markup=False)
        webbrowser.open(link)

    def display_arn_fields(self, arn: ParsedArn) -> None:
        self.console.print()
        self.display_table(
            arn.string,
            [("Field", {"style": "cyan", "no_wrap": True}), ("Value", {"style": "white"})],
            [(field, value or "-") for field, value in arn.to_dict().items()],
        )

    def display_coverage(self, rows: list[ServiceCoverage]) -> None:
        self.display_table(
            "Supported AWS services",
            [
                ("Service", {"style": "cyan", "no_wrap": True}),
                ("Known types", {"style": "yellow", "justify": "right"}),
                ("Linked types", {"style": "green", "justify": "right"}),
                ("Linked", {"style": "white"}),
            ],
            [
                (
                    row["service"],
                    str(row["known_types"]),
                    str(row["linked_types"]),
                    ", ".join(name or "(no type)" for name in row["linked"]),
                )
                for row in rows
            ],
        )

        total_known = sum(row["known_types"] for row in rows)
        total_linked = sum(row["linked_types"] for row in rows)
        self.console.print(f"\n{len(rows)} services, {total_linked} of {total_known} resource types linked", style="dim")
