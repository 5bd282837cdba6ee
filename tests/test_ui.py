"""Tests for the interactive ARN lookup UI."""

from unittest.mock import Mock, patch

import pytest
from rich.table import Table

from link2aws.core.arn import parse
from link2aws.ui import LinkUI


@pytest.fixture
def ui() -> LinkUI:
    return LinkUI(Mock())


@patch("link2aws.ui.prompt_text")
def test_prompt_arn(mock_prompt, ui) -> None:
    mock_prompt.return_value = "arn:aws:s3:::my-bucket"

    assert ui.prompt_arn() == "arn:aws:s3:::my-bucket"
    mock_prompt.assert_called_once()


def test_resolve_success(ui) -> None:
    arn, link = ui.resolve("arn:aws:s3:::my-bucket")

    assert arn == parse("arn:aws:s3:::my-bucket")
    assert link == "https://s3.console.aws.amazon.com/s3/buckets/my-bucket"
    ui.console.print.assert_any_call("\n🔗 Console link:", style="bold cyan")
    ui.console.print.assert_any_call(link, soft_wrap=True, markup=False, highlight=False)


def test_resolve_parse_error(ui) -> None:
    arn, link = ui.resolve("foo")

    assert arn is None
    assert link is None
    assert ui.console.print.call_args[0][0].startswith("\n❌ Malformed ARN")
    assert ui.console.print.call_args[1]["style"] == "red"


def test_resolve_link_error_keeps_parsed_arn(ui) -> None:
    arn, link = ui.resolve("arn:aws:not-a-service:us-east-1:123456789012:thing/x")

    assert arn is not None
    assert arn.service == "not-a-service"
    assert link is None
    assert ui.console.print.call_args[1]["style"] == "yellow"


def test_select_arn_action_with_link(ui) -> None:
    ui.select_with_nav = Mock(return_value="action:open_console")

    result = ui.select_arn_action("https://example.test")

    assert result == "action:open_console"
    choices = ui.select_with_nav.call_args[0][1]
    assert [choice["value"] for choice in choices] == ["action:open_console", "action:show_fields"]
    assert ui.select_with_nav.call_args[0][2] == "Look up another ARN"


def test_select_arn_action_without_link(ui) -> None:
    ui.select_with_nav = Mock(return_value="action:show_fields")

    ui.select_arn_action(None)

    choices = ui.select_with_nav.call_args[0][1]
    assert [choice["value"] for choice in choices] == ["action:show_fields"]


@patch("link2aws.core.base.select_with_navigation")
def test_select_with_nav_delegates(mock_select, ui) -> None:
    mock_select.return_value = "navigation:back"

    result = ui.select_arn_action(None)

    assert result == "navigation:back"
    mock_select.assert_called_once()


@patch("webbrowser.open")
def test_open_in_console(mock_open, ui) -> None:
    ui.open_in_console("https://s3.console.aws.amazon.com/s3/buckets/my-bucket")

    mock_open.assert_called_once_with("https://s3.console.aws.amazon.com/s3/buckets/my-bucket")


@patch("webbrowser.open")
def test_open_in_console_without_link(mock_open, ui) -> None:
    ui.open_in_console(None)

    mock_open.assert_not_called()


def test_display_table(ui) -> None:
    table = ui.display_table("Title", [("A", {}), ("B", {"justify": "right"})], [("1", "2"), ("3", "4")])

    assert isinstance(table, Table)
    assert table.title == "Title"
    assert len(table.columns) == 2
    assert table.row_count == 2
    ui.console.print.assert_called_once_with(table)


def test_display_arn_fields(ui) -> None:
    ui.display_arn_fields(parse("arn:aws:ecs:us-east-1:123456789012:task-definition/web:42"))

    tables = [call.args[0] for call in ui.console.print.call_args_list if call.args]
    assert len(tables) == 1
    table = tables[0]
    assert isinstance(table, Table)
    assert table.title == "arn:aws:ecs:us-east-1:123456789012:task-definition/web:42"
    assert table.row_count == 9


def test_display_coverage(ui) -> None:
    rows = [
        {"service": "s3", "known_types": 3, "linked_types": 3, "linked": ["", "accesspoint", "job"]},
        {"service": "waf", "known_types": 12, "linked_types": 0, "linked": []},
    ]

    ui.display_coverage(rows)

    table = ui.console.print.call_args_list[0].args[0]
    assert isinstance(table, Table)
    assert table.row_count == 2
    ui.console.print.assert_any_call("\n2 services, 3 of 15 resource types linked", style="dim")
