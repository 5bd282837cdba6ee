"""Tests for core utility functions."""

from unittest.mock import patch

from link2aws.core.utils import print_error, print_link


def test_print_link_is_unwrapped_and_unstyled():
    url = "https://us-east-1.console.aws.amazon.com/ecs/v2/clusters/production"
    with patch("link2aws.core.utils.console") as mock_console:
        print_link(url)

    mock_console.print.assert_called_once_with(url, soft_wrap=True, markup=False, highlight=False)


def test_print_error_goes_to_stderr():
    with (
        patch("link2aws.core.utils.console") as mock_console,
        patch("link2aws.core.utils.err_console") as mock_err_console,
    ):
        print_error("Bad ARN prefix 'foo'")

    mock_err_console.print.assert_called_once()
    assert mock_err_console.print.call_args[0][0] == "❌ Bad ARN prefix 'foo'"
    assert mock_err_console.print.call_args[1]["style"] == "red"
    mock_console.print.assert_not_called()


def test_print_error_does_not_interpret_markup():
    with patch("link2aws.core.utils.err_console") as mock_err_console:
        print_error("arn:aws:s3:::[bold]x")

    assert mock_err_console.print.call_args[1]["markup"] is False
