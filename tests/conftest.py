"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from link2aws.core.arn import ParsedArn, parse


@pytest.fixture
def mock_ui() -> Mock:
    return Mock()


@pytest.fixture
def bucket_arn() -> ParsedArn:
    return parse("arn:aws:s3:::my-bucket")
