"""AWS Console URL construction for parsed ARNs."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from .errors import NotAnArnError, UnknownServiceError, UnsupportedPartitionError, UnsupportedResourceTypeError

if TYPE_CHECKING:
    from .arn import ParsedArn

CONSOLE_HOSTS = {
    "aws": "console.aws.amazon.com",
    "aws-us-gov": "console.amazonaws-us-gov.com",
    "aws-cn": "console.amazonaws.cn",
}

SERVICE_DOMAINS = {
    "aws": "amazonaws.com",
    "aws-us-gov": "amazonaws.com",
    "aws-cn": "amazonaws.com.cn",
}


def console_host(partition: str) -> str:
    """Console hostname for an AWS partition."""
    try:
        return CONSOLE_HOSTS[partition]
    except KeyError:
        raise UnsupportedPartitionError(partition) from None


def service_domain(arn: ParsedArn) -> str:
    """Domain of the partition's service endpoints, e.g. ``amazonaws.com``."""
    try:
        return SERVICE_DOMAINS[arn.partition]
    except KeyError:
        raise UnsupportedPartitionError(arn.partition) from None


def global_url(arn: ParsedArn, path: str) -> str:
    return f"https://{arn.console}/{path}"


def regional_url(arn: ParsedArn, path: str) -> str:
    return f"https://{arn.region}.{arn.console}/{path}"


def console_escape(value: str) -> str:
    """Escape a value for CloudWatch console routes.

    The console expects the value URL-encoded twice with ``%`` replaced by
    ``$``, so ``/`` becomes ``$252F`` and ``#`` becomes ``$2523``.
    """
    return quote(quote(value, safe=""), safe="").replace("%", "$")


def strip_zero_padding(value: str) -> str:
    """``"0000000012"`` -> ``"12"``. An all-zero value collapses to ``"0"``."""
    return value.lstrip("0") or ("0" if value else "")


def build_console_link(arn: ParsedArn) -> str:
    """Resolve the console URL for a parsed ARN.

    Raises a ConsoleLinkError subclass when the ARN cannot be linked.
    """
    from ..services.registry import LINK_TEMPLATES

    if arn.prefix != "arn":
        raise NotAnArnError(arn.prefix)

    console_host(arn.partition)

    templates = LINK_TEMPLATES.get(arn.service)
    if templates is None:
        raise UnknownServiceError(arn.service)

    builder = templates.get(arn.resource_type)
    if builder is None:
        raise UnsupportedResourceTypeError(arn.service, arn.resource_type)

    url = builder(arn)
    if url is None:
        raise UnsupportedResourceTypeError(arn.service, arn.resource_type)

    return url
