"""Type definitions for link2aws."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias, TypedDict

if TYPE_CHECKING:
    from .arn import ParsedArn

LinkBuilder: TypeAlias = "Callable[[ParsedArn], str | None]"
ServiceTemplates: TypeAlias = "dict[str, LinkBuilder | None]"
LinkTemplateTable: TypeAlias = "dict[str, ServiceTemplates]"


class ServiceCoverage(TypedDict):
    service: str
    known_types: int
    linked_types: int
    linked: list[str]


class ArnFields(TypedDict):
    prefix: str
    partition: str
    service: str
    region: str
    account: str
    resource_type: str
    resource: str
    resource_revision: str
    shape: str
