"""ARN tokenizer.

ARNs are not delimited consistently across services. The resource part may
be ``resource-id``, ``resource-type/resource-id``, ``resource-type:resource-id``
or ``resource-type/resource-id:revision``, and the id itself may contain more
colons or slashes. The rules below are applied in a fixed order and must stay
that way, existing callers rely on the exact split.

https://docs.aws.amazon.com/general/latest/gr/aws-arns-and-namespaces.html
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from .aws_console import build_console_link, console_host
from .errors import (
    InvalidCharactersError,
    InvalidRegionError,
    MalformedArnError,
    TooLongError,
    TypeMismatchError,
)
from .types import ArnFields

MAX_ARN_LENGTH = 2048

_ALLOWED_CHARACTERS = re.compile(r"[A-Za-z0-9:/+=,.@_*#-]*")
_INVALID_CHARACTER = re.compile(r"[^A-Za-z0-9:/+=,.@_*#-]")
# Region ends up as a hostname label in generated links.
_REGION = re.compile(r"[a-z0-9-]*")


class ArnShape(StrEnum):
    BARE = "resource-id"
    TYPED = "resource-type:resource-id"
    PATH = "resource-type/resource-id"
    PATH_REVISION = "resource-type/resource-id:revision"


@dataclass(frozen=True)
class ParsedArn:
    raw: str
    prefix: str
    partition: str
    service: str
    region: str
    account: str
    resource_type: str
    resource: str
    resource_revision: str = ""
    shape: ArnShape = ArnShape.BARE

    @classmethod
    def parse(cls, text: object) -> ParsedArn:
        return parse(text)

    @property
    def has_path(self) -> bool:
        return self.shape in (ArnShape.PATH, ArnShape.PATH_REVISION)

    @property
    def string(self) -> str:
        """Canonical form, rebuilt with the delimiters the ARN was parsed from."""
        head = f"{self.prefix}:{self.partition}:{self.service}:{self.region}:{self.account}"
        if self.shape is ArnShape.BARE:
            return f"{head}:{self.resource}"
        if self.shape is ArnShape.TYPED:
            return f"{head}:{self.resource_type}:{self.resource}"

        path = f"{head}:{self.resource_type}/{self.resource}"
        if self.shape is ArnShape.PATH_REVISION:
            return f"{path}:{self.resource_revision}"
        return path

    @property
    def qualifiers(self) -> list[str]:
        """Colon separated parts of the resource, e.g. ``["my-layer", "3"]``."""
        return self.resource.split(":")

    @property
    def path_all_but_last(self) -> str:
        """``"aws-service-role/support.amazonaws.com/AWSServiceRoleForSupport"`` -> ``"aws-service-role/support.amazonaws.com"``"""
        index = self.resource.rfind("/")
        if index < 0:
            return ""
        return self.resource[:index]

    @property
    def path_last(self) -> str:
        """``"aws-service-role/support.amazonaws.com/AWSServiceRoleForSupport"`` -> ``"AWSServiceRoleForSupport"``"""
        return self.resource[self.resource.rfind("/") + 1 :]

    @property
    def console(self) -> str:
        """Console hostname for the ARN's partition."""
        return console_host(self.partition)

    @property
    def console_link(self) -> str:
        return build_console_link(self)

    def to_dict(self) -> ArnFields:
        return {
            "prefix": self.prefix,
            "partition": self.partition,
            "service": self.service,
            "region": self.region,
            "account": self.account,
            "resource_type": self.resource_type,
            "resource": self.resource,
            "resource_revision": self.resource_revision,
            "shape": self.shape.value,
        }

    def __str__(self) -> str:
        return self.string


def _split_path(token: str) -> tuple[str, str] | None:
    """Split ``type/id`` at the first slash.

    A slash at index 0 (``/restapis/abc``) is not a type separator, the whole
    token stays the resource.
    """
    index = token.find("/")
    if index <= 0:
        return None
    return token[:index], token[index + 1 :]


def _characters_to_check(tokens: list[str]) -> str:
    # A space is tolerated in the region only, so the region check can name it.
    if len(tokens) <= 3:
        return ":".join(tokens)
    return ":".join([*tokens[:3], tokens[3].replace(" ", ""), *tokens[4:]])


def parse(text: object) -> ParsedArn:
    """Parse an ARN string into its fields.

    Raises an ArnError subclass for anything that is not a well-formed,
    safe to link ARN.
    """
    if not isinstance(text, str):
        raise TypeMismatchError(text)

    text = text.strip()

    if len(text) > MAX_ARN_LENGTH:
        raise TooLongError(len(text), MAX_ARN_LENGTH)

    tokens = text.split(":")
    checked = _characters_to_check(tokens)
    if not _ALLOWED_CHARACTERS.fullmatch(checked):
        invalid = "".join(dict.fromkeys(_INVALID_CHARACTER.findall(checked)))
        raise InvalidCharactersError(invalid)

    if len(tokens) < 6:
        raise MalformedArnError()

    prefix, partition, service, region, account, head = tokens[:6]
    tail = ":".join(tokens[6:]) if len(tokens) > 6 else None

    path = _split_path(head)
    revision = ""

    if tail is not None and path is not None:
        resource_type, resource = path
        revision = tail
        shape = ArnShape.PATH_REVISION
    elif tail is not None:
        resource_type, resource = head, tail
        shape = ArnShape.TYPED
    elif path is not None:
        resource_type, resource = path
        shape = ArnShape.PATH
    else:
        resource_type, resource = "", head
        shape = ArnShape.BARE

    if region and not _REGION.fullmatch(region):
        raise InvalidRegionError(region)

    return ParsedArn(
        raw=text,
        prefix=prefix,
        partition=partition,
        service=service,
        region=region,
        account=account,
        resource_type=resource_type,
        resource=resource,
        resource_revision=revision,
        shape=shape,
    )
