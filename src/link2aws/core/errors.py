"""Errors raised while parsing ARNs and resolving console links."""

from __future__ import annotations


class ArnError(ValueError):
    """Base class for every error raised by link2aws."""


class TypeMismatchError(ArnError, TypeError):
    def __init__(self, value: object) -> None:
        super().__init__(f"ARN must be a string, got {type(value).__name__}")
        self.value = value


class TooLongError(ArnError):
    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"ARN is too long ({length} characters, limit is {limit})")
        self.length = length
        self.limit = limit


class InvalidCharactersError(ArnError):
    def __init__(self, characters: str) -> None:
        super().__init__(f"ARN contains invalid characters: {characters!r}")
        self.characters = characters


class MalformedArnError(ArnError):
    def __init__(self, reason: str = "bad number of tokens") -> None:
        super().__init__(f"Malformed ARN: {reason}")
        self.reason = reason


class InvalidRegionError(ArnError):
    def __init__(self, region: str) -> None:
        super().__init__(f"Invalid region: {region!r}")
        self.region = region


class ConsoleLinkError(ArnError):
    """No console link can be produced for a parsed ARN."""


class NotAnArnError(ConsoleLinkError):
    def __init__(self, prefix: str) -> None:
        super().__init__(f"Bad ARN prefix {prefix!r}")
        self.prefix = prefix


class UnsupportedPartitionError(ConsoleLinkError):
    def __init__(self, partition: str) -> None:
        super().__init__(f"Bad/unsupported AWS partition: {partition!r}")
        self.partition = partition


class UnknownServiceError(ConsoleLinkError):
    def __init__(self, service: str) -> None:
        super().__init__(f"AWS service {service!r} unknown")
        self.service = service


class UnsupportedResourceTypeError(ConsoleLinkError):
    def __init__(self, service: str, resource_type: str) -> None:
        super().__init__(f"AWS service {service!r} resource type {resource_type!r} not supported")
        self.service = service
        self.resource_type = resource_type
