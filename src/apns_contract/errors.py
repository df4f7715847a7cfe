"""Errors raised while turning an APNs response body into typed values."""

from typing import Any


class ParseError(ValueError):
    """Base class for every failure to parse an APNs error body."""


class UnknownReasonError(ParseError):
    """The body carried a ``reason`` outside the known set."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown APNs error reason: {value!r}")
        self.value = value


class MissingFieldError(ParseError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field in APNs error body: {field!r}")
        self.field = field


class TypeMismatchError(ParseError):
    """A known field was present but had the wrong type."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        super().__init__(
            f"Field {field!r} in APNs error body must be {expected}, got {value!r}"
        )
        self.field = field
        self.value = value
        self.expected = expected


class MalformedBodyError(ParseError):
    """The body is not a JSON object."""
