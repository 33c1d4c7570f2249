"""Exception hierarchy for the wirecase JSON codec hooks."""

from __future__ import annotations


class WireCaseError(Exception):
    """Base exception for all wirecase errors."""


class PayloadEncodeError(WireCaseError, TypeError):
    """A value could not be serialized to JSON after key conversion."""


class PayloadDecodeError(WireCaseError, ValueError):
    """A response body is not valid JSON.

    Attributes:
        body: The raw body that failed to parse.
    """

    def __init__(self, message: str, *, body: str | bytes | None = None) -> None:
        super().__init__(message)
        self.body = body
