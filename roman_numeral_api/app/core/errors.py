"""
Conversion error hierarchy.

Every failure of a conversion request is a deterministic input
problem, so all of them derive from ``ValueError``.  The API layer
catches ``ConversionError`` and reports it as HTTP 400; the messages
below are returned to clients verbatim (prefixed with ``Error:``).
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for rejected conversion requests."""

    message = "Invalid request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidParameters(ConversionError):
    """The supplied parameters match neither single nor range mode."""

    message = "Invalid parameters. Please provide either 'query' or both 'min' and 'max'."


class InvalidInput(ConversionError):
    """A parameter is not a plain non-negative integer literal."""

    message = "Invalid input"


class OutOfRange(ConversionError):
    """A well-formed integer lies outside 1..3999."""

    message = "Number out of range. must be between 1 and 3999"


class InvalidRange(ConversionError):
    """Both bounds are valid but ``min`` is not below ``max``."""

    message = "Invalid range: 'min' should be less than 'max'."


__all__ = [
    "ConversionError",
    "InvalidParameters",
    "InvalidInput",
    "OutOfRange",
    "InvalidRange",
]
