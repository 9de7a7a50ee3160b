"""
Application-level exception types.

Route handlers map these onto HTTP responses; anything else reaching the
boundary is reported as a generic server error.
"""

from __future__ import annotations


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        self.detail = detail or message
        super().__init__(message)


class InvalidInputError(AppError):
    """Raised when caller-supplied text fails validation."""


class TeaserRejectedError(AppError):
    """Raised when a teaser is not recognized as a story and no override was sent."""

    def __init__(self, classification: str) -> None:
        super().__init__(
            f"Teaser classified as {classification!r}",
            detail="Teaser not recognized as story.",
        )
        self.classification = classification


class UpstreamError(AppError):
    """Raised when the completion or image API fails or returns something unusable."""
