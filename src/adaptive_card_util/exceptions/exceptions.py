"""Custom exceptions for card building and rendering."""

from __future__ import annotations


class AdaptiveCardError(Exception):
    """Base exception for adaptive card related errors."""

    pass


class UnsupportedRecordTypeError(AdaptiveCardError, TypeError):
    """Raised when table columns cannot be derived from a record type."""

    def __init__(self, record_type: object, message: str | None = None) -> None:
        super().__init__(
            message
            or f"Table rows need a record class, got {type(record_type).__name__}: {record_type!r}"
        )
        self.record_type = record_type


class CardRenderError(AdaptiveCardError):
    """Raised when a card payload cannot be mapped to or from display blocks."""

    def __init__(
        self,
        message: str,
        *,
        element_type: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.element_type = element_type
        self.cause = cause
