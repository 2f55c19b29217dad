"""Exceptions subpackage."""

from adaptive_card_util.exceptions.exceptions import (
    AdaptiveCardError,
    CardRenderError,
    UnsupportedRecordTypeError,
)

__all__ = [
    "AdaptiveCardError",
    "CardRenderError",
    "UnsupportedRecordTypeError",
]
