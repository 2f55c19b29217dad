"""Logging subpackage."""

from adaptive_card_util.logging.config import configure_logging

__all__ = ["configure_logging"]
