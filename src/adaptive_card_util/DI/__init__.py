"""Dependency injection."""

from adaptive_card_util.DI.container import Container

__all__ = ["Container"]
