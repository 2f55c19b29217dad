"""Adaptive Card builders for Microsoft Teams notifications."""

from adaptive_card_util.cards import AdaptiveCardRenderer, AdaptiveCardUtil, Card
from adaptive_card_util.interfaces import IAdaptiveCardUtil

__all__ = ["AdaptiveCardRenderer", "AdaptiveCardUtil", "Card", "IAdaptiveCardUtil"]
