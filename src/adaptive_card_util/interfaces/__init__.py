"""Abstract interfaces."""

from adaptive_card_util.interfaces.adaptive_card_util import IAdaptiveCardUtil

__all__ = ["IAdaptiveCardUtil"]
