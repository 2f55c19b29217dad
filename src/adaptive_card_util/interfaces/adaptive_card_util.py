"""Abstract interface for building Adaptive Cards (Teams and other hosts)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover
    from adaptive_card_util.cards.types import Card


class IAdaptiveCardUtil(ABC):
    """Interface for card builders."""

    @abstractmethod
    def build(
        self,
        title: str,
        summary: Optional[str] = None,
        facts: Optional[Mapping[str, Optional[str]]] = None,
        error: Optional[BaseException] = None,
        additional_body: Optional[str] = None,
    ) -> Card:
        """Build a general-purpose card.

        Args:
            title: Text shown at the top of the card.
            summary: Optional subtitle.
            facts: Key/value pairs shown as a fact set; empty values are dropped.
            error: Optional exception; its traceback is added, truncated if too large.
            additional_body: Optional extra text block.
        """
        ...

    @abstractmethod
    def build_table(
        self,
        title: str,
        items: Sequence[Any],
        summary: Optional[str] = None,
        *,
        record_type: Optional[type] = None,
    ) -> Card:
        """Build a card with one row per item and a header row of field names.

        Args:
            title: Text shown at the top of the card.
            items: Records rendered as rows.
            summary: Optional subtitle.
            record_type: Class whose fields define the columns (defaults to the first item's type).
        """
        ...
