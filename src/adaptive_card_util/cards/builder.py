# -*- coding: utf-8 -*-
"""Card assembly: header, facts, free text, table rows and footer."""

from __future__ import annotations

import traceback
import structlog
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional

from adaptive_card_util.cards.footer import FooterEnricher
from adaptive_card_util.cards.table_cache import (
    FieldDescriptor,
    TableCache,
    get_table_cache,
    mapping_meta,
)
from adaptive_card_util.cards.text_policy import TextPolicy
from adaptive_card_util.cards.types import (
    Card,
    ConfigSource,
    Fact,
    FactSetBlock,
    HeaderBlock,
    RowBlock,
    Spacing,
    TextBlock,
    TextSize,
    TextWeight,
)
from adaptive_card_util.interfaces import IAdaptiveCardUtil


class AdaptiveCardUtil(IAdaptiveCardUtil):
    """Build Adaptive Cards for Microsoft Teams.

    Each build returns a new Card. The only state shared between builds is the
    table cache, which is process-wide unless one is injected.
    """

    def __init__(
        self,
        config: ConfigSource,
        *,
        table_cache: Optional[TableCache] = None,
        text_policy: Optional[TextPolicy] = None,
        footer: Optional[FooterEnricher] = None,
        schema_version: str = "1.2",
        width: str = "Full",
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the builder.

        Args:
            config: Source of the ``Environment`` and ``ProjectName`` footer values.
            table_cache: Field metadata cache (defaults to the process-wide cache).
            text_policy: Size policy for free text blocks.
            footer: Footer enricher (defaults to one reading ``config``).
            schema_version: Adaptive Card schema version of produced cards.
            width: Teams width hint of produced cards.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._table_cache = table_cache if table_cache is not None else get_table_cache()
        self._text_policy = text_policy or TextPolicy(get_logger=get_logger)
        self._footer = footer or FooterEnricher(config, get_logger=get_logger)
        self._schema_version = schema_version
        self._width = width

    def build(
        self,
        title: str,
        summary: Optional[str] = None,
        facts: Optional[Mapping[str, Optional[str]]] = None,
        error: Optional[BaseException] = None,
        additional_body: Optional[str] = None,
    ) -> Card:
        card = self._create_card()

        self._add_header(card, title, summary)
        self._add_facts(card, facts)

        # Formatting a traceback can be expensive; only done when there is one.
        if error is not None:
            self._add_text_block(card, "".join(traceback.format_exception(error)))

        self._add_text_block(card, additional_body)
        self._footer.append_to(card)

        return card

    def build_table(
        self,
        title: str,
        items: Sequence[Any],
        summary: Optional[str] = None,
        *,
        record_type: Optional[type] = None,
    ) -> Card:
        card = self._create_card()
        self._add_header(card, title, summary)

        if items:
            first = items[0]
            if record_type is None and isinstance(first, Mapping):
                meta = mapping_meta(first)
            else:
                meta = self._table_cache.get_meta(record_type or type(first))
            card.append(RowBlock(cells=meta.names, bold=True, spacing=Spacing.EXTRA_LARGE))

            fields = meta.fields
            for item in items:
                card.append(RowBlock(cells=tuple(self._cell_text(item, f) for f in fields)))

        self._footer.append_to(card)
        return card

    def _create_card(self) -> Card:
        return Card(schema_version=self._schema_version, width=self._width)

    @staticmethod
    def _add_header(card: Card, title: str, summary: Optional[str]) -> None:
        card.append(HeaderBlock(text=title, size=TextSize.MEDIUM, weight=TextWeight.BOLDER))

        if summary:
            card.append(
                HeaderBlock(text=summary, size=TextSize.SMALL, weight=TextWeight.DEFAULT)
            )

    @staticmethod
    def _add_facts(card: Card, facts: Optional[Mapping[str, Optional[str]]]) -> None:
        if not facts:
            return

        card.append(
            FactSetBlock(
                facts=tuple(Fact(title=key, value=value) for key, value in facts.items() if value)
            )
        )

    def _add_text_block(self, card: Card, content: Optional[str]) -> None:
        if not content:
            return

        result = self._text_policy.apply(content)
        card.append(TextBlock(text=result.text or ""))

    def _cell_text(self, item: Any, descriptor: FieldDescriptor) -> str:
        """Render one cell; a failing getter yields an empty cell and an error log."""
        try:
            raw = descriptor.get(item)
        except Exception as exc:
            self._logger.error(
                "table_cell_access_failed",
                field_name=descriptor.name,
                record_type=type(item).__qualname__,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return ""
        return "" if raw is None else str(raw)
