# -*- coding: utf-8 -*-
"""Card footer: environment, project, host and timestamp lines."""

from __future__ import annotations

import structlog
from typing import Any, Callable, Optional

from adaptive_card_util.cards.types import (
    Card,
    ConfigSource,
    FooterBlock,
    MachineNameLookup,
    TimestampFormatter,
)
from adaptive_card_util.utils.environment import get_machine_name
from adaptive_card_util.utils.timezones import DEFAULT_TIMESTAMP_FORMAT, EASTERN, now_formatted


class FooterEnricher:
    """Append footer lines to a card.

    Environment and project name are read once from the config source.
    Machine name and timestamp are resolved on every call; a failing machine
    name lookup is logged and the line is left out.
    """

    def __init__(
        self,
        config: ConfigSource,
        *,
        zone: str = EASTERN,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        machine_name: MachineNameLookup = get_machine_name,
        clock: Optional[TimestampFormatter] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._environment = config.get_value("Environment")
        self._project_name = config.get_value("ProjectName")
        self._zone = zone
        self._machine_name = machine_name
        self._clock = clock or (lambda z: now_formatted(z, timestamp_format))
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def append_to(self, card: Card) -> None:
        self._add_line(card, self._environment)
        self._add_line(card, self._project_name)

        try:
            self._add_line(card, self._machine_name())
        except Exception as exc:
            self._logger.error(
                "machine_name_lookup_failed",
                error_type=type(exc).__name__,
                error_message=str(exc),
                exc_info=True,
            )

        self._add_line(card, self._clock(self._zone))

    @staticmethod
    def _add_line(card: Card, text: Optional[str]) -> None:
        if not text:
            return
        card.append(FooterBlock(text=text))
