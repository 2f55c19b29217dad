# -*- coding: utf-8 -*-
"""Unit tests for FooterEnricher."""

from __future__ import annotations

from typing import Any, Callable

from adaptive_card_util.cards.footer import FooterEnricher
from adaptive_card_util.cards.types import Card, FooterBlock, Spacing, TextSize


def _texts(card: Card) -> list[str]:
    return [block.text for block in card.blocks if isinstance(block, FooterBlock)]


def test_appends_environment_project_host_and_timestamp_in_order(
    config_source: Any,
    fixed_clock: Callable[[str], str],
) -> None:
    footer = FooterEnricher(
        config_source,
        zone="America/New_York",
        machine_name=lambda: "worker-7",
        clock=fixed_clock,
    )
    card = Card()

    footer.append_to(card)

    assert _texts(card) == [
        "production",
        "billing",
        "worker-7",
        "2026-02-13 07:00:00 AM [America/New_York]",
    ]
    block = card.blocks[0]
    assert isinstance(block, FooterBlock)
    assert block.size is TextSize.SMALL
    assert block.subtle is True
    assert block.spacing is Spacing.SMALL


def test_missing_config_values_are_skipped(fixed_clock: Callable[[str], str]) -> None:
    class _Config:
        def get_value(self, key: str) -> str | None:
            return {"Environment": "", "ProjectName": None}.get(key)

    footer = FooterEnricher(_Config(), machine_name=lambda: "worker-7", clock=fixed_clock)
    card = Card()

    footer.append_to(card)

    assert len(_texts(card)) == 2
    assert _texts(card)[0] == "worker-7"


def test_machine_name_failure_is_logged_and_skipped(
    config_source: Any,
    fixed_clock: Callable[[str], str],
    get_logger: Callable[[str], Any],
    fake_logger: Any,
) -> None:
    def _boom() -> str:
        raise OSError("no hostname")

    footer = FooterEnricher(
        config_source, machine_name=_boom, clock=fixed_clock, get_logger=get_logger
    )
    card = Card()

    footer.append_to(card)

    assert _texts(card) == ["production", "billing", fixed_clock("America/New_York")]
    level, event, fields = fake_logger.records[0]
    assert (level, event) == ("error", "machine_name_lookup_failed")
    assert fields["error_type"] == "OSError"


def test_timestamp_is_resolved_on_every_call(config_source: Any) -> None:
    ticks = iter(["t1", "t2"])
    footer = FooterEnricher(config_source, machine_name=lambda: "h", clock=lambda _zone: next(ticks))
    first, second = Card(), Card()

    footer.append_to(first)
    footer.append_to(second)

    assert _texts(first)[-1] == "t1"
    assert _texts(second)[-1] == "t2"


def test_config_is_read_once_at_construction() -> None:
    calls: list[str] = []

    class _Config:
        def get_value(self, key: str) -> str | None:
            calls.append(key)
            return key.lower()

    footer = FooterEnricher(_Config(), machine_name=lambda: "h", clock=lambda _zone: "now")
    footer.append_to(Card())
    footer.append_to(Card())

    assert calls == ["Environment", "ProjectName"]


def test_default_clock_formats_timestamp_in_zone(config_source: Any) -> None:
    footer = FooterEnricher(
        config_source,
        zone="UTC",
        timestamp_format="%Z",
        machine_name=lambda: "h",
    )
    card = Card()

    footer.append_to(card)

    assert _texts(card)[-1] == "UTC"
