# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

import pytest

from adaptive_card_util.cards.builder import AdaptiveCardUtil
from adaptive_card_util.cards.footer import FooterEnricher
from adaptive_card_util.cards.table_cache import TableCache
from adaptive_card_util.cards.text_policy import TextPolicy


class FakeLogger:
    """Structlog-like logger that records (level, event, fields) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _log(self, level: str, event: str, **kw: Any) -> None:
        self.records.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._log("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._log("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._log("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._log("error", event, **kw)

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


class StaticConfigSource:
    """ConfigSource backed by a plain dict."""

    def __init__(self, values: dict[str, Optional[str]] | None = None) -> None:
        self.values = values or {}

    def get_value(self, key: str) -> Optional[str]:
        return self.values.get(key)


@pytest.fixture
def fake_logger() -> FakeLogger:
    """Single recording logger shared by every component of a test."""
    return FakeLogger()


@pytest.fixture
def get_logger(fake_logger: FakeLogger) -> Callable[[str], Any]:
    """Logger factory returning the recording logger for any name."""
    return lambda _name: fake_logger


@pytest.fixture
def config_source() -> StaticConfigSource:
    """Config with both footer values set."""
    return StaticConfigSource({"Environment": "production", "ProjectName": "billing"})


@pytest.fixture
def fixed_clock() -> Callable[[str], str]:
    """Deterministic timestamp formatter."""
    return lambda zone: f"2026-02-13 07:00:00 AM [{zone}]"


@pytest.fixture
def table_cache(get_logger: Callable[[str], Any]) -> TableCache:
    """Fresh table cache per test."""
    return TableCache(get_logger=get_logger)


@pytest.fixture
def card_util_factory(
    config_source: StaticConfigSource,
    table_cache: TableCache,
    fixed_clock: Callable[[str], str],
    get_logger: Callable[[str], Any],
) -> Callable[..., AdaptiveCardUtil]:
    """Build AdaptiveCardUtil with deterministic collaborators and easy overrides."""

    def _build(**overrides: Any) -> AdaptiveCardUtil:
        config = overrides.pop("config", config_source)
        footer = overrides.pop("footer", None) or FooterEnricher(
            config,
            machine_name=overrides.pop("machine_name", lambda: "build-host-01"),
            clock=overrides.pop("clock", fixed_clock),
            get_logger=get_logger,
        )
        return AdaptiveCardUtil(
            config,
            table_cache=overrides.pop("table_cache", table_cache),
            text_policy=overrides.pop("text_policy", None) or TextPolicy(get_logger=get_logger),
            footer=footer,
            get_logger=get_logger,
            **overrides,
        )

    return _build


@pytest.fixture
def card_util(card_util_factory: Callable[..., AdaptiveCardUtil]) -> AdaptiveCardUtil:
    """AdaptiveCardUtil with default test collaborators."""
    return card_util_factory()
