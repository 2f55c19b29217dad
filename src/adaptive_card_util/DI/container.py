# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from adaptive_card_util.cards.builder import AdaptiveCardUtil
from adaptive_card_util.cards.footer import FooterEnricher
from adaptive_card_util.cards.renderer import AdaptiveCardRenderer
from adaptive_card_util.cards.table_cache import get_table_cache
from adaptive_card_util.cards.text_policy import TextPolicy
from adaptive_card_util.config import Settings, SettingsConfigSource, get_settings


def _build_text_policy(settings: Settings) -> TextPolicy:
    """Build the text policy with limits from settings."""
    return TextPolicy(
        max_bytes=settings.cards.max_text_bytes,
        truncate_chars=settings.cards.truncate_chars,
    )


def _build_footer(settings: Settings, config_source: SettingsConfigSource) -> FooterEnricher:
    """Build the footer enricher for the configured timezone."""
    return FooterEnricher(
        config_source,
        zone=settings.cards.timezone,
        timestamp_format=settings.cards.timestamp_format,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, table cache, text policy, footer and card builders.

    ``adaptive_card_util`` is shared; ``adaptive_card_util_factory`` returns a
    new builder per call (for scoped use). Both use the same table cache.
    """

    config = providers.Callable(get_settings)

    config_source = providers.Singleton(SettingsConfigSource, settings=config)

    table_cache = providers.Callable(get_table_cache)

    text_policy = providers.Singleton(_build_text_policy, config)

    footer = providers.Singleton(_build_footer, config, config_source)

    adaptive_card_util = providers.Singleton(
        AdaptiveCardUtil,
        config=config_source,
        table_cache=table_cache,
        text_policy=text_policy,
        footer=footer,
        schema_version=config.provided.cards.schema_version,
        width=config.provided.cards.msteams_width,
    )

    adaptive_card_util_factory = providers.Factory(
        AdaptiveCardUtil,
        config=config_source,
        table_cache=table_cache,
        text_policy=text_policy,
        footer=footer,
        schema_version=config.provided.cards.schema_version,
        width=config.provided.cards.msteams_width,
    )

    card_renderer = providers.Singleton(AdaptiveCardRenderer)
