"""Configuration subpackage."""

from adaptive_card_util.config.config import (
    AppSettings,
    CardSettings,
    LoggingSettings,
    Settings,
    SettingsConfigSource,
    get_settings,
)

__all__ = [
    "AppSettings",
    "CardSettings",
    "LoggingSettings",
    "Settings",
    "SettingsConfigSource",
    "get_settings",
]
