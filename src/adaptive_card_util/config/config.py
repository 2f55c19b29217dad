# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. APP__ENVIRONMENT, CARDS__TIMEZONE.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration.

    ``environment`` and ``project_name`` are shown in the footer of every card.
    """

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "adaptive-card-util"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Optional[str] = None
    project_name: Optional[str] = None


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/adaptive_card_util.log"

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class CardSettings(BaseSettings):
    """Card layout and text size limits (from env CARDS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    max_text_bytes: int = Field(
        default=27 * 1024,
        ge=4,
        description="UTF-8 size ceiling for a single text block before it is truncated.",
    )
    truncate_chars: int = Field(
        default=5000,
        ge=1,
        description="Number of characters kept when a text block is truncated.",
    )
    timezone: str = Field(
        default="America/New_York",
        description="IANA zone used for the footer timestamp.",
    )
    timestamp_format: str = Field(
        default="%Y-%m-%d %I:%M:%S %p %Z",
        description="strftime pattern for the footer timestamp.",
    )
    schema_version: str = Field(default="1.2", description="Adaptive Card schema version.")
    msteams_width: str = Field(default="Full", description="Teams card width hint.")

    @field_validator("timezone")
    @classmethod
    def timezone_must_exist(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown IANA time zone: {value!r}") from exc
        return value


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. APP__PROJECT_NAME, CARDS__TRUNCATE_CHARS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cards: CardSettings = Field(default_factory=CardSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        ``from_env(app={"environment": "staging"})``.

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


class SettingsConfigSource:
    """Expose Settings through the key-based ``ConfigSource`` lookup.

    Keys follow the names card footers have always used: ``Environment`` and
    ``ProjectName``. Unknown keys resolve to None.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get_value(self, key: str) -> Optional[str]:
        app = self._settings.app
        values: dict[str, Optional[str]] = {
            "Environment": app.environment,
            "ProjectName": app.project_name,
        }
        return values.get(key)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from adaptive_card_util.config import get_settings

        settings = get_settings()
        ceiling = settings.cards.max_text_bytes
    """
    return Settings()
