# -*- coding: utf-8 -*-
"""Unit tests for timezone and environment helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from adaptive_card_util.utils import environment
from adaptive_card_util.utils.timezones import now_formatted, to_tz_format


def test_to_tz_format_converts_to_eastern_standard_time() -> None:
    moment = datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)

    assert to_tz_format(moment) == "2026-02-13 07:00:00 AM EST"


def test_to_tz_format_handles_daylight_saving() -> None:
    moment = datetime(2026, 7, 1, 16, 30, 0, tzinfo=timezone.utc)

    assert to_tz_format(moment) == "2026-07-01 12:30:00 PM EDT"


def test_naive_datetime_is_treated_as_utc() -> None:
    moment = datetime(2026, 2, 13, 12, 0, 0)

    assert to_tz_format(moment, "UTC", "%H:%M %Z") == "12:00 UTC"


def test_now_formatted_uses_given_format() -> None:
    assert len(now_formatted("UTC", "%Y")) == 4


def test_machine_name_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(environment.socket, "gethostname", lambda: "")
    monkeypatch.delenv("COMPUTERNAME", raising=False)
    monkeypatch.setenv("HOSTNAME", "ci-runner")

    assert environment.get_machine_name() == "ci-runner"


def test_machine_name_raises_when_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(environment.socket, "gethostname", lambda: "  ")
    monkeypatch.delenv("COMPUTERNAME", raising=False)
    monkeypatch.delenv("HOSTNAME", raising=False)

    with pytest.raises(OSError):
        environment.get_machine_name()
