"""Clock and timezone formatting helpers."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

EASTERN = "America/New_York"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %I:%M:%S %p %Z"


def to_tz_format(
    moment: datetime,
    zone: str = EASTERN,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Convert an aware datetime to ``zone`` and format it.

    Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(ZoneInfo(zone)).strftime(fmt)


def now_formatted(zone: str = EASTERN, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Return the current moment formatted in ``zone``, e.g. '2026-02-13 07:00:00 AM EST'."""
    return to_tz_format(datetime.now(UTC), zone, fmt)
