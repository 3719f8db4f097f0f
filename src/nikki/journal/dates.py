"""Entry date normalization.

Stored entry dates come in two shapes: the long Japanese-locale form written
by the entry form (``2025年3月1日土曜日``) and ISO-8601 timestamps written by
imports and newer clients. ``normalize_date`` turns either into a
:class:`CanonicalDate`, or returns :class:`Unparseable`. It never guesses
and never raises on bad input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

from ..core.exceptions import ConfigurationError

# 2025年3月1日, trailing weekday or time text ignored
_LOCALIZED_DATE = re.compile(r"(\d{4})\s*年\s*(\d{1,2})\s*月\s*(\d{1,2})\s*日")


@dataclass(frozen=True)
class CanonicalDate:
    """A successfully parsed entry date (naive, local wall-clock time)."""

    value: datetime

    @property
    def day(self) -> date:
        return self.value.date()


@dataclass(frozen=True)
class Unparseable:
    """The stored date text matched no supported format."""

    raw: Any


NormalizedDate = CanonicalDate | Unparseable


@lru_cache(maxsize=32)
def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone: {name!r}") from e


def resolve_timezone(tz: str | tzinfo | None) -> tzinfo | None:
    """Turn an IANA zone name into a tzinfo. None means system local time.

    Raises:
        ConfigurationError: If the zone name is unknown.
    """
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return _zone(tz)


def normalize_date(raw: Any, tz: str | tzinfo | None = None) -> NormalizedDate:
    """Parse an entry's stored date text.

    Args:
        raw: The entry's ``date`` field. Anything that is not a string is unparseable.
        tz: Zone that timezone-aware timestamps are converted into before the
            offset is dropped. None = system local time.

    Returns:
        CanonicalDate on success, Unparseable otherwise.
    """
    if not isinstance(raw, str):
        return Unparseable(raw)
    text = raw.strip()

    match = _LOCALIZED_DATE.search(text)
    if match:
        year, month, day = (int(group) for group in match.groups())
        try:
            return CanonicalDate(datetime(year, month, day))
        except ValueError:
            logger.debug(f"Localized date out of range: {raw!r}")
            return Unparseable(raw)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable entry date: {raw!r}")
        return Unparseable(raw)

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(resolve_timezone(tz)).replace(tzinfo=None)
        except (OverflowError, ValueError):
            logger.debug(f"Entry date out of range after timezone conversion: {raw!r}")
            return Unparseable(raw)
    return CanonicalDate(parsed)


def to_day(value: date | datetime) -> date:
    """Calendar day of a date or datetime bound."""
    if isinstance(value, datetime):
        return value.date()
    return value


def reference_day(reference: date | datetime | None = None, tz: str | tzinfo | None = None) -> date:
    """Resolve the "today" that windows and streaks are measured against.

    Args:
        reference: Instant to measure from. None = now.
        tz: Zone for ``now`` and for aware reference datetimes. None = system local.
    """
    zone = resolve_timezone(tz)
    if reference is None:
        return datetime.now(zone).date()
    if isinstance(reference, datetime):
        if reference.tzinfo is not None:
            return reference.astimezone(zone).date()
        return reference.date()
    return reference
