"""Posting-frequency histograms and writing-volume trends.

Two views over time:

- ``post_frequency``: posts per day across a trailing window, re-keyed into
  ISO weeks and calendar months.
- ``character_trend``: every dated entry in chronological order with its
  character count, plus overall and recent averages.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta, tzinfo

from loguru import logger

from .dates import CanonicalDate, Unparseable, normalize_date, reference_day
from .models import CharacterTrendStats, DiaryEntry, FrequencyStats, TrendPoint

DEFAULT_WINDOW_DAYS = 30
DEFAULT_RECENT_SIZE = 7


def week_key(day: date) -> str:
    """ISO-8601 week bucket, e.g. ``2025-W09``. Dec 29-31 can belong to next year's W01."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def month_key(day: date) -> str:
    return f"{day.year}-{day.month:02d}"


def post_frequency(
    entries: Sequence[DiaryEntry],
    window_days: int = DEFAULT_WINDOW_DAYS,
    reference: date | datetime | None = None,
    tz: str | tzinfo | None = None,
) -> FrequencyStats:
    """Count posts per day over the ``window_days + 1`` days ending at ``reference``.

    Args:
        entries: Snapshot of the entry collection.
        window_days: How many days before the reference day the window reaches back.
        reference: End of the window. None = now.
        tz: Zone for "now" and for timezone-aware entry timestamps.

    Returns:
        FrequencyStats. ``total_posts`` counts every entry in the collection
        (including ones outside the window or with unparseable dates), while the
        buckets only hold dated entries inside the window.
    """
    window_days = int(window_days)
    if window_days < 0:
        logger.warning(f"Negative frequency window ({window_days} days); using a single day")
        window_days = 0

    end = reference_day(reference, tz)
    start = end - timedelta(days=window_days)
    buckets = {start + timedelta(days=offset): 0 for offset in range(window_days + 1)}

    undated = 0
    for entry in entries:
        match normalize_date(entry.date, tz):
            case CanonicalDate(value=value):
                day = value.date()
                if day in buckets:
                    buckets[day] += 1
            case Unparseable():
                undated += 1

    weekly: dict[str, int] = {}
    monthly: dict[str, int] = {}
    for day, count in buckets.items():
        weekly[week_key(day)] = weekly.get(week_key(day), 0) + count
        monthly[month_key(day)] = monthly.get(month_key(day), 0) + count

    total_posts = len(entries)
    return FrequencyStats(
        daily={day.isoformat(): count for day, count in buckets.items()},
        weekly=weekly,
        monthly=monthly,
        total_posts=total_posts,
        average_per_day=total_posts / len(buckets),
        undated_posts=undated,
    )


def character_trend(
    entries: Sequence[DiaryEntry],
    recent_size: int = DEFAULT_RECENT_SIZE,
    tz: str | tzinfo | None = None,
) -> CharacterTrendStats:
    """Chronological series of ``len(title) + len(content)`` per entry.

    Entries with unparseable dates are left out. ``recent_average`` covers the
    last ``recent_size`` points of the series by position (all of them when the
    series is shorter); each point's ``rolling_average`` uses the same trailing
    window ending at that point.
    """
    recent_size = max(1, int(recent_size))

    dated: list[tuple[datetime, DiaryEntry]] = []
    for entry in entries:
        match normalize_date(entry.date, tz):
            case CanonicalDate(value=value):
                dated.append((value, entry))
            case Unparseable():
                continue

    if not dated:
        return CharacterTrendStats()

    dated.sort(key=lambda pair: pair[0])

    counts: list[int] = []
    series: list[TrendPoint] = []
    for value, entry in dated:
        char_count = len(entry.title) + len(entry.content)
        counts.append(char_count)
        window = counts[-recent_size:]
        series.append(
            TrendPoint(
                date=value,
                char_count=char_count,
                title=entry.title,
                rolling_average=sum(window) / len(window),
            )
        )

    recent = counts[-recent_size:]
    return CharacterTrendStats(
        series=series,
        average=sum(counts) / len(counts),
        max=max(counts),
        min=min(counts),
        recent_average=sum(recent) / len(recent),
    )
