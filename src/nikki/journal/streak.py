"""Consecutive-day posting streaks."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, tzinfo

from .dates import CanonicalDate, Unparseable, normalize_date, reference_day
from .models import DiaryEntry, StreakStats


def posting_days(entries: Sequence[DiaryEntry], tz: str | tzinfo | None = None) -> list[date]:
    """Distinct calendar days with at least one dated entry, ascending."""
    days: set[date] = set()
    for entry in entries:
        match normalize_date(entry.date, tz):
            case CanonicalDate(day=day):
                days.add(day)
            case Unparseable():
                continue
    return sorted(days)


def compute_streak(
    entries: Sequence[DiaryEntry],
    reference: date | datetime | None = None,
    tz: str | tzinfo | None = None,
) -> StreakStats:
    """Longest and current runs of consecutive posting days.

    The current streak is alive only while the last posting day is the
    reference day or the day before it; otherwise it is 0.

    Args:
        entries: Snapshot of the entry collection.
        reference: "Today" for the liveness check. None = now.
        tz: Zone for "now" and for timezone-aware entry timestamps.
    """
    days = posting_days(entries, tz)
    if not days:
        return StreakStats()

    max_streak = run = 1
    for previous, current in zip(days, days[1:]):
        if (current - previous).days == 1:
            run += 1
            max_streak = max(max_streak, run)
        else:
            run = 1

    last_post_day = days[-1]
    current_streak = 0
    if (reference_day(reference, tz) - last_post_day).days in (0, 1):
        current_streak = 1
        for later, earlier in zip(reversed(days), reversed(days[:-1])):
            if (later - earlier).days != 1:
                break
            current_streak += 1

    return StreakStats(
        current_streak=current_streak,
        max_streak=max_streak,
        last_post_day=last_post_day,
        total_days_posted=len(days),
    )
