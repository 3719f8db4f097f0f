"""Keyword and date-range filtering over diary entries.

The keyword half is a case-insensitive substring test against title or
content; the date half keeps entries whose day falls inside an inclusive
range. ``segment_text`` splits text around keyword hits so a renderer can
highlight them without re-implementing the matching rules.

Example::

    found = filter_entries(entries, "coffee", from_date=date(2025, 3, 1))
    for entry in found.results:
        parts = segment_text(entry.title, "coffee")
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date, datetime, tzinfo

from .dates import CanonicalDate, Unparseable, normalize_date, to_day
from .models import DiaryEntry, FilterResult, TextSegment


def _keyword_pattern(keyword: str) -> re.Pattern[str] | None:
    """Compiled matcher shared by filtering and highlighting; None for a blank keyword."""
    needle = (keyword or "").strip()
    if not needle:
        return None
    return re.compile(f"({re.escape(needle)})", re.IGNORECASE)


def _matches_keyword(entry: DiaryEntry, pattern: re.Pattern[str]) -> bool:
    return pattern.search(entry.title) is not None or pattern.search(entry.content) is not None


def _within_bounds(entry: DiaryEntry, start: date | None, end: date | None, tz: str | tzinfo | None) -> bool:
    if start is None and end is None:
        return True

    match normalize_date(entry.date, tz):
        case CanonicalDate(value=value):
            # start-of-day through 23:59:59 on the end day
            day = value.date()
            if start is not None and day < start:
                return False
            if end is not None and day > end:
                return False
            return True
        case Unparseable():
            return False


def filter_entries(
    entries: Sequence[DiaryEntry],
    keyword: str = "",
    from_date: date | datetime | None = None,
    to_date: date | datetime | None = None,
    tz: str | tzinfo | None = None,
) -> FilterResult:
    """Filter entries by keyword and inclusive date range, preserving order.

    Args:
        entries: Snapshot of the entry collection.
        keyword: Substring to look for in title or content (case-insensitive).
            Empty or whitespace-only matches everything.
        from_date: Earliest day (inclusive). None = no lower bound.
        to_date: Latest day (inclusive, through end of day). None = no upper bound.
        tz: Zone used to localize timezone-aware entry timestamps.

    Returns:
        FilterResult with the surviving entries and match/total counts. Entries
        whose date cannot be parsed are dropped only when a bound is given.
    """
    pattern = _keyword_pattern(keyword)
    start = to_day(from_date) if from_date is not None else None
    end = to_day(to_date) if to_date is not None else None

    results = [
        entry
        for entry in entries
        if (pattern is None or _matches_keyword(entry, pattern)) and _within_bounds(entry, start, end, tz)
    ]
    return FilterResult(results=results, match_count=len(results), total_count=len(entries))


def segment_text(text: str, keyword: str) -> list[TextSegment]:
    """Split text into matching and non-matching runs for highlighting.

    Matching ignores case; both kinds of segment keep the original casing.

    Example::

        segment_text("Hello World", "world")
        # [TextSegment("Hello ", False), TextSegment("World", True)]
    """
    pattern = _keyword_pattern(keyword)
    if pattern is None or not text:
        return [TextSegment(text=text, is_match=False)]

    segments = []
    # With one capturing group, odd positions are the matches
    for index, part in enumerate(pattern.split(text)):
        if part:
            segments.append(TextSegment(text=part, is_match=index % 2 == 1))
    return segments
