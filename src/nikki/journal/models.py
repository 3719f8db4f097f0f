"""Data models for diary entries and the aggregates derived from them.

``DiaryEntry`` is owned by the persistence layer; the insight engines only
read it. Every result type is a plain dataclass recomputed on each call, with
``to_dict()`` for JSON-friendly output to the presentation layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from loguru import logger

from ..core.exceptions import DataProcessingError

MOOD_RATINGS = (1, 2, 3, 4, 5)


def _coerce_mood(value: Any) -> int | None:
    """Return a valid 1-5 rating or None ("not rated")."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value in MOOD_RATINGS else None


@dataclass
class DiaryEntry:
    """A single journal entry.

    Attributes:
        id: Opaque unique identifier assigned at creation.
        title: Entry title.
        content: Entry body text.
        date: Stored creation time text. Either the long localized form
            (``2025年3月1日土曜日``) or an ISO-8601 timestamp; may be malformed.
        mood: Rating 1 (lowest) to 5 (highest), or None when not rated.
        images: Opaque image payloads, passed through untouched.
        attachments: Opaque attachment payloads, passed through untouched.
    """

    id: str
    title: str
    content: str
    date: str
    mood: int | None = None
    images: list[Any] = field(default_factory=list)
    attachments: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiaryEntry:
        """Build an entry from a JSON-shaped mapping.

        Missing optional fields are treated as not set; an out-of-range mood
        is treated as not rated.
        """
        mood = _coerce_mood(data.get("mood"))
        if mood is None and data.get("mood") is not None:
            logger.debug(f"Ignoring invalid mood {data.get('mood')!r} on entry {data.get('id')!r}")
        return cls(
            id=str(data.get("id") or ""),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            date=data.get("date") if isinstance(data.get("date"), str) else "",
            mood=mood,
            images=list(data.get("images") or []),
            attachments=list(data.get("attachments") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
        }
        if self.mood is not None:
            data["mood"] = self.mood
        if self.images:
            data["images"] = list(self.images)
        if self.attachments:
            data["attachments"] = list(self.attachments)
        return data


def entries_from_document(document: Any) -> list[DiaryEntry]:
    """Read entries from an already-loaded ``{"entries": [...]}`` document.

    Args:
        document: Decoded JSON document as produced by the storage or backup layer.

    Returns:
        Entries in document order. Items that are not objects are skipped.

    Raises:
        DataProcessingError: If the document or its ``entries`` field has the wrong shape.
    """
    if not isinstance(document, Mapping):
        raise DataProcessingError(f"Expected a JSON object at the top level, got {type(document).__name__}")
    raw_entries = document.get("entries", [])
    if not isinstance(raw_entries, list):
        raise DataProcessingError(f"'entries' must be a list, got {type(raw_entries).__name__}")

    entries = []
    for index, item in enumerate(raw_entries):
        if not isinstance(item, Mapping):
            logger.warning(f"Skipping entry #{index}: expected an object, got {type(item).__name__}")
            continue
        entries.append(DiaryEntry.from_dict(item))
    return entries


# ── Search results ───────────────────────────────────────────────────


@dataclass
class FilterResult:
    """Entries that survived a keyword/date filter, in original order."""

    results: list[DiaryEntry]
    match_count: int
    total_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [entry.to_dict() for entry in self.results],
            "match_count": self.match_count,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class TextSegment:
    """A run of text, flagged when it matched the search keyword."""

    text: str
    is_match: bool


# ── Aggregates ───────────────────────────────────────────────────────


@dataclass
class MoodStats:
    """Mood distribution.

    Attributes:
        per_rating: Count per rating; always holds keys 1 through 5.
        total_rated: Number of entries with a mood.
        average: Weighted mean rating, 0.0 when nothing is rated.
    """

    per_rating: dict[int, int] = field(default_factory=lambda: dict.fromkeys(MOOD_RATINGS, 0))
    total_rated: int = 0
    average: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "per_rating": {str(rating): count for rating, count in self.per_rating.items()},
            "total_rated": self.total_rated,
            "average": self.average,
        }


@dataclass
class FrequencyStats:
    """Posting-frequency histogram over a trailing window.

    Attributes:
        daily: ``YYYY-MM-DD`` -> posts, one key per day in the window, ascending.
        weekly: ``YYYY-Www`` (ISO-8601 week) -> posts.
        monthly: ``YYYY-MM`` -> posts.
        total_posts: Every entry in the collection, not only those in the window.
        average_per_day: ``total_posts`` divided by the number of daily buckets.
        undated_posts: Entries left out of the buckets because their date did not parse.
    """

    daily: dict[str, int] = field(default_factory=dict)
    weekly: dict[str, int] = field(default_factory=dict)
    monthly: dict[str, int] = field(default_factory=dict)
    total_posts: int = 0
    average_per_day: float = 0.0
    undated_posts: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "daily": dict(self.daily),
            "weekly": dict(self.weekly),
            "monthly": dict(self.monthly),
            "total_posts": self.total_posts,
            "average_per_day": self.average_per_day,
            "undated_posts": self.undated_posts,
        }


@dataclass
class TrendPoint:
    """One entry's position in the writing-volume series."""

    date: datetime
    char_count: int
    title: str
    rolling_average: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "char_count": self.char_count,
            "title": self.title,
            "rolling_average": self.rolling_average,
        }


@dataclass
class CharacterTrendStats:
    """Chronological character counts with summary figures."""

    series: list[TrendPoint] = field(default_factory=list)
    average: float = 0.0
    max: int = 0
    min: int = 0
    recent_average: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "series": [point.to_dict() for point in self.series],
            "average": self.average,
            "max": self.max,
            "min": self.min,
            "recent_average": self.recent_average,
        }


@dataclass
class StreakStats:
    """Consecutive-day posting streaks."""

    current_streak: int = 0
    max_streak: int = 0
    last_post_day: date | None = None
    total_days_posted: int = 0

    @property
    def is_active(self) -> bool:
        return self.current_streak > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
            "last_post_day": self.last_post_day.isoformat() if self.last_post_day else None,
            "total_days_posted": self.total_days_posted,
        }


@dataclass
class DiaryInsights:
    """Every dashboard aggregate computed from one snapshot of entries."""

    mood: MoodStats
    frequency: FrequencyStats
    trend: CharacterTrendStats
    streak: StreakStats

    def to_dict(self) -> dict[str, Any]:
        return {
            "mood": self.mood.to_dict(),
            "frequency": self.frequency.to_dict(),
            "trend": self.trend.to_dict(),
            "streak": self.streak.to_dict(),
        }
