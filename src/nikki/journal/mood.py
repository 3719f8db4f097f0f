"""Mood rating statistics.

Entries may carry an optional 1-5 rating. All arithmetic stays in Python
floats/Decimal; nothing here ever divides by zero.
"""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from .models import MOOD_RATINGS, DiaryEntry, MoodStats

MOOD_LABELS = {
    1: "Awful",
    2: "Bad",
    3: "Okay",
    4: "Good",
    5: "Great",
}

MOOD_EMOJI = {
    1: "😢",
    2: "😕",
    3: "😐",
    4: "🙂",
    5: "😄",
}


def compute_mood_stats(entries: Sequence[DiaryEntry]) -> MoodStats:
    """Count entries per rating and compute the weighted average.

    Entries without a mood (or with a value outside 1-5) are ignored.
    """
    per_rating = dict.fromkeys(MOOD_RATINGS, 0)
    for entry in entries:
        mood = entry.mood
        if mood is None:
            continue
        if isinstance(mood, bool) or not isinstance(mood, int) or mood not in per_rating:
            logger.debug(f"Skipping out-of-range mood {mood!r} on entry {entry.id}")
            continue
        per_rating[mood] += 1

    total_rated = sum(per_rating.values())
    if total_rated == 0:
        return MoodStats(per_rating=per_rating, total_rated=0, average=0.0)

    weighted = sum(rating * count for rating, count in per_rating.items())
    return MoodStats(per_rating=per_rating, total_rated=total_rated, average=weighted / total_rated)


def nearest_rating(average: float) -> int | None:
    """Map an average back to the closest discrete rating (round half up).

    Results are clamped into 1-5; NaN and infinities return None.
    """
    if average is None or not math.isfinite(average):
        return None
    bounded = min(max(average, 0.0), float(MOOD_RATINGS[-1] + 1))
    rounded = int(Decimal(str(bounded)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return min(max(rounded, MOOD_RATINGS[0]), MOOD_RATINGS[-1])


def mood_label(rating: int | None) -> str:
    """Human-readable label for a rating, e.g. ``"🙂 Good"``; empty when unrated."""
    if rating not in MOOD_LABELS:
        return ""
    return f"{MOOD_EMOJI[rating]} {MOOD_LABELS[rating]}"
