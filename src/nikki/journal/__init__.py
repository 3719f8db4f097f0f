"""Journal analytics: date normalization, search, mood, trends, streaks.

Every engine is a pure function over a snapshot of ``DiaryEntry`` values.
None of them mutate the collection, cache results, or raise on malformed
entry dates; unparseable dates are excluded wherever a date is needed.
"""

from .config import InsightsConfig
from .dates import CanonicalDate, NormalizedDate, Unparseable, normalize_date, reference_day
from .insights import build_insights
from .models import (
    CharacterTrendStats,
    DiaryEntry,
    DiaryInsights,
    FilterResult,
    FrequencyStats,
    MoodStats,
    StreakStats,
    TextSegment,
    TrendPoint,
    entries_from_document,
)
from .mood import compute_mood_stats, mood_label, nearest_rating
from .search import filter_entries, segment_text
from .streak import compute_streak, posting_days
from .trends import character_trend, month_key, post_frequency, week_key

__all__ = [
    "CanonicalDate",
    "CharacterTrendStats",
    "DiaryEntry",
    "DiaryInsights",
    "FilterResult",
    "FrequencyStats",
    "InsightsConfig",
    "MoodStats",
    "NormalizedDate",
    "StreakStats",
    "TextSegment",
    "TrendPoint",
    "Unparseable",
    "build_insights",
    "character_trend",
    "compute_mood_stats",
    "compute_streak",
    "entries_from_document",
    "filter_entries",
    "month_key",
    "mood_label",
    "nearest_rating",
    "normalize_date",
    "post_frequency",
    "posting_days",
    "reference_day",
    "segment_text",
    "week_key",
]
