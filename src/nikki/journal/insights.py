"""One-shot dashboard aggregate.

Runs every statistics engine over the same snapshot so the numbers shown
together on a dashboard agree with each other.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from loguru import logger

from .config import InsightsConfig
from .dates import reference_day
from .models import DiaryEntry, DiaryInsights
from .mood import compute_mood_stats
from .streak import compute_streak
from .trends import character_trend, post_frequency


def build_insights(
    entries: Sequence[DiaryEntry],
    config: InsightsConfig | None = None,
    reference: date | datetime | None = None,
) -> DiaryInsights:
    """Compute mood, frequency, trend and streak statistics in one pass.

    Args:
        entries: Snapshot of the entry collection. Not modified.
        config: Window sizes and timezone. Defaults to ``InsightsConfig()``.
        reference: "Now" for the frequency window and streak liveness.
            Resolved once so every aggregate sees the same day.
    """
    config = config or InsightsConfig()
    snapshot = list(entries)
    today = reference_day(reference, config.timezone)

    insights = DiaryInsights(
        mood=compute_mood_stats(snapshot),
        frequency=post_frequency(
            snapshot,
            window_days=config.frequency_window_days,
            reference=today,
            tz=config.timezone,
        ),
        trend=character_trend(snapshot, recent_size=config.recent_trend_size, tz=config.timezone),
        streak=compute_streak(snapshot, reference=today, tz=config.timezone),
    )
    logger.debug(
        f"Built insights for {len(snapshot)} entries as of {today}: "
        f"streak={insights.streak.current_streak}, rated={insights.mood.total_rated}"
    )
    return insights
