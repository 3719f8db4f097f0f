"""Configuration dataclass for the insight engines.

Pure data container with sensible defaults. Build it from the hierarchical
:class:`~nikki.core.config.Config` with ``InsightsConfig.from_config()``,
or construct it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.exceptions import ConfigurationError
from .dates import resolve_timezone

if TYPE_CHECKING:
    from ..core.config import Config


@dataclass
class InsightsConfig:
    """Settings for the dashboard aggregates.

    Attributes:
        frequency_window_days: Trailing days covered by the posting histogram
            (the histogram holds ``frequency_window_days + 1`` daily buckets).
        recent_trend_size: Number of most recent entries averaged for the
            character trend's ``recent_average`` and per-point rolling average.
        timezone: IANA zone used to localize timezone-aware timestamps.
            None = system local time.
    """

    frequency_window_days: int = 30
    recent_trend_size: int = 7
    timezone: str | None = None

    def __post_init__(self):
        self.frequency_window_days = _non_negative_int("frequency_window_days", self.frequency_window_days)
        self.recent_trend_size = _non_negative_int("recent_trend_size", self.recent_trend_size)
        if self.recent_trend_size == 0:
            raise ConfigurationError("recent_trend_size must be at least 1")
        if self.timezone == "":
            self.timezone = None
        resolve_timezone(self.timezone)

    @classmethod
    def from_config(cls, config: Config) -> InsightsConfig:
        """Read the ``insights`` section of a Config (env overrides arrive as strings)."""
        defaults = cls()
        return cls(
            frequency_window_days=config.get("insights.frequency_window_days", defaults.frequency_window_days),
            recent_trend_size=config.get("insights.recent_trend_size", defaults.recent_trend_size),
            timezone=config.get("insights.timezone", defaults.timezone),
        )


def _non_negative_int(name: str, value) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
    if number < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {number}")
    return number
