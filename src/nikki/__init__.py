"""Nikki: local journal analytics.

Filtering, mood statistics, posting frequency, writing-volume trends and
day streaks over an in-memory collection of diary entries.
"""

__version__ = "0.1.0"
