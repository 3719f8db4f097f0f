"""Tests for nikki.journal.mood."""

import math

import pytest

from nikki.journal.models import DiaryEntry
from nikki.journal.mood import compute_mood_stats, mood_label, nearest_rating


class TestComputeMoodStats:
    def test_empty(self):
        stats = compute_mood_stats([])
        assert stats.total_rated == 0
        assert stats.average == 0
        assert stats.per_rating == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}

    def test_no_rated_entries(self, make_entry):
        stats = compute_mood_stats([make_entry(), make_entry()])
        assert stats.total_rated == 0
        assert stats.average == 0.0
        assert not math.isnan(stats.average)

    def test_counts_and_weighted_average(self, make_entry):
        entries = [make_entry(mood=m) for m in (5, 5, 4, 2, None)]
        stats = compute_mood_stats(entries)
        assert stats.per_rating == {1: 0, 2: 1, 3: 0, 4: 1, 5: 2}
        assert stats.total_rated == 4
        assert stats.average == pytest.approx(4.0)

    def test_ignores_dates(self, make_entry):
        stats = compute_mood_stats([make_entry(date="garbage", mood=3)])
        assert stats.total_rated == 1
        assert stats.average == 3.0

    def test_out_of_range_mood_ignored(self):
        # Bypasses from_dict validation
        entries = [
            DiaryEntry(id="1", title="t", content="c", date="", mood=9),
            DiaryEntry(id="2", title="t", content="c", date="", mood=1),
        ]
        stats = compute_mood_stats(entries)
        assert stats.total_rated == 1
        assert stats.average == 1.0


class TestNearestRating:
    @pytest.mark.parametrize(
        ("average", "expected"),
        [(1.0, 1), (2.49, 2), (2.5, 3), (3.5, 4), (4.5, 5), (4.99, 5)],
    )
    def test_round_half_up(self, average, expected):
        assert nearest_rating(average) == expected

    @pytest.mark.parametrize(("average", "expected"), [(0.0, 1), (-3.0, 1), (5.6, 5), (1e300, 5)])
    def test_clamped(self, average, expected):
        assert nearest_rating(average) == expected

    @pytest.mark.parametrize("average", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, average):
        assert nearest_rating(average) is None


class TestMoodLabel:
    def test_known_rating(self):
        assert mood_label(4) == "🙂 Good"

    def test_unrated(self):
        assert mood_label(None) == ""
        assert mood_label(7) == ""
