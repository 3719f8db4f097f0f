"""Tests for nikki.journal.insights."""

import json
from datetime import date

from nikki.journal.config import InsightsConfig
from nikki.journal.insights import build_insights
from nikki.journal.models import entries_from_document


def _document():
    return {
        "entries": [
            {"id": "5", "title": "Hanami", "content": "Cherry blossoms", "date": "2025-03-15T19:00:00", "mood": 5},
            {"id": "4", "title": "Work", "content": "Long day", "date": "2025年3月14日金曜日", "mood": 2},
            {"id": "3", "title": "Walk", "content": "Along the river", "date": "2025年3月13日木曜日"},
            {"id": "2", "title": "Old", "content": "Last year", "date": "2024年3月1日金曜日", "mood": 4},
            {"id": "1", "title": "Broken", "content": "Imported badly", "date": "Invalid Date"},
        ]
    }


class TestBuildInsights:
    def test_all_aggregates(self):
        entries = entries_from_document(_document())
        config = InsightsConfig(frequency_window_days=7, recent_trend_size=2)
        insights = build_insights(entries, config, date(2025, 3, 15))

        assert insights.mood.total_rated == 3
        assert insights.mood.average == 11 / 3

        assert len(insights.frequency.daily) == 8
        assert sum(insights.frequency.daily.values()) == 3
        assert insights.frequency.total_posts == 5
        assert insights.frequency.undated_posts == 1

        assert [p.title for p in insights.trend.series] == ["Old", "Walk", "Work", "Hanami"]

        assert insights.streak.current_streak == 3
        assert insights.streak.max_streak == 3
        assert insights.streak.total_days_posted == 4

    def test_default_config(self, make_entry):
        insights = build_insights([make_entry(date="2025-03-15")], reference=date(2025, 3, 15))
        assert len(insights.frequency.daily) == 31

    def test_to_dict_is_json_serializable(self):
        insights = build_insights(entries_from_document(_document()), reference=date(2025, 3, 15))
        payload = json.loads(json.dumps(insights.to_dict()))
        assert payload["streak"]["last_post_day"] == "2025-03-15"
        assert payload["mood"]["per_rating"]["5"] == 1
        assert payload["trend"]["series"][0]["date"] == "2024-03-01T00:00:00"

    def test_empty_collection(self):
        insights = build_insights([], reference=date(2025, 3, 15))
        assert insights.mood.average == 0
        assert insights.frequency.total_posts == 0
        assert insights.frequency.average_per_day == 0
        assert insights.trend.series == []
        assert insights.streak.last_post_day is None

    def test_entries_not_mutated(self):
        entries = entries_from_document(_document())
        snapshot = [e.to_dict() for e in entries]
        build_insights(entries, reference=date(2025, 3, 15))
        assert [e.to_dict() for e in entries] == snapshot
