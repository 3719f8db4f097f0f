"""Shared test fixtures for nikki."""

import itertools
import os
import tempfile

import pytest

from nikki.journal.models import DiaryEntry


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "insights": {
            "frequency_window_days": 14,
            "recent_trend_size": 3,
            "timezone": "Asia/Tokyo",
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def make_entry():
    """Factory for DiaryEntry values with unique ids."""
    counter = itertools.count(1)

    def _make(date="2025-03-01T09:00:00", title="Title", content="Body", mood=None, **extra):
        return DiaryEntry(id=str(next(counter)), title=title, content=content, date=date, mood=mood, **extra)

    return _make
