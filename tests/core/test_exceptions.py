"""Tests for nikki.core.exceptions."""

import pytest

from nikki.core.exceptions import ConfigurationError, DataProcessingError, NikkiError


def test_hierarchy():
    """All exceptions should inherit from NikkiError."""
    for exc_cls in [ConfigurationError, DataProcessingError]:
        assert issubclass(exc_cls, NikkiError)


def test_exception_message():
    err = ConfigurationError("frequency_window_days must be non-negative")
    assert "non-negative" in str(err)


def test_catch_base():
    with pytest.raises(NikkiError):
        raise DataProcessingError("'entries' must be a list")
