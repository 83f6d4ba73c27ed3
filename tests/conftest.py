"""Shared test fixtures."""

import time

import pytest


@pytest.fixture
def new_york_tz(monkeypatch):
    """Run the test with the process local time zone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
