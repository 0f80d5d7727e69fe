"""Shared fixtures for travel dates tests."""

from datetime import date

import pytest

from travel_dates.selector import DropdownController

# Frozen "today" for every clock-dependent test
TODAY = date(2025, 6, 1)


@pytest.fixture
def today():
    """Clock provider pinned to TODAY."""
    return lambda: TODAY


@pytest.fixture
def emitted():
    """Collects tokens passed to on_change."""
    return []


@pytest.fixture
def make_dropdown(today, emitted):
    """Factory for dropdowns wired to the frozen clock and the emitted list."""
    def _make(value="", locale="en"):
        return DropdownController(value=value, on_change=emitted.append, locale=locale, today=today)
    return _make
