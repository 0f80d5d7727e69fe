"""
Tests for travel_dates.selector.flexible_window.

Run with:
    pytest tests/test_flexible_window.py -q
"""

import pytest

from travel_dates.schemas import FlexibleSelection
from travel_dates.selector import FlexibleWindowSelector
from travel_dates.utils.exceptions import InvalidSelectionError


def test_duration_is_single_select():
    selector = FlexibleWindowSelector()
    selector.set_duration("weekend")
    selector.set_duration("month")

    assert selector.duration == "month"


def test_unknown_duration_raises():
    selector = FlexibleWindowSelector()
    with pytest.raises(InvalidSelectionError):
        selector.set_duration("fortnight")
    assert selector.duration is None


def test_toggle_month_keeps_click_order():
    """Months are kept in the order they were picked, not calendar order."""
    selector = FlexibleWindowSelector()
    assert selector.toggle_month("September") is True
    assert selector.toggle_month("March") is True
    assert selector.toggle_month("July") is True

    assert selector.months == ["September", "March", "July"]


def test_toggle_month_twice_removes_it():
    selector = FlexibleWindowSelector()
    selector.toggle_month("June")
    selector.toggle_month("July")

    assert selector.toggle_month("June") is False
    assert selector.months == ["July"]
    assert not selector.is_month_selected("June")

    # Re-adding goes to the end
    selector.toggle_month("June")
    assert selector.months == ["July", "June"]


def test_unknown_month_raises():
    selector = FlexibleWindowSelector()
    with pytest.raises(InvalidSelectionError):
        selector.toggle_month("june")


def test_snapshot_and_reset():
    selector = FlexibleWindowSelector(FlexibleSelection(duration="week", months=["June"]))
    snap = selector.snapshot()
    assert snap == FlexibleSelection(duration="week", months=["June"])

    # Snapshot is a copy
    selector.toggle_month("July")
    assert snap.months == ["June"]

    selector.reset()
    assert selector.duration is None
    assert selector.months == []
