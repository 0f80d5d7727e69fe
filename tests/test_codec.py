"""
Tests for travel_dates.selector.codec.

Run with:
    pytest tests/test_codec.py -q
"""

from datetime import date

import pytest

from travel_dates.schemas import (
    DateRange,
    EmptySelection,
    ExactSelection,
    FlexibleSelection,
)
from travel_dates.selector import decode, encode, format_date, parse_date


def test_encode_exact_range():
    selection = ExactSelection(range=DateRange(start=date(2025, 6, 1), end=date(2025, 6, 7)))
    assert encode(selection) == "2025-06-01_to_2025-06-07"


def test_encode_single_day_range():
    selection = ExactSelection(range=DateRange(start=date(2025, 6, 1), end=date(2025, 6, 1)))
    assert encode(selection) == "2025-06-01_to_2025-06-01"


def test_encode_flexible_keeps_month_order():
    selection = FlexibleSelection(duration="week", months=["September", "August"])
    assert encode(selection) == "flexible-week-September,August"


def test_encode_empty_shapes():
    """No start, or no duration and no months, encode to the empty token."""
    assert encode(ExactSelection()) == ""
    assert encode(FlexibleSelection()) == ""
    assert encode(EmptySelection()) == ""


def test_encode_partial_flexible():
    assert encode(FlexibleSelection(duration="weekend")) == "flexible-weekend-"
    assert encode(FlexibleSelection(months=["May"])) == "flexible--May"


def test_exact_token_round_trip():
    token = "2025-06-01_to_2025-06-07"
    assert encode(decode(token)) == token


def test_flexible_token_decode_and_round_trip():
    selection = decode("flexible-week-June,July")

    assert isinstance(selection, FlexibleSelection)
    assert selection.duration == "week"
    assert selection.months == ["June", "July"]
    assert encode(selection) == "flexible-week-June,July"


@pytest.mark.parametrize(
    "selection",
    [
        ExactSelection(range=DateRange(start=date(2024, 2, 29), end=date(2024, 3, 2))),
        FlexibleSelection(duration="month", months=["December", "January"]),
        FlexibleSelection(duration="weekend"),
        FlexibleSelection(months=["April"]),
        EmptySelection(),
    ],
)
def test_encode_decode_encode_is_stable(selection):
    token = encode(selection)
    assert encode(decode(token)) == token


def test_bare_iso_date_decodes_to_single_day():
    selection = decode("2025-06-10")

    assert isinstance(selection, ExactSelection)
    assert selection.range == DateRange(start=date(2025, 6, 10), end=date(2025, 6, 10))
    assert encode(selection) == "2025-06-10_to_2025-06-10"


def test_partial_flexible_tokens_decode():
    assert decode("flexible-weekend-") == FlexibleSelection(duration="weekend")
    assert decode("flexible-week") == FlexibleSelection(duration="week")
    assert decode("flexible--May") == FlexibleSelection(months=["May"])


def test_flexible_extra_segments_are_ignored():
    assert decode("flexible-week-June,July-extra") == FlexibleSelection(
        duration="week", months=["June", "July"]
    )


def test_flexible_repeated_months_collapse():
    assert decode("flexible-week-June,July,June").months == ["June", "July"]


@pytest.mark.parametrize(
    "token",
    [
        "",
        "garbage",
        "flexible-",
        "flexible-fortnight-June",
        "flexible-week-Juné",
        "flexible-week-june",
        "2025-13-01_to_2025-12-01",
        "2025-02-30_to_2025-03-01",
        "2025-06-07_to_2025-06-01",
        "2025-06-01_to_",
        "2025-06-01_to_2025-06-02_to_2025-06-03",
        "2025-6-1_to_2025-6-7",
        "20250601_to_20250607",
        "2025/06/10",
        "2025-06-3x",
        "2025-06-01_to_2025-06-07\n",
        "٢٠٢٥-٠٦-٠١_to_2025-06-07",
        "٢٠٢٥-٠٦-١٠",
    ],
)
def test_unrecognized_tokens_decode_to_empty(token):
    assert decode(token) == EmptySelection()


def test_non_string_decodes_to_empty():
    assert decode(None) == EmptySelection()
    assert decode(20250601) == EmptySelection()


def test_format_date_zero_pads():
    assert format_date(date(987, 1, 5)) == "0987-01-05"


def test_parse_date_is_strict():
    assert parse_date("2025-06-10") == date(2025, 6, 10)
    assert parse_date("2025-06-31") is None
    assert parse_date(" 2025-06-10") is None
    assert parse_date("2025-06-10\n") is None
    assert parse_date("٢٠٢٥-٠٦-١٠") is None
