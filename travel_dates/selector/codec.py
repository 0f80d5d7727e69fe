"""
Token codec for committed travel date selections.

Grammar:
    exact:     ``YYYY-MM-DD_to_YYYY-MM-DD``
    flexible:  ``flexible-<duration>-<Month>,<Month>,...``
    empty:     ``""``

``decode`` is total: anything it does not fully recognize becomes an
``EmptySelection``. A token is either understood completely or not at all.
"""

import re
from datetime import date
from typing import Any, List, Optional, Union

from ..schemas.selection import (
    DURATION_CLASSES,
    MONTH_NAMES,
    DateRange,
    EmptySelection,
    ExactSelection,
    FlexibleSelection,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

FLEXIBLE_PREFIX = "flexible-"
RANGE_SEPARATOR = "_to_"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

SelectionValue = Union[ExactSelection, FlexibleSelection, EmptySelection]


def format_date(day: date) -> str:
    """Format a calendar date as ``YYYY-MM-DD`` from its own year/month/day fields."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date(text: str) -> Optional[date]:
    """Parse a strict ``YYYY-MM-DD`` string, returning None if it is not a real date."""
    if not _ISO_DATE.fullmatch(text):
        return None
    try:
        return date(int(text[0:4]), int(text[5:7]), int(text[8:10]))
    except ValueError:
        return None


def encode(selection: SelectionValue) -> str:
    """
    Serialize a selection into its token.

    Args:
        selection: Exact, flexible or empty selection

    Returns:
        Token string, ``""`` when the selection carries no constraint
    """
    if isinstance(selection, ExactSelection):
        date_range = selection.range
        if date_range.is_empty:
            return ""
        return f"{format_date(date_range.start)}{RANGE_SEPARATOR}{format_date(date_range.end)}"

    if isinstance(selection, FlexibleSelection):
        if selection.is_empty:
            return ""
        return f"{FLEXIBLE_PREFIX}{selection.duration or ''}-{','.join(selection.months)}"

    return ""


def decode(token: Any) -> SelectionValue:
    """
    Parse a token back into a selection. Never raises.

    Args:
        token: Token received from the owning page

    Returns:
        The selection, or ``EmptySelection`` for anything unrecognized
    """
    if not isinstance(token, str) or not token:
        return EmptySelection()

    if token.startswith(FLEXIBLE_PREFIX):
        return _decode_flexible(token)

    if RANGE_SEPARATOR in token:
        return _decode_range(token)

    if len(token) == 10:
        # Bare single date; encode() never emits this form
        day = parse_date(token)
        if day is not None:
            return ExactSelection(range=DateRange(start=day, end=day))

    return _fallback(token, "unrecognized_shape")


def _decode_flexible(token: str) -> SelectionValue:
    parts = token.split("-")
    duration = parts[1] if len(parts) > 1 else ""
    months_segment = parts[2] if len(parts) > 2 else ""

    if duration and duration not in DURATION_CLASSES:
        return _fallback(token, "unknown_duration")

    months: List[str] = []
    for month in months_segment.split(","):
        if not month:
            continue
        if month not in MONTH_NAMES:
            return _fallback(token, "unknown_month")
        if month not in months:
            months.append(month)

    selection = FlexibleSelection(duration=duration or None, months=months)
    if selection.is_empty:
        return _fallback(token, "empty_flexible")
    return selection


def _decode_range(token: str) -> SelectionValue:
    pieces = token.split(RANGE_SEPARATOR)
    if len(pieces) != 2:
        return _fallback(token, "bad_separator_count")

    start = parse_date(pieces[0])
    end = parse_date(pieces[1])
    if start is None or end is None:
        return _fallback(token, "invalid_date")
    if start > end:
        return _fallback(token, "start_after_end")

    return ExactSelection(range=DateRange(start=start, end=end))


def _fallback(token: str, reason: str) -> EmptySelection:
    logger.debug("token_decode_fallback", token=token, reason=reason)
    return EmptySelection()
