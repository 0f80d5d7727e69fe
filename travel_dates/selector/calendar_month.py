"""
Month grid generation for the travel dates calendar.

The grid is always six Sunday-first weeks (42 cells). Cells before the
first of the month and after its last day are ``None``.
"""

import calendar
from datetime import date
from typing import List, Optional

from ..schemas.selection import CalendarDay

GRID_CELLS = 42


def month_anchor(day: date) -> date:
    """Normalize any date to the first day of its month."""
    return day.replace(day=1)


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def is_disabled(day: date, today: date) -> bool:
    """Past days are disabled; today itself stays selectable."""
    return day < today


def generate_grid(anchor: date, today: date) -> List[Optional[CalendarDay]]:
    """
    Build the 6x7 day grid for the month containing ``anchor``.

    Args:
        anchor: Any date inside the month to show
        today: Current local calendar date, supplied by the caller's clock

    Returns:
        List of 42 cells, ``None`` for padding and ``CalendarDay`` otherwise
    """
    first = month_anchor(anchor)
    _, days_in_month = calendar.monthrange(first.year, first.month)

    cells: List[Optional[CalendarDay]] = [None] * sunday_weekday(first)
    for day_number in range(1, days_in_month + 1):
        day = first.replace(day=day_number)
        cells.append(CalendarDay(date=day, disabled=is_disabled(day, today)))

    cells.extend([None] * (GRID_CELLS - len(cells)))
    return cells


def navigate_month(anchor: date, direction: int) -> date:
    """
    Step one month forward (+1) or back (-1), wrapping across years.

    Raises:
        ValueError: If direction is not +1 or -1
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be +1 or -1, got {direction!r}")

    month_index = anchor.year * 12 + (anchor.month - 1) + direction
    year, month = divmod(month_index, 12)
    return date(year, month + 1, 1)
