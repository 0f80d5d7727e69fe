"""Exact-dates click protocol: empty -> single day -> range -> single day again."""

from datetime import date
from typing import Callable, Literal, Optional

from ..schemas.selection import DateRange
from ..utils.logger import get_logger
from .calendar_month import is_disabled

logger = get_logger(__name__)

RangeState = Literal["empty", "single", "range"]


class RangeSelectionController:
    """
    Start/end state machine over a ``DateRange``.

    A click on an empty selection picks a single day. A second click turns
    it into a range ordered by date. Any click on a full range throws the
    range away and starts over from that day.
    """

    def __init__(self, today: Callable[[], date], initial: Optional[DateRange] = None):
        self._today = today
        self.range = initial or DateRange()

    @property
    def state(self) -> RangeState:
        if self.range.is_empty:
            return "empty"
        if self.range.start == self.range.end:
            return "single"
        return "range"

    def reset(self, initial: Optional[DateRange] = None) -> None:
        self.range = initial or DateRange()

    def select_date(self, day: date) -> bool:
        """
        Apply one calendar click.

        Returns:
            False when the click was ignored because the day is disabled
        """
        if is_disabled(day, self._today()):
            logger.debug("disabled_date_ignored", date=day.isoformat())
            return False

        if self.state == "single":
            anchor = self.range.start
            if day < anchor:
                self.range = DateRange(start=day, end=anchor)
            elif day > anchor:
                self.range = DateRange(start=anchor, end=day)
        else:
            # empty, or a full range being replaced by a fresh selection
            self.range = DateRange(start=day, end=day)

        logger.debug(
            "date_selected",
            date=day.isoformat(),
            state=self.state,
        )
        return True

    def is_endpoint(self, day: date) -> bool:
        return day is not None and day in (self.range.start, self.range.end)

    def is_in_range(self, day: date) -> bool:
        """Strictly between start and end; endpoints are reported by is_endpoint."""
        if self.state != "range":
            return False
        return self.range.start < day < self.range.end

    def is_selected(self, day: date) -> bool:
        return self.is_endpoint(day) or self.is_in_range(day)
