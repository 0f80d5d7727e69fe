"""Flexible-window state: one duration class plus an ordered set of months."""

from typing import List, Optional

from ..schemas.selection import DURATION_CLASSES, MONTH_NAMES, FlexibleSelection
from ..utils.exceptions import InvalidSelectionError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FlexibleWindowSelector:
    """Duration is single-select; months toggle in and out, keeping click order."""

    def __init__(self, initial: Optional[FlexibleSelection] = None):
        self.duration: Optional[str] = None
        self.months: List[str] = []
        self.reset(initial)

    def reset(self, initial: Optional[FlexibleSelection] = None) -> None:
        initial = initial or FlexibleSelection()
        self.duration = initial.duration
        self.months = list(initial.months)

    def set_duration(self, duration_class: str) -> None:
        if duration_class not in DURATION_CLASSES:
            raise InvalidSelectionError(
                f"Unknown duration class: {duration_class}",
                context={"allowed": list(DURATION_CLASSES)},
            )
        self.duration = duration_class
        logger.debug("duration_set", duration=duration_class)

    def toggle_month(self, month: str) -> bool:
        """
        Add the month if absent, remove it if present.

        Returns:
            True if the month is selected after the toggle
        """
        if month not in MONTH_NAMES:
            raise InvalidSelectionError(
                f"Unknown month name: {month}",
                context={"allowed": list(MONTH_NAMES)},
            )

        if month in self.months:
            self.months.remove(month)
            selected = False
        else:
            self.months.append(month)
            selected = True

        logger.debug("month_toggled", month=month, selected=selected, months=self.months)
        return selected

    def is_month_selected(self, month: str) -> bool:
        return month in self.months

    def snapshot(self) -> FlexibleSelection:
        return FlexibleSelection(duration=self.duration, months=list(self.months))
