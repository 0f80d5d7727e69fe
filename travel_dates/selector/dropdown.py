"""
Travel dates dropdown controller.

Owns the open/close lifecycle and the split between the committed token
(what the owning page filters on) and the pending state staged while the
dropdown is open. The owner only sees ``value`` going in and
``on_change(token)`` coming out, once per apply or clear.
"""

from datetime import date
from typing import Callable, Literal, Optional

from ..schemas.selection import (
    ExactSelection,
    FlexibleSelection,
    PendingSnapshot,
    Tab,
)
from ..utils.exceptions import DropdownClosedError, InvalidSelectionError
from ..utils.logger import get_logger
from .calendar_month import month_anchor, navigate_month
from .codec import decode, encode
from .flexible_window import FlexibleWindowSelector
from .labels import resolve_locale
from .range_selection import RangeSelectionController

logger = get_logger(__name__)

TABS = ("dates", "flexible")

DropdownState = Literal["closed", "open_dates", "open_flexible"]


class PendingState:
    """
    Staged work for both tabs plus which tab is showing.

    Both sub-states live for the whole time the dropdown is open, so
    switching tabs never loses the other tab's clicks.
    """

    def __init__(self, today: Callable[[], date], active_tab: Tab = "dates"):
        self.active_tab: Tab = active_tab
        self.dates = RangeSelectionController(today)
        self.flexible = FlexibleWindowSelector()

    @classmethod
    def hydrate(cls, token: str, today: Callable[[], date]) -> "PendingState":
        """Build pending state from a committed token; the dates tab is always active."""
        pending = cls(today)
        selection = decode(token)
        if isinstance(selection, ExactSelection):
            pending.dates.reset(selection.range)
        elif isinstance(selection, FlexibleSelection):
            pending.flexible.reset(selection)
        return pending

    def snapshot(self) -> PendingSnapshot:
        return PendingSnapshot(
            active_tab=self.active_tab,
            dates=self.dates.range,
            flexible=self.flexible.snapshot(),
        )


class DropdownController:
    """
    Orchestrates the travel dates selector.

    Args:
        value: Committed token supplied by the owner (``""`` for no constraint)
        on_change: Called with the new token on apply and clear
        locale: Display locale; never changes the token format
        today: Clock returning the current local calendar date
    """

    def __init__(
        self,
        value: str = "",
        on_change: Optional[Callable[[str], None]] = None,
        locale: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        self.committed: str = value or ""
        self.on_change = on_change
        self.locale = resolve_locale(locale)
        self.today = today
        self.pending: Optional[PendingState] = None
        self.visible_month: date = month_anchor(today())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.pending is not None

    @property
    def state(self) -> DropdownState:
        if self.pending is None:
            return "closed"
        return f"open_{self.pending.active_tab}"

    def open(self) -> None:
        if self.is_open:
            return

        self.pending = PendingState.hydrate(self.committed, self.today)
        start = self.pending.dates.range.start
        self.visible_month = month_anchor(start or self.today())
        logger.debug("dropdown_opened", committed=self.committed)

    def toggle(self) -> None:
        """Trigger-button click: open when closed, discard and close when open."""
        if self.is_open:
            self.cancel()
        else:
            self.open()

    def cancel(self) -> None:
        if not self.is_open:
            return
        self.pending = None
        logger.debug("dropdown_cancelled", committed=self.committed)

    # Clicking anywhere outside the panel behaves like Cancel
    click_outside = cancel

    def _require_open(self, operation: str) -> PendingState:
        if self.pending is None:
            raise DropdownClosedError(
                f"Cannot {operation} while the dropdown is closed",
                context={"operation": operation},
            )
        return self.pending

    # ------------------------------------------------------------------
    # Pending-state mutations
    # ------------------------------------------------------------------

    def switch_tab(self, tab: str) -> None:
        pending = self._require_open("switch tab")
        if tab not in TABS:
            raise InvalidSelectionError(f"Unknown tab: {tab}", context={"allowed": list(TABS)})
        pending.active_tab = tab

    def select_date(self, day: date) -> bool:
        return self._require_open("select a date").dates.select_date(day)

    def set_duration(self, duration_class: str) -> None:
        self._require_open("set a duration").flexible.set_duration(duration_class)

    def toggle_month(self, month: str) -> bool:
        return self._require_open("toggle a month").flexible.toggle_month(month)

    def navigate_month(self, direction: int) -> date:
        self._require_open("change month")
        self.visible_month = navigate_month(self.visible_month, direction)
        return self.visible_month

    # ------------------------------------------------------------------
    # Commit / clear
    # ------------------------------------------------------------------

    @property
    def can_apply(self) -> bool:
        """Apply needs at least a start day on the dates tab; the flexible tab is never blocked."""
        if self.pending is None:
            return False
        if self.pending.active_tab == "dates":
            return not self.pending.dates.range.is_empty
        return True

    def apply(self) -> Optional[str]:
        """
        Commit the active tab's pending work and close.

        Returns:
            The emitted token, or None if Apply is currently disabled
        """
        pending = self._require_open("apply")
        if not self.can_apply:
            logger.debug("apply_ignored", reason="no_start_date")
            return None

        if pending.active_tab == "dates":
            token = encode(ExactSelection(range=pending.dates.range))
        else:
            token = encode(pending.flexible.snapshot())

        self.committed = token
        self.pending = None
        logger.info("selection_applied", token=token, tab=pending.active_tab)
        self._emit(token)
        return token

    def clear(self) -> None:
        """Drop the committed filter immediately; an open panel closes without applying."""
        self.committed = ""
        self.pending = None
        logger.info("selection_cleared")
        self._emit("")

    def set_value(self, token: str) -> None:
        """Owner-side update of the committed token; does not notify ``on_change``."""
        self.committed = token or ""

    def _emit(self, token: str) -> None:
        if self.on_change is not None:
            self.on_change(token)
