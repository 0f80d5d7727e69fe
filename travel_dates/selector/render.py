"""
Rendering adapter: projects a DropdownController into view models.

Nothing here mutates the controller, and the controller never imports this
module, so another frontend can replace it without touching the state
machine.
"""

from typing import List, Optional

from ..schemas.views import (
    CalendarView,
    DayCellView,
    DropdownView,
    FlexibleView,
    OptionView,
    TabView,
)
from .calendar_month import generate_grid
from .dropdown import TABS, DropdownController, PendingState
from . import labels


def render_calendar(controller: DropdownController, pending: PendingState) -> CalendarView:
    locale = controller.locale
    cells: List[Optional[DayCellView]] = []
    for day in generate_grid(controller.visible_month, controller.today()):
        if day is None:
            cells.append(None)
            continue
        cells.append(DayCellView(
            date=day.date,
            label=str(day.date.day),
            disabled=day.disabled,
            endpoint=pending.dates.is_endpoint(day.date),
            in_range=pending.dates.is_in_range(day.date),
        ))

    date_range = pending.dates.range
    selected_text = None
    if date_range.start is not None:
        selected_text = (
            f"{labels.caption('selected', locale)} "
            f"{labels.range_text(date_range.start, date_range.end, locale)}"
        )

    return CalendarView(
        month=controller.visible_month,
        title=labels.month_title(controller.visible_month, locale),
        weekdays=labels.weekday_labels(locale),
        cells=cells,
        selected_text=selected_text,
    )


def render_flexible(controller: DropdownController, pending: PendingState) -> FlexibleView:
    locale = controller.locale
    return FlexibleView(
        duration_title=labels.caption("trip_duration", locale),
        months_title=labels.caption("select_months", locale),
        durations=[
            OptionView(**option, selected=option["value"] == pending.flexible.duration)
            for option in labels.duration_options(locale)
        ],
        months=[
            OptionView(**option, selected=pending.flexible.is_month_selected(option["value"]))
            for option in labels.month_options(locale)
        ],
    )


def render_dropdown(controller: DropdownController) -> DropdownView:
    """
    Build the full view of the widget.

    The calendar is only rendered for the dates tab and the pickers only for
    the flexible tab; both are omitted while closed.
    """
    locale = controller.locale
    view = DropdownView(
        locale=locale,
        state=controller.state,
        trigger_label=labels.display_text(controller.committed, locale),
        has_value=bool(controller.committed),
        committed=controller.committed,
        apply_enabled=controller.can_apply,
        apply_label=labels.caption("apply", locale),
        cancel_label=labels.caption("cancel", locale),
    )

    pending = controller.pending
    if pending is None:
        return view

    view.pending = pending.snapshot()
    view.tabs = [
        TabView(value=tab, label=labels.caption(tab, locale), active=tab == pending.active_tab)
        for tab in TABS
    ]
    if pending.active_tab == "dates":
        view.calendar = render_calendar(controller, pending)
    else:
        view.flexible = render_flexible(controller, pending)
    return view
