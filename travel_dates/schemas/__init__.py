"""
Pydantic schemas for the travel dates selector
"""
from .selection import (
    MONTH_NAMES,
    DURATION_CLASSES,
    CalendarDay,
    DateRange,
    ExactSelection,
    FlexibleSelection,
    EmptySelection,
    Selection,
    PendingSnapshot,
)
from .requests import (
    CreateSessionRequest,
    SwitchTabRequest,
    SelectDateRequest,
    DurationRequest,
    ToggleMonthRequest,
    NavigateMonthRequest,
    TokenRequest,
)
from .views import DayCellView, CalendarView, OptionView, FlexibleView, TabView, DropdownView

__all__ = [
    # Vocabulary
    "MONTH_NAMES",
    "DURATION_CLASSES",
    # Selection models
    "CalendarDay",
    "DateRange",
    "ExactSelection",
    "FlexibleSelection",
    "EmptySelection",
    "Selection",
    "PendingSnapshot",
    # API request models
    "CreateSessionRequest",
    "SwitchTabRequest",
    "SelectDateRequest",
    "DurationRequest",
    "ToggleMonthRequest",
    "NavigateMonthRequest",
    "TokenRequest",
    # View models
    "DayCellView",
    "CalendarView",
    "OptionView",
    "FlexibleView",
    "TabView",
    "DropdownView",
]
