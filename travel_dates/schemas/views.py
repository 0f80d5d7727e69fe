"""
Pydantic view models produced by the rendering adapter.

These describe what to draw; they hold no behaviour and are safe to send
to any frontend.
"""
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from .selection import PendingSnapshot


class DayCellView(BaseModel):
    """One real day in the calendar grid"""
    date: dt.date
    label: str = Field(..., description="Day of month", example="10")
    disabled: bool
    endpoint: bool = Field(default=False, description="Start or end of the pending range")
    in_range: bool = Field(default=False, description="Strictly between start and end")


class CalendarView(BaseModel):
    """Calendar for the dates tab"""
    month: dt.date = Field(..., description="First day of the month shown")
    title: str = Field(..., example="June 2025")
    weekdays: List[str] = Field(..., description="Sunday-first column headers")
    cells: List[Optional[DayCellView]] = Field(..., description="42 cells, null for padding")
    selected_text: Optional[str] = Field(default=None, description="Summary of the pending range")


class OptionView(BaseModel):
    """Selectable duration or month button"""
    value: str
    label: str
    selected: bool = False


class FlexibleView(BaseModel):
    """Duration and month pickers for the flexible tab"""
    duration_title: str
    months_title: str
    durations: List[OptionView]
    months: List[OptionView]


class TabView(BaseModel):
    value: str
    label: str
    active: bool = False


class DropdownView(BaseModel):
    """Everything needed to draw the widget in its current state"""
    locale: str
    state: str = Field(..., description="closed, open_dates or open_flexible")
    trigger_label: str
    has_value: bool = Field(..., description="Show the clear button")
    committed: str = Field(..., description="Committed token")
    tabs: List[TabView] = []
    calendar: Optional[CalendarView] = None
    flexible: Optional[FlexibleView] = None
    pending: Optional[PendingSnapshot] = None
    apply_enabled: bool = False
    apply_label: str
    cancel_label: str
