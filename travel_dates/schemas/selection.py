"""
Pydantic schemas for travel date selections.

Dates are plain calendar dates (``datetime.date``) so no timezone can
shift a selected day. Month names and duration classes are the fixed
English vocabulary used on the wire, whatever locale the widget shows.
"""
import datetime as dt
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# ============================================================================
# VOCABULARY
# ============================================================================

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DURATION_CLASSES = ("weekend", "week", "month")

DurationClass = Literal["weekend", "week", "month"]
Tab = Literal["dates", "flexible"]


# ============================================================================
# SELECTION MODELS
# ============================================================================

class CalendarDay(BaseModel):
    """A real day cell in a month grid"""
    date: dt.date = Field(..., description="Calendar date", example="2025-06-10")
    disabled: bool = Field(..., description="True when the date is before today")

    class Config:
        frozen = True


class DateRange(BaseModel):
    """Exact-dates selection; both endpoints set or both unset"""
    start: Optional[dt.date] = Field(default=None, description="First day of the range")
    end: Optional[dt.date] = Field(default=None, description="Last day of the range (inclusive)")

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_endpoints(self) -> "DateRange":
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be set together")
        if self.start is not None and self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")
        return self

    @property
    def is_empty(self) -> bool:
        return self.start is None


class ExactSelection(BaseModel):
    """Committed exact date range"""
    kind: Literal["exact"] = "exact"
    range: DateRange = Field(default_factory=DateRange)

    class Config:
        frozen = True


class FlexibleSelection(BaseModel):
    """Duration class plus candidate months, months kept in toggle order"""
    kind: Literal["flexible"] = "flexible"
    duration: Optional[DurationClass] = Field(default=None, description="weekend, week or month")
    months: List[str] = Field(default_factory=list, description="Canonical English month names")

    class Config:
        frozen = True

    @field_validator("months")
    @classmethod
    def _check_months(cls, months: List[str]) -> List[str]:
        unknown = [m for m in months if m not in MONTH_NAMES]
        if unknown:
            raise ValueError(f"unknown month names: {unknown}")
        if len(set(months)) != len(months):
            raise ValueError("months must not repeat")
        return months

    @property
    def is_empty(self) -> bool:
        return self.duration is None and not self.months


class EmptySelection(BaseModel):
    """No date constraint"""
    kind: Literal["empty"] = "empty"

    class Config:
        frozen = True


Selection = Annotated[
    Union[ExactSelection, FlexibleSelection, EmptySelection],
    Field(discriminator="kind"),
]


class PendingSnapshot(BaseModel):
    """Serializable copy of the staged (uncommitted) state of an open dropdown"""
    active_tab: Tab = Field(..., description="Tab currently shown")
    dates: DateRange = Field(..., description="Staged exact-dates work")
    flexible: FlexibleSelection = Field(..., description="Staged flexible-window work")
