"""
Pydantic schemas for API request bodies
"""
import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request body for creating a selector session"""
    value: str = Field(
        default="",
        description="Committed token the owning page currently filters on",
        example="2025-06-10_to_2025-06-15"
    )
    locale: Optional[str] = Field(default=None, description="Display locale", example="en")


class SwitchTabRequest(BaseModel):
    """Request body for switching the active tab"""
    tab: Literal["dates", "flexible"]


class SelectDateRequest(BaseModel):
    """Request body for a calendar day click"""
    date: dt.date = Field(..., example="2025-06-10")


class DurationRequest(BaseModel):
    """Request body for picking a flexible duration class"""
    duration: str = Field(..., example="week")


class ToggleMonthRequest(BaseModel):
    """Request body for toggling a flexible month"""
    month: str = Field(..., example="August")


class NavigateMonthRequest(BaseModel):
    """Request body for moving the calendar one month"""
    direction: Literal[1, -1]


class TokenRequest(BaseModel):
    """Request body carrying a raw token"""
    token: str = Field(default="", example="flexible-week-June,July")
