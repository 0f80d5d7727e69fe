"""
Travel dates selector package.

This package contains the framework-free pieces of the date picker:
- Month grid generation and past-day disabling
- Exact-range click state machine
- Flexible duration + months selection
- Token encoding and decoding
- Dropdown lifecycle (open, apply, cancel, clear)
- Localized labels and the view-model rendering adapter
"""

from .calendar_month import generate_grid, is_disabled, month_anchor, navigate_month
from .range_selection import RangeSelectionController
from .flexible_window import FlexibleWindowSelector
from .codec import encode, decode, format_date, parse_date
from .dropdown import DropdownController, PendingState
from .labels import display_text
from .render import render_dropdown

__all__ = [
    "generate_grid",
    "is_disabled",
    "month_anchor",
    "navigate_month",
    "RangeSelectionController",
    "FlexibleWindowSelector",
    "encode",
    "decode",
    "format_date",
    "parse_date",
    "DropdownController",
    "PendingState",
    "display_text",
    "render_dropdown",
]
