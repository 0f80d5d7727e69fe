"""
Localized display strings for the travel dates widget.

Only what the user reads changes with the locale. Tokens keep the English
month names and duration keywords in every locale.
"""

from datetime import date
from typing import Dict, List, Optional

from ..schemas.selection import DURATION_CLASSES, MONTH_NAMES, ExactSelection, FlexibleSelection
from ..utils.config import settings
from ..utils.exceptions import ConfigurationError
from .codec import decode

LOCALES: Dict[str, Dict] = {
    "en": {
        "months": dict(zip(MONTH_NAMES, MONTH_NAMES)),
        "durations": {"weekend": "Weekend", "week": "Week", "month": "Month"},
        "weekdays": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "date_format": "{month} {day}, {year}",
        "captions": {
            "dates": "Dates",
            "flexible": "Flexible",
            "trip_duration": "Trip Duration",
            "select_months": "Select Months",
            "placeholder": "Select dates",
            "selected": "Selected:",
            "cancel": "Cancel",
            "apply": "Apply",
        },
    },
    "ar": {
        "months": dict(zip(MONTH_NAMES, [
            "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
            "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
        ])),
        "durations": {"weekend": "عطلة نهاية الأسبوع", "week": "أسبوع", "month": "شهر"},
        "weekdays": ["أحد", "اثن", "ثلاث", "أربع", "خميس", "جمعة", "سبت"],
        "date_format": "{day} {month} {year}",
        "captions": {
            "dates": "التواريخ",
            "flexible": "مرن",
            "trip_duration": "مدة الرحلة",
            "select_months": "اختر الأشهر",
            "placeholder": "اختر التواريخ",
            "selected": "المحدد:",
            "cancel": "إلغاء",
            "apply": "تطبيق",
        },
    },
}

# Trigger summary shows at most this many months before "..."
SUMMARY_MONTHS = 2


def resolve_locale(locale: Optional[str]) -> str:
    """Return a locale with a label table, falling back to the configured default."""
    if locale in LOCALES and locale in settings.supported_locales:
        return locale
    if settings.default_locale not in LOCALES:
        raise ConfigurationError(
            f"Default locale has no label table: {settings.default_locale}",
            context={"available": sorted(LOCALES)},
        )
    return settings.default_locale


def caption(key: str, locale: Optional[str] = None) -> str:
    return LOCALES[resolve_locale(locale)]["captions"][key]


def month_label(month: str, locale: Optional[str] = None) -> str:
    return LOCALES[resolve_locale(locale)]["months"][month]


def duration_label(duration_class: str, locale: Optional[str] = None) -> str:
    return LOCALES[resolve_locale(locale)]["durations"][duration_class]


def weekday_labels(locale: Optional[str] = None) -> List[str]:
    return list(LOCALES[resolve_locale(locale)]["weekdays"])


def format_display_date(day: date, locale: Optional[str] = None) -> str:
    table = LOCALES[resolve_locale(locale)]
    month = table["months"][MONTH_NAMES[day.month - 1]]
    return table["date_format"].format(month=month, day=day.day, year=day.year)


def month_title(anchor: date, locale: Optional[str] = None) -> str:
    """Calendar header such as ``June 2025``."""
    return f"{month_label(MONTH_NAMES[anchor.month - 1], locale)} {anchor.year}"


def range_text(start: date, end: date, locale: Optional[str] = None) -> str:
    return f"{format_display_date(start, locale)} - {format_display_date(end, locale)}"


def display_text(token: str, locale: Optional[str] = None) -> str:
    """
    Summary shown on the closed dropdown's trigger button.

    Args:
        token: Committed token
        locale: Display locale

    Returns:
        Localized summary, or the placeholder caption when nothing is committed
    """
    selection = decode(token)

    if isinstance(selection, ExactSelection):
        return range_text(selection.range.start, selection.range.end, locale)

    if isinstance(selection, FlexibleSelection):
        months = [month_label(m, locale) for m in selection.months[:SUMMARY_MONTHS]]
        text = ", ".join(months)
        if len(selection.months) > SUMMARY_MONTHS:
            text += "..."
        if selection.duration is None:
            return text
        label = duration_label(selection.duration, locale)
        return f"{label} - {text}" if text else label

    return caption("placeholder", locale)


def duration_options(locale: Optional[str] = None) -> List[Dict[str, str]]:
    return [{"value": d, "label": duration_label(d, locale)} for d in DURATION_CLASSES]


def month_options(locale: Optional[str] = None) -> List[Dict[str, str]]:
    return [{"value": m, "label": month_label(m, locale)} for m in MONTH_NAMES]
