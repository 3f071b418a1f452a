"""
English (United States) locale. This is the default locale.
"""

from typing import Optional

from reldate.domain.models import RelativeToken
from reldate.locale.types import (
    FormatLong,
    Locale,
    LocaleOptions,
    Localize,
    build_format_relative,
)


def english_ordinal_number(number: int, unit: Optional[str] = None) -> str:
    """1 -> 1st, 2 -> 2nd, 11 -> 11th, 22 -> 22nd"""
    rem100 = number % 100
    if rem100 > 20 or rem100 < 10:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(rem100 % 10)
        if suffix:
            return f"{number}{suffix}"
    return f"{number}th"


ENGLISH_LOCALIZE = Localize(
    ordinal_number=english_ordinal_number,
    eras={
        "narrow": ["B", "A"],
        "abbreviated": ["BC", "AD"],
        "wide": ["Before Christ", "Anno Domini"],
    },
    quarters={
        "narrow": ["1", "2", "3", "4"],
        "abbreviated": ["Q1", "Q2", "Q3", "Q4"],
        "wide": ["1st quarter", "2nd quarter", "3rd quarter", "4th quarter"],
    },
    months={
        "narrow": ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        "abbreviated": [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ],
        "wide": [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ],
    },
    days={
        "narrow": ["S", "M", "T", "W", "T", "F", "S"],
        "short": ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"],
        "abbreviated": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "wide": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    },
    day_periods={
        "narrow": {"am": "a", "pm": "p"},
        "abbreviated": {"am": "AM", "pm": "PM"},
        "wide": {"am": "a.m.", "pm": "p.m."},
    },
)

# Shared by the English locales
ENGLISH_RELATIVE_PATTERNS = {
    RelativeToken.LAST_WEEK: "'last' eeee 'at' p",
    RelativeToken.YESTERDAY: "'yesterday at' p",
    RelativeToken.TODAY: "'today at' p",
    RelativeToken.TOMORROW: "'tomorrow at' p",
    RelativeToken.NEXT_WEEK: "eeee 'at' p",
    RelativeToken.OTHER: "P",
}

en_US = Locale(
    code="en-US",
    localize=ENGLISH_LOCALIZE,
    format_long=FormatLong(
        date_formats={
            "full": "EEEE, MMMM do, y",
            "long": "MMMM do, y",
            "medium": "MMM d, y",
            "short": "MM/dd/yyyy",
        },
        time_formats={
            "full": "h:mm:ss a zzzz",
            "long": "h:mm:ss a z",
            "medium": "h:mm:ss a",
            "short": "h:mm a",
        },
        date_time_formats={
            "full": "{{date}} 'at' {{time}}",
            "long": "{{date}} 'at' {{time}}",
            "medium": "{{date}}, {{time}}",
            "short": "{{date}}, {{time}}",
        },
    ),
    format_relative=build_format_relative(ENGLISH_RELATIVE_PATTERNS),
    options=LocaleOptions(week_starts_on=0, first_week_contains_date=1),
)
