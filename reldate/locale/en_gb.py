"""
English (United Kingdom) locale.

Same words as en-US. Weeks start on Monday, times are 24-hour.
"""

from reldate.locale.en_us import ENGLISH_LOCALIZE, ENGLISH_RELATIVE_PATTERNS
from reldate.locale.types import FormatLong, Locale, LocaleOptions, build_format_relative

en_GB = Locale(
    code="en-GB",
    localize=ENGLISH_LOCALIZE,
    format_long=FormatLong(
        date_formats={
            "full": "EEEE, d MMMM yyyy",
            "long": "d MMMM yyyy",
            "medium": "d MMM yyyy",
            "short": "dd/MM/yyyy",
        },
        time_formats={
            "full": "HH:mm:ss zzzz",
            "long": "HH:mm:ss z",
            "medium": "HH:mm:ss",
            "short": "HH:mm",
        },
        date_time_formats={
            "full": "{{date}} 'at' {{time}}",
            "long": "{{date}} 'at' {{time}}",
            "medium": "{{date}}, {{time}}",
            "short": "{{date}}, {{time}}",
        },
    ),
    format_relative=build_format_relative(ENGLISH_RELATIVE_PATTERNS),
    options=LocaleOptions(week_starts_on=1, first_week_contains_date=4),
)
