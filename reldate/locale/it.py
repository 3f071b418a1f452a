"""
Italian locale.

Relative weekday phrasing depends on whether the date falls in the same
week as the base date ("lunedì alle 10:00") or not ("lunedì scorso alle
10:00").
"""

from datetime import datetime
from typing import Optional

from reldate.domain.models import FormatOptions, RelativeToken
from reldate.locale.types import (
    FormatLong,
    Locale,
    LocaleOptions,
    Localize,
    build_format_relative,
)
from reldate.utils.datetime_util import DateTimeUtil

WEEKDAYS = ["domenica", "lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato"]

WEEK_STARTS_ON = 1


def _this_week(day: int) -> str:
    return f"'{WEEKDAYS[day]} alle' p"


def _last_week(day: int) -> str:
    # domenica is feminine
    if day == 0:
        return "'domenica scorsa alle' p"
    return f"'{WEEKDAYS[day]} scorso alle' p"


def _next_week(day: int) -> str:
    if day == 0:
        return "'domenica prossima alle' p"
    return f"'{WEEKDAYS[day]} prossimo alle' p"


def _week_starts_on(options: FormatOptions) -> int:
    if options is not None and options.week_starts_on is not None:
        return options.week_starts_on
    return WEEK_STARTS_ON


def _relative_weekday(other_week):
    def pattern(utc_date: datetime, utc_base_date: datetime, options: FormatOptions) -> str:
        day = DateTimeUtil.day_of_week(utc_date)
        if DateTimeUtil.is_same_week(utc_date, utc_base_date, _week_starts_on(options)):
            return _this_week(day)
        return other_week(day)

    return pattern


def italian_ordinal_number(number: int, unit: Optional[str] = None) -> str:
    return f"{number}º"


it = Locale(
    code="it",
    localize=Localize(
        ordinal_number=italian_ordinal_number,
        eras={
            "narrow": ["aC", "dC"],
            "abbreviated": ["a.C.", "d.C."],
            "wide": ["avanti Cristo", "dopo Cristo"],
        },
        quarters={
            "narrow": ["1", "2", "3", "4"],
            "abbreviated": ["T1", "T2", "T3", "T4"],
            "wide": ["1º trimestre", "2º trimestre", "3º trimestre", "4º trimestre"],
        },
        months={
            "narrow": ["G", "F", "M", "A", "M", "G", "L", "A", "S", "O", "N", "D"],
            "abbreviated": [
                "gen", "feb", "mar", "apr", "mag", "giu",
                "lug", "ago", "set", "ott", "nov", "dic",
            ],
            "wide": [
                "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
                "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
            ],
        },
        days={
            "narrow": ["D", "L", "M", "M", "G", "V", "S"],
            "short": ["dom", "lun", "mar", "mer", "gio", "ven", "sab"],
            "abbreviated": ["dom", "lun", "mar", "mer", "gio", "ven", "sab"],
            "wide": WEEKDAYS,
        },
        day_periods={
            "narrow": {"am": "m.", "pm": "p."},
            "abbreviated": {"am": "AM", "pm": "PM"},
            "wide": {"am": "AM", "pm": "PM"},
        },
    ),
    format_long=FormatLong(
        date_formats={
            "full": "EEEE d MMMM y",
            "long": "d MMMM y",
            "medium": "d MMM y",
            "short": "dd/MM/y",
        },
        time_formats={
            "full": "HH:mm:ss zzzz",
            "long": "HH:mm:ss z",
            "medium": "HH:mm:ss",
            "short": "HH:mm",
        },
        date_time_formats={
            "full": "{{date}} {{time}}",
            "long": "{{date}} {{time}}",
            "medium": "{{date}} {{time}}",
            "short": "{{date}} {{time}}",
        },
    ),
    format_relative=build_format_relative({
        RelativeToken.LAST_WEEK: _relative_weekday(_last_week),
        RelativeToken.YESTERDAY: "'ieri alle' p",
        RelativeToken.TODAY: "'oggi alle' p",
        RelativeToken.TOMORROW: "'domani alle' p",
        RelativeToken.NEXT_WEEK: _relative_weekday(_next_week),
        RelativeToken.OTHER: "P",
    }),
    options=LocaleOptions(week_starts_on=WEEK_STARTS_ON, first_week_contains_date=4),
)
