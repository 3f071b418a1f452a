"""
Pattern token renderers

One function per pattern letter. Each takes the wall-clock datetime, the
token as written ("yyyy", "EEEE", "do", ...) and the FormatContext.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict

from reldate.locale.types import Localize
from reldate.utils.datetime_util import UTC, DateTimeUtil

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True)
class FormatContext:
    localize: Localize
    week_starts_on: int
    first_week_contains_date: int


TokenFormatter = Callable[[datetime, str, FormatContext], str]


def add_leading_zeros(number: int, target_length: int) -> str:
    sign = "-" if number < 0 else ""
    return sign + str(abs(number)).zfill(target_length)


def _numeric(value: int, token: str, ctx: FormatContext, unit: str) -> str:
    """Shared numeric rendering: "Xo" is an ordinal, otherwise zero-padded to the token length."""
    if token.endswith("o") and len(token) == 2:
        return ctx.localize.ordinal_number(value, unit)
    return add_leading_zeros(value, len(token))


# ----------------------------------------------------------------------
# Era, year, quarter, month
# ----------------------------------------------------------------------

def format_era(dt: datetime, token: str, ctx: FormatContext) -> str:
    era = 1 if dt.year > 0 else 0
    if token in ("G", "GG", "GGG"):
        return ctx.localize.era(era, "abbreviated")
    if token == "GGGGG":
        return ctx.localize.era(era, "narrow")
    return ctx.localize.era(era, "wide")


def format_year(dt: datetime, token: str, ctx: FormatContext) -> str:
    year = dt.year
    if token == "yo":
        return ctx.localize.ordinal_number(year, "year")
    if token == "yy":
        return add_leading_zeros(year % 100, 2)
    return add_leading_zeros(year, len(token))


def format_extended_year(dt: datetime, token: str, ctx: FormatContext) -> str:
    return add_leading_zeros(dt.year, len(token))


def format_quarter(dt: datetime, token: str, ctx: FormatContext) -> str:
    quarter = (dt.month - 1) // 3 + 1
    letter = token[0]
    if token in (letter, letter * 2):
        return add_leading_zeros(quarter, len(token))
    if token == letter + "o":
        return ctx.localize.ordinal_number(quarter, "quarter")
    if token == letter * 3:
        return ctx.localize.quarter(quarter, "abbreviated")
    if token == letter * 5:
        return ctx.localize.quarter(quarter, "narrow")
    return ctx.localize.quarter(quarter, "wide")


def format_month(dt: datetime, token: str, ctx: FormatContext) -> str:
    month = dt.month
    letter = token[0]
    if token in (letter, letter * 2):
        return add_leading_zeros(month, len(token))
    if token == letter + "o":
        return ctx.localize.ordinal_number(month, "month")
    if token == letter * 3:
        return ctx.localize.month(month - 1, "abbreviated")
    if token == letter * 5:
        return ctx.localize.month(month - 1, "narrow")
    return ctx.localize.month(month - 1, "wide")


# ----------------------------------------------------------------------
# Week, day
# ----------------------------------------------------------------------

def format_local_week(dt: datetime, token: str, ctx: FormatContext) -> str:
    week = DateTimeUtil.get_week(dt, ctx.week_starts_on, ctx.first_week_contains_date)
    return _numeric(week, token, ctx, "week")


def format_local_week_year(dt: datetime, token: str, ctx: FormatContext) -> str:
    week_year = DateTimeUtil.get_week_year(dt, ctx.week_starts_on, ctx.first_week_contains_date)
    if token == "Yo":
        return ctx.localize.ordinal_number(week_year, "year")
    if token == "YY":
        return add_leading_zeros(week_year % 100, 2)
    return add_leading_zeros(week_year, len(token))


def format_day_of_month(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.day, token, ctx, "date")


def format_day_of_year(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(DateTimeUtil.get_day_of_year(dt), token, ctx, "dayOfYear")


def _day_name(day_of_week: int, token: str, ctx: FormatContext) -> str:
    count = len(token)
    if count <= 3:
        return ctx.localize.day(day_of_week, "abbreviated")
    if count == 5:
        return ctx.localize.day(day_of_week, "narrow")
    if count == 6:
        return ctx.localize.day(day_of_week, "short")
    return ctx.localize.day(day_of_week, "wide")


def format_day_of_week(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _day_name(DateTimeUtil.day_of_week(dt), token, ctx)


def format_local_day_of_week(dt: datetime, token: str, ctx: FormatContext) -> str:
    """e / c: 1-7 counted from week_starts_on, names from eee / ccc on."""
    day_of_week = DateTimeUtil.day_of_week(dt)
    local_day = (day_of_week - ctx.week_starts_on + 8) % 7 or 7
    letter = token[0]
    if token == letter + "o":
        return ctx.localize.ordinal_number(local_day, "day")
    if len(token) <= 2:
        return add_leading_zeros(local_day, len(token))
    return _day_name(day_of_week, token, ctx)


# ----------------------------------------------------------------------
# Time of day
# ----------------------------------------------------------------------

def format_day_period(dt: datetime, token: str, ctx: FormatContext) -> str:
    period = "pm" if dt.hour >= 12 else "am"
    if token in ("a", "aa"):
        return ctx.localize.day_period(period, "abbreviated")
    if token == "aaa":
        return ctx.localize.day_period(period, "abbreviated").lower()
    if token == "aaaaa":
        return ctx.localize.day_period(period, "narrow")
    return ctx.localize.day_period(period, "wide")


def format_hour_1_to_12(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.hour % 12 or 12, token, ctx, "hour")


def format_hour_0_to_23(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.hour, token, ctx, "hour")


def format_hour_0_to_11(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.hour % 12, token, ctx, "hour")


def format_hour_1_to_24(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.hour or 24, token, ctx, "hour")


def format_minute(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.minute, token, ctx, "minute")


def format_second(dt: datetime, token: str, ctx: FormatContext) -> str:
    return _numeric(dt.second, token, ctx, "second")


def format_fraction_of_second(dt: datetime, token: str, ctx: FormatContext) -> str:
    digits = len(token)
    fraction = dt.microsecond * 10 ** digits // 10 ** 6
    return add_leading_zeros(fraction, digits)


# ----------------------------------------------------------------------
# Time zone, timestamps
# ----------------------------------------------------------------------

def _offset_minutes(dt: datetime) -> int:
    """UTC offset in minutes, east of UTC positive."""
    offset = dt.utcoffset()
    if offset is None:
        return 0
    return int(offset.total_seconds()) // 60


def _timezone(offset: int, delimiter: str = "") -> str:
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset), 60)
    return f"{sign}{hours:02d}{delimiter}{minutes:02d}"


def _timezone_short(offset: int, delimiter: str = "") -> str:
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset), 60)
    if minutes == 0:
        return f"{sign}{hours}"
    return f"{sign}{hours}{delimiter}{minutes:02d}"


def _timezone_with_optional_minutes(offset: int, delimiter: str = "") -> str:
    if offset % 60 == 0:
        sign = "+" if offset >= 0 else "-"
        return f"{sign}{abs(offset) // 60:02d}"
    return _timezone(offset, delimiter)


def format_iso_timezone(dt: datetime, token: str, ctx: FormatContext) -> str:
    """X (Z for UTC) and x (never Z)."""
    offset = _offset_minutes(dt)
    letter = token[0]
    if letter == "X" and offset == 0:
        return "Z"
    count = len(token)
    if count == 1:
        return _timezone_with_optional_minutes(offset)
    if count in (2, 4):
        return _timezone(offset)
    return _timezone(offset, ":")


def format_gmt_timezone(dt: datetime, token: str, ctx: FormatContext) -> str:
    """O and z: GMT+9 (short) or GMT+09:00 (four letters)."""
    offset = _offset_minutes(dt)
    if len(token) <= 3:
        return "GMT" + _timezone_short(offset, ":")
    return "GMT" + _timezone(offset, ":")


def format_seconds_timestamp(dt: datetime, token: str, ctx: FormatContext) -> str:
    return str((dt - EPOCH) // timedelta(seconds=1))


def format_milliseconds_timestamp(dt: datetime, token: str, ctx: FormatContext) -> str:
    return str((dt - EPOCH) // timedelta(milliseconds=1))


FORMATTERS: Dict[str, TokenFormatter] = {
    "G": format_era,
    "y": format_year,
    "u": format_extended_year,
    "Q": format_quarter,
    "q": format_quarter,
    "M": format_month,
    "L": format_month,
    "Y": format_local_week_year,
    "w": format_local_week,
    "d": format_day_of_month,
    "D": format_day_of_year,
    "E": format_day_of_week,
    "e": format_local_day_of_week,
    "c": format_local_day_of_week,
    "a": format_day_period,
    "h": format_hour_1_to_12,
    "H": format_hour_0_to_23,
    "K": format_hour_0_to_11,
    "k": format_hour_1_to_24,
    "m": format_minute,
    "s": format_second,
    "S": format_fraction_of_second,
    "X": format_iso_timezone,
    "x": format_iso_timezone,
    "O": format_gmt_timezone,
    "z": format_gmt_timezone,
    "t": format_seconds_timestamp,
    "T": format_milliseconds_timestamp,
}
