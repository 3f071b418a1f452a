"""
Date/time utilities

- coercion of date-like input into timezone-aware datetimes
- calendar-day difference on the local wall calendar
- timezone offset and millisecond arithmetic
- week helpers used by the week-based pattern tokens
"""

import logging
import math
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Optional, Union

import pytz

from reldate.config import config
from reldate.errors import InvalidDateError

logger = logging.getLogger(__name__)

UTC = pytz.UTC

ONE_MILLISECOND = timedelta(milliseconds=1)

DateLike = Union[date, datetime]


class DateTimeUtil:
    """Date primitives shared by the formatters."""

    @staticmethod
    def get_time_zone(time_zone: Union[str, tzinfo, None] = None) -> tzinfo:
        """
        Resolve a time zone.

        Args:
            time_zone: zone name, tzinfo, or None for config.TIME_ZONE

        Returns:
            tzinfo (pytz zone for names)

        Raises:
            pytz.UnknownTimeZoneError: unknown zone name
        """
        if time_zone is None:
            time_zone = config.TIME_ZONE
        if isinstance(time_zone, str):
            return pytz.timezone(time_zone)
        return time_zone

    @staticmethod
    def localize(naive_dt: datetime, tz: tzinfo) -> datetime:
        """Attach tz to a naive datetime (pytz zones need localize())."""
        if hasattr(tz, "localize"):
            return tz.localize(naive_dt)
        return naive_dt.replace(tzinfo=tz)

    @staticmethod
    def to_date(value: Any, time_zone: Union[str, tzinfo, None] = None) -> Optional[datetime]:
        """
        Coerce a date-like value into an aware datetime in the local zone.

        Accepted input:
        - aware datetime: converted to the local zone
        - naive datetime: interpreted as local wall-clock time
        - date: local midnight
        - int / float: Unix timestamp in seconds
        - str: ISO 8601 (a trailing "Z" means UTC)

        Args:
            value: date-like input
            time_zone: local zone (name or tzinfo), None for config.TIME_ZONE

        Returns:
            aware datetime, or None if the input is not a valid date
        """
        tz = DateTimeUtil.get_time_zone(time_zone)

        if value is None or isinstance(value, bool):
            logger.warning(f"Cannot convert {value!r} to a date")
            return None

        if isinstance(value, date):
            if not isinstance(value, datetime):
                value = datetime.combine(value, time())
            try:
                if value.tzinfo is None:
                    return DateTimeUtil.localize(value, tz)
                return value.astimezone(tz)
            except OverflowError as e:
                logger.warning(f"Date out of range in {tz}: {value!r} ({e})")
                return None

        if isinstance(value, (int, float)):
            if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
                logger.warning(f"Cannot convert {value!r} to a date")
                return None
            try:
                return datetime.fromtimestamp(value, tz)
            except (OverflowError, OSError, ValueError) as e:
                logger.warning(f"Timestamp out of range: {value!r} ({e})")
                return None

        if isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            except ValueError as e:
                logger.warning(f"Failed to parse date string {value!r}: {e}")
                return None
            return DateTimeUtil.to_date(parsed, tz)

        logger.warning(f"Unsupported date type: {type(value).__name__}")
        return None

    @staticmethod
    def difference_in_calendar_days(
        date_left: Optional[datetime], date_right: Optional[datetime]
    ) -> Optional[int]:
        """
        Number of calendar days between two dates (date_left - date_right).

        Counts day boundaries on each date's wall calendar, not elapsed
        24-hour periods, so a DST transition in between does not matter.

        Args:
            date_left: later date for a positive result
            date_right: earlier date for a positive result

        Returns:
            signed day count, None if either date is invalid
        """
        if date_left is None or date_right is None:
            return None
        return (date_left.date() - date_right.date()).days

    @staticmethod
    def get_timezone_offset_in_milliseconds(dt: datetime) -> int:
        """
        Local-to-UTC offset of dt in milliseconds.

        Sign is inverted relative to utcoffset(): zones east of UTC give a
        negative value (Asia/Tokyo -> -32400000).
        """
        offset = dt.utcoffset()
        if offset is None:
            return 0
        return -(offset // ONE_MILLISECOND)

    @staticmethod
    def sub_milliseconds(dt: datetime, amount: int) -> datetime:
        """
        Shift an instant back by amount milliseconds. The result is in UTC.

        Subtracting the date's own offset (see
        get_timezone_offset_in_milliseconds) keeps the wall-clock fields and
        works at the ends of the datetime range.

        Raises:
            InvalidDateError: the result is out of range
        """
        shift = (dt.utcoffset() or timedelta(0)) + timedelta(milliseconds=amount)
        try:
            return UTC.localize(dt.replace(tzinfo=None) - shift)
        except OverflowError as e:
            logger.warning(f"Date out of range: {dt!r} - {amount}ms ({e})")
            raise InvalidDateError() from e

    @staticmethod
    def to_integer(value: Any) -> Optional[int]:
        """
        Truncate a numeric option value toward zero.

        Returns None for None, bools, non-numeric values, NaN and infinity.
        """
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        return int(number)

    # ------------------------------------------------------------------
    # Week helpers (wall-calendar dates)
    # ------------------------------------------------------------------

    @staticmethod
    def day_of_week(value: DateLike) -> int:
        """Day of week with Sunday = 0 ... Saturday = 6."""
        return (value.weekday() + 1) % 7

    @staticmethod
    def start_of_week(value: DateLike, week_starts_on: int = 0) -> date:
        value = _as_date(value)
        diff = (DateTimeUtil.day_of_week(value) - week_starts_on) % 7
        return value - timedelta(days=diff)

    @staticmethod
    def is_same_week(left: DateLike, right: DateLike, week_starts_on: int = 0) -> bool:
        return (
            DateTimeUtil.start_of_week(left, week_starts_on)
            == DateTimeUtil.start_of_week(right, week_starts_on)
        )

    @staticmethod
    def get_week_year(
        value: DateLike, week_starts_on: int = 0, first_week_contains_date: int = 1
    ) -> int:
        """
        Local week-numbering year.

        Week 1 is the week that contains January first_week_contains_date.
        """
        value = _as_date(value)
        year = value.year

        if year < date.max.year:
            first_of_next = DateTimeUtil.start_of_week(
                date(year + 1, 1, first_week_contains_date), week_starts_on
            )
            if value >= first_of_next:
                return year + 1

        first_of_this = DateTimeUtil.start_of_week(
            date(year, 1, first_week_contains_date), week_starts_on
        )
        if value >= first_of_this:
            return year
        return year - 1

    @staticmethod
    def get_week(
        value: DateLike, week_starts_on: int = 0, first_week_contains_date: int = 1
    ) -> int:
        """Local week number (1-53)."""
        value = _as_date(value)
        week_year = DateTimeUtil.get_week_year(value, week_starts_on, first_week_contains_date)
        first_week = DateTimeUtil.start_of_week(
            date(week_year, 1, first_week_contains_date), week_starts_on
        )
        start = DateTimeUtil.start_of_week(value, week_starts_on)
        return (start - first_week).days // 7 + 1

    @staticmethod
    def get_day_of_year(value: DateLike) -> int:
        return _as_date(value).timetuple().tm_yday


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
