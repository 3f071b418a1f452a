"""
DateTimeUtil unit tests
"""

import math
from datetime import date, datetime, timedelta

import pytest
import pytz

from reldate.errors import InvalidDateError
from reldate.utils.datetime_util import DateTimeUtil, UTC

JST = pytz.timezone('Asia/Tokyo')
NEW_YORK = pytz.timezone('America/New_York')


class TestGetTimeZone:
    """Tests for get_time_zone"""

    def test_name(self):
        assert DateTimeUtil.get_time_zone("Asia/Tokyo") == JST

    def test_tzinfo_passthrough(self):
        assert DateTimeUtil.get_time_zone(NEW_YORK) is NEW_YORK

    def test_unknown_name(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            DateTimeUtil.get_time_zone("Mars/Olympus_Mons")


class TestToDate:
    """Tests for to_date"""

    def test_aware_datetime_converted_to_local_zone(self):
        """UTC 03:00 -> JST 12:00"""
        utc_dt = UTC.localize(datetime(2026, 10, 14, 3, 0))
        result = DateTimeUtil.to_date(utc_dt, JST)

        assert result.tzinfo.zone == 'Asia/Tokyo'
        assert result.hour == 12
        assert result == utc_dt

    def test_naive_datetime_is_local_wall_clock(self):
        result = DateTimeUtil.to_date(datetime(2026, 10, 14, 21, 30), "Asia/Tokyo")

        assert result.hour == 21
        assert result.minute == 30
        assert result.utcoffset() == timedelta(hours=9)

    def test_naive_datetime_uses_dst_offset(self):
        summer = DateTimeUtil.to_date(datetime(2026, 7, 1, 12, 0), NEW_YORK)
        winter = DateTimeUtil.to_date(datetime(2026, 12, 1, 12, 0), NEW_YORK)

        assert summer.utcoffset() == timedelta(hours=-4)
        assert winter.utcoffset() == timedelta(hours=-5)

    def test_date_is_local_midnight(self):
        result = DateTimeUtil.to_date(date(2026, 10, 14), JST)

        assert (result.year, result.month, result.day) == (2026, 10, 14)
        assert (result.hour, result.minute) == (0, 0)
        assert result.utcoffset() == timedelta(hours=9)

    def test_timestamp_seconds(self):
        result = DateTimeUtil.to_date(0, "UTC")
        assert result == UTC.localize(datetime(1970, 1, 1))

    def test_float_timestamp(self):
        result = DateTimeUtil.to_date(1.5, "UTC")
        assert result == UTC.localize(datetime(1970, 1, 1, 0, 0, 1, 500000))

    def test_iso_string_with_z(self):
        """"2026-10-14T04:30:00Z" is UTC, shown in JST"""
        result = DateTimeUtil.to_date("2026-10-14T04:30:00Z", JST)

        assert result.hour == 13
        assert result.minute == 30

    def test_naive_iso_string(self):
        result = DateTimeUtil.to_date("2026-10-14T04:30", NEW_YORK)

        assert result.hour == 4
        assert result.utcoffset() == timedelta(hours=-4)

    @pytest.mark.parametrize("value", [
        None,
        True,
        False,
        float("nan"),
        float("inf"),
        "not a date",
        "",
        1e20,
        object(),
    ])
    def test_invalid_input_returns_none(self, value):
        assert DateTimeUtil.to_date(value, "UTC") is None

    @pytest.mark.parametrize("value, time_zone", [
        (UTC.localize(datetime(1, 1, 1)), "America/New_York"),
        (UTC.localize(datetime.max), "Asia/Tokyo"),
    ])
    def test_out_of_range_after_conversion_returns_none(self, value, time_zone):
        assert DateTimeUtil.to_date(value, time_zone) is None


class TestDifferenceInCalendarDays:
    """Tests for difference_in_calendar_days"""

    def test_counts_day_boundaries_not_24h_periods(self):
        """Two minutes apart across midnight is one calendar day"""
        late = UTC.localize(datetime(2026, 10, 13, 23, 59))
        early = UTC.localize(datetime(2026, 10, 14, 0, 1))

        assert DateTimeUtil.difference_in_calendar_days(late, early) == -1
        assert DateTimeUtil.difference_in_calendar_days(early, late) == 1

    def test_same_day(self):
        morning = UTC.localize(datetime(2026, 10, 14, 0, 0))
        night = UTC.localize(datetime(2026, 10, 14, 23, 59))

        assert DateTimeUtil.difference_in_calendar_days(morning, night) == 0

    def test_across_dst_transition(self):
        """35.5 hours across the fall-back transition are still 2 calendar days"""
        saturday = NEW_YORK.localize(datetime(2026, 10, 31, 23, 30))
        monday = NEW_YORK.localize(datetime(2026, 11, 2, 10, 0))

        assert DateTimeUtil.difference_in_calendar_days(saturday, monday) == -2

    def test_invalid_propagates(self):
        dt = UTC.localize(datetime(2026, 10, 14))

        assert DateTimeUtil.difference_in_calendar_days(None, dt) is None
        assert DateTimeUtil.difference_in_calendar_days(dt, None) is None


class TestTimezoneOffset:
    """Tests for get_timezone_offset_in_milliseconds / sub_milliseconds"""

    def test_east_of_utc_is_negative(self):
        jst_dt = JST.localize(datetime(2026, 10, 14, 4, 30))
        assert DateTimeUtil.get_timezone_offset_in_milliseconds(jst_dt) == -32400000

    def test_west_of_utc_is_positive(self):
        est_dt = NEW_YORK.localize(datetime(2026, 12, 1, 12, 0))
        assert DateTimeUtil.get_timezone_offset_in_milliseconds(est_dt) == 18000000

    def test_utc(self):
        assert DateTimeUtil.get_timezone_offset_in_milliseconds(UTC.localize(datetime(2026, 1, 1))) == 0

    def test_sub_offset_gives_wall_clock_in_utc(self):
        """JST 04:30 -> UTC datetime with the same wall-clock fields"""
        jst_dt = JST.localize(datetime(2026, 10, 14, 4, 30))
        offset = DateTimeUtil.get_timezone_offset_in_milliseconds(jst_dt)
        result = DateTimeUtil.sub_milliseconds(jst_dt, offset)

        assert result == UTC.localize(datetime(2026, 10, 14, 4, 30))

    def test_sub_milliseconds(self):
        dt = UTC.localize(datetime(2026, 10, 14, 0, 0, 1))
        result = DateTimeUtil.sub_milliseconds(dt, 1500)

        assert result == UTC.localize(datetime(2026, 10, 13, 23, 59, 59, 500000))

    def test_sub_offset_at_start_of_range(self):
        """Shifting by the own offset never leaves the datetime range"""
        first_day = datetime(1, 1, 1, tzinfo=pytz.FixedOffset(540))
        offset = DateTimeUtil.get_timezone_offset_in_milliseconds(first_day)

        assert DateTimeUtil.sub_milliseconds(first_day, offset) == UTC.localize(datetime(1, 1, 1))

    def test_sub_milliseconds_out_of_range(self):
        with pytest.raises(InvalidDateError):
            DateTimeUtil.sub_milliseconds(UTC.localize(datetime(1, 1, 1)), 1)


class TestToInteger:
    """Tests for to_integer"""

    @pytest.mark.parametrize("value, expected", [
        (3, 3),
        (3.9, 3),
        (-3.9, -3),
        ("5", 5),
        ("4.7", 4),
        (0, 0),
    ])
    def test_truncates(self, value, expected):
        assert DateTimeUtil.to_integer(value) == expected

    @pytest.mark.parametrize("value", [None, True, "abc", math.nan, math.inf, [1]])
    def test_invalid(self, value):
        assert DateTimeUtil.to_integer(value) is None


class TestWeekHelpers:
    """Week helpers"""

    def test_day_of_week_sunday_first(self):
        assert DateTimeUtil.day_of_week(date(2026, 10, 11)) == 0  # Sunday
        assert DateTimeUtil.day_of_week(date(2026, 10, 14)) == 3  # Wednesday
        assert DateTimeUtil.day_of_week(date(2026, 10, 17)) == 6  # Saturday

    def test_start_of_week(self):
        wednesday = date(2026, 10, 14)

        assert DateTimeUtil.start_of_week(wednesday, 0) == date(2026, 10, 11)
        assert DateTimeUtil.start_of_week(wednesday, 1) == date(2026, 10, 12)
        assert DateTimeUtil.start_of_week(wednesday, 4) == date(2026, 10, 8)

    def test_is_same_week(self):
        sunday = date(2026, 10, 18)
        wednesday = date(2026, 10, 14)

        assert DateTimeUtil.is_same_week(sunday, wednesday, 1)
        assert not DateTimeUtil.is_same_week(sunday, wednesday, 0)

    def test_week_matches_iso_calendar(self):
        """Monday start + first week containing Jan 4 is the ISO week"""
        day = date(2025, 12, 20)
        while day < date(2027, 1, 10):
            assert DateTimeUtil.get_week(day, 1, 4) == day.isocalendar()[1], day
            assert DateTimeUtil.get_week_year(day, 1, 4) == day.isocalendar()[0], day
            day += timedelta(days=1)

    def test_us_week(self):
        """Sunday start, week 1 contains Jan 1"""
        assert DateTimeUtil.get_week(date(2026, 1, 1), 0, 1) == 1
        assert DateTimeUtil.get_week(date(2025, 12, 28), 0, 1) == 1
        assert DateTimeUtil.get_week_year(date(2025, 12, 28), 0, 1) == 2026
        assert DateTimeUtil.get_week(date(2026, 10, 8), 0, 1) == 41

    def test_day_of_year(self):
        assert DateTimeUtil.get_day_of_year(date(2026, 1, 1)) == 1
        assert DateTimeUtil.get_day_of_year(date(2026, 10, 8)) == 281
