"""
Domain models

Relative tokens and the options record shared by the formatters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class RelativeToken(Enum):
    """Distance of a date from its base date, in calendar days."""
    OTHER = "other"            # more than 6 days away
    LAST_WEEK = "lastWeek"     # 2 to 6 days before
    YESTERDAY = "yesterday"    # 1 day before
    TODAY = "today"            # same day
    TOMORROW = "tomorrow"      # 1 day after
    NEXT_WEEK = "nextWeek"     # 2 to 6 days after

    @classmethod
    def from_difference(cls, diff: Union[int, float]) -> "RelativeToken":
        """
        Classify a calendar-day difference.

        The checks run in order and the first match wins, so a fractional
        difference lands in the first bucket whose upper bound it is below.

        Args:
            diff: calendar days from the base date to the date (negative = past)

        Returns:
            RelativeToken
        """
        if diff < -6:
            return cls.OTHER
        elif diff < -1:
            return cls.LAST_WEEK
        elif diff < 0:
            return cls.YESTERDAY
        elif diff < 1:
            return cls.TODAY
        elif diff < 2:
            return cls.TOMORROW
        elif diff < 7:
            return cls.NEXT_WEEK
        else:
            return cls.OTHER


@dataclass(frozen=True)
class FormatOptions:
    """
    Options accepted by format_date and format_relative.

    Every field is optional. Unset fields fall back to the default options
    and then to the locale.
    """
    locale: Optional[Any] = None
    week_starts_on: Optional[Any] = None
    first_week_contains_date: Optional[Any] = None
    time_zone: Optional[Any] = None  # pytz zone or zone name
