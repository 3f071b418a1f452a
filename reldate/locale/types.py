"""
Locale capability bundle

A Locale carries three capabilities used by the formatters:
- localize: names of eras, quarters, months, weekdays, day periods and ordinals
- format_long: the patterns behind the P / p long-format tokens
- format_relative: token -> pattern mapping used by format_relative
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union

from reldate.domain.models import FormatOptions, RelativeToken

# Relative pattern: fixed string, or a function of (utc_date, utc_base_date, options)
RelativePattern = Union[str, Callable[[datetime, datetime, FormatOptions], str]]
FormatRelativeFn = Callable[[RelativeToken, datetime, datetime, FormatOptions], str]


@dataclass(frozen=True)
class LocaleOptions:
    """Week conventions of a locale."""
    week_starts_on: Optional[int] = None
    first_week_contains_date: Optional[int] = None


class Localize:
    """
    Localized names for pattern tokens.

    Each table maps a width ("narrow", "short", "abbreviated", "wide") to a
    list of names indexed by value. A missing width falls back to the
    default width of that table.
    """

    def __init__(
        self,
        ordinal_number: Callable[[int, Optional[str]], str],
        eras: Dict[str, List[str]],
        quarters: Dict[str, List[str]],
        months: Dict[str, List[str]],
        days: Dict[str, List[str]],
        day_periods: Dict[str, Dict[str, str]],
        default_width: str = "wide",
    ):
        self._ordinal_number = ordinal_number
        self.eras = eras
        self.quarters = quarters
        self.months = months
        self.days = days
        self.day_periods = day_periods
        self.default_width = default_width

    def ordinal_number(self, number: int, unit: Optional[str] = None) -> str:
        return self._ordinal_number(number, unit)

    def era(self, value: int, width: str = "abbreviated") -> str:
        return self._pick(self.eras, width)[value]

    def quarter(self, value: int, width: str = "wide") -> str:
        """value is 1-4."""
        return self._pick(self.quarters, width)[value - 1]

    def month(self, value: int, width: str = "wide") -> str:
        """value is 0-11."""
        return self._pick(self.months, width)[value]

    def day(self, value: int, width: str = "wide") -> str:
        """value is 0-6, Sunday first."""
        return self._pick(self.days, width)[value]

    def day_period(self, value: str, width: str = "abbreviated") -> str:
        """value is "am" or "pm"."""
        return self._pick(self.day_periods, width)[value]

    def _pick(self, table: dict, width: str):
        if width in table:
            return table[width]
        return table[self.default_width]


class FormatLong:
    """Long-format patterns by width ("full", "long", "medium", "short")."""

    def __init__(
        self,
        date_formats: Dict[str, str],
        time_formats: Dict[str, str],
        date_time_formats: Dict[str, str],
        default_width: str = "full",
    ):
        self.date_formats = date_formats
        self.time_formats = time_formats
        self.date_time_formats = date_time_formats
        self.default_width = default_width

    def date(self, width: str = "full") -> str:
        return self.date_formats.get(width, self.date_formats[self.default_width])

    def time(self, width: str = "full") -> str:
        return self.time_formats.get(width, self.time_formats[self.default_width])

    def date_time(self, width: str = "full") -> str:
        return self.date_time_formats.get(width, self.date_time_formats[self.default_width])


def build_format_relative(patterns: Dict[RelativeToken, RelativePattern]) -> FormatRelativeFn:
    """Turn a token -> pattern table into a format_relative capability."""

    def format_relative(
        token: RelativeToken,
        utc_date: datetime,
        utc_base_date: datetime,
        options: FormatOptions,
    ) -> str:
        pattern = patterns[token]
        if callable(pattern):
            return pattern(utc_date, utc_base_date, options)
        return pattern

    return format_relative


@dataclass(frozen=True)
class Locale:
    """
    Locale capability bundle.

    Capabilities are optional at construction time; the formatters check
    for the ones they need and raise LocaleCapabilityError.
    """
    code: str
    localize: Optional[Localize] = None
    format_long: Optional[FormatLong] = None
    format_relative: Optional[FormatRelativeFn] = None
    options: LocaleOptions = field(default_factory=LocaleOptions)
