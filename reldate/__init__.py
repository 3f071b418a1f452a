"""
reldate: dates in words relative to a base date.

    format_relative(date, base_date)  # "last Thursday at 12:45 AM"
"""
from .default_options import (
    DefaultOptions,
    DefaultOptionsProvider,
    get_default_options,
    reset_default_options,
    set_default_options,
)
from .domain.models import FormatOptions, RelativeToken
from .errors import (
    ArgumentCountError,
    FormatPatternError,
    InvalidDateError,
    LocaleCapabilityError,
    RelDateError,
    UnknownLocaleError,
    WeekOptionRangeError,
)
from .formatters import format_date, format_relative
from .locale import Locale, get_locale

__all__ = [
    'ArgumentCountError',
    'DefaultOptions',
    'DefaultOptionsProvider',
    'FormatOptions',
    'FormatPatternError',
    'InvalidDateError',
    'Locale',
    'LocaleCapabilityError',
    'RelDateError',
    'RelativeToken',
    'UnknownLocaleError',
    'WeekOptionRangeError',
    'format_date',
    'format_relative',
    'get_default_options',
    'get_locale',
    'reset_default_options',
    'set_default_options',
]
