"""
Relative date formatting

Represents a date in words relative to a base date:

| Distance to the base date | Result (en-US)           |
|---------------------------|--------------------------|
| Previous 6 days           | last Sunday at 4:30 AM   |
| Last day                  | yesterday at 4:30 AM     |
| Same day                  | today at 4:30 AM         |
| Next day                  | tomorrow at 4:30 AM      |
| Next 6 days               | Sunday at 4:30 AM        |
| Other                     | 12/31/2017               |
"""
import logging
from dataclasses import replace
from typing import Any

from reldate.default_options import DefaultsSource, resolve_defaults
from reldate.domain.models import FormatOptions, RelativeToken
from reldate.errors import InvalidDateError
from reldate.formatters.date_formatter import (
    DateFormatter,
    OptionsLike,
    ResolvedOptions,
    coerce_options,
    resolve_options,
)
from reldate.utils.datetime_util import DateTimeUtil
from reldate.utils.validation import MISSING, assert_locale_capabilities, required_args

logger = logging.getLogger(__name__)


def _render_options(
    options: OptionsLike, resolved: ResolvedOptions, defaults: DefaultsSource
) -> ResolvedOptions:
    """
    Options for rendering the locale's pattern.

    The resolved locale counts as passed explicitly, so its own
    first_week_contains_date outranks the default options.
    """
    first_week_contains_date = coerce_options(options).first_week_contains_date
    if first_week_contains_date is None:
        locale_options = getattr(resolved.locale, "options", None)
        first_week_contains_date = getattr(locale_options, "first_week_contains_date", None)
    if first_week_contains_date is None:
        first_week_contains_date = resolve_defaults(defaults).first_week_contains_date
    if first_week_contains_date is None:
        return resolved
    return replace(
        resolved, first_week_contains_date=DateTimeUtil.to_integer(first_week_contains_date)
    )


def format_relative(
    date: Any = MISSING,
    base_date: Any = MISSING,
    options: OptionsLike = None,
    *,
    defaults: DefaultsSource = None,
) -> str:
    """
    Represent the date in words relative to the given base date.

    Args:
        date: the date to format (datetime, date, Unix timestamp or ISO string)
        base_date: the date to compare with
        options: FormatOptions or mapping with locale / week_starts_on /
            time_zone
        defaults: DefaultOptionsProvider or DefaultOptions to fall back to
            (the module-level defaults when omitted)

    Returns:
        the date in words

    Raises:
        ArgumentCountError: date or base_date missing
        LocaleCapabilityError: locale lacks localize / formatLong / formatRelative
        InvalidDateError: date or base_date is not a valid date
        WeekOptionRangeError: week_starts_on out of range

    Example:
        # base date is a Wednesday
        format_relative(wednesday - timedelta(days=6), wednesday)
        # => "last Thursday at 12:45 AM"
    """
    required_args(2, (date, base_date))

    resolved = resolve_options(options, defaults)

    local_date = DateTimeUtil.to_date(date, resolved.time_zone)
    local_base_date = DateTimeUtil.to_date(base_date, resolved.time_zone)

    locale = resolved.locale
    assert_locale_capabilities(locale, ("localize", "format_long", "format_relative"))

    diff = DateTimeUtil.difference_in_calendar_days(local_date, local_base_date)
    if diff is None:
        raise InvalidDateError()

    token = RelativeToken.from_difference(diff)
    logger.debug(f"Relative token: diff={diff} -> {token.value}")

    utc_date = DateTimeUtil.sub_milliseconds(
        local_date, DateTimeUtil.get_timezone_offset_in_milliseconds(local_date)
    )
    utc_base_date = DateTimeUtil.sub_milliseconds(
        local_base_date, DateTimeUtil.get_timezone_offset_in_milliseconds(local_base_date)
    )

    format_str = locale.format_relative(
        token,
        utc_date,
        utc_base_date,
        FormatOptions(locale=locale, week_starts_on=resolved.week_starts_on),
    )

    return DateFormatter(_render_options(options, resolved, defaults)).format(local_date, format_str)
