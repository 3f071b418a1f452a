"""
Date formatting with pattern strings.

Patterns follow the Unicode (CLDR) style: "MM/dd/yyyy", "EEEE 'at' p",
"PPpp". Text in single quotes is literal, '' is a quote character.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional, Union

from reldate.default_options import DefaultsSource, resolve_defaults
from reldate.domain.models import FormatOptions
from reldate.errors import FormatPatternError, InvalidDateError, WeekOptionRangeError
from reldate.formatters.long_formatters import expand_long_formats
from reldate.formatters.token_formatters import FORMATTERS, FormatContext
from reldate.locale import DEFAULT_LOCALE, Locale
from reldate.utils.datetime_util import DateTimeUtil
from reldate.utils.validation import MISSING, assert_locale_capabilities, required_args

logger = logging.getLogger(__name__)

FORMATTING_TOKENS_RE = re.compile(
    r"[yYQqMLwIdDecihHKkms]o|(\w)\1*|''|'(''|[^'])+('|$)|.", re.S | re.ASCII
)
ESCAPED_STRING_RE = re.compile(r"^'(.*?)'?$", re.S)
UNESCAPED_LATIN_RE = re.compile(r"[a-zA-Z]")

OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ResolvedOptions:
    """Options after falling back to defaults and the locale."""
    locale: Locale
    week_starts_on: Optional[int]
    first_week_contains_date: Optional[int]
    time_zone: tzinfo


def coerce_options(options: OptionsLike) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions(**options)


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve_options(options: OptionsLike, defaults: DefaultsSource = None) -> ResolvedOptions:
    """
    Resolve locale, week settings and time zone.

    Priority for week settings: explicit option -> explicitly passed
    locale's own setting -> default options -> default locale's setting.
    Week settings are truncated to integers here but range-checked by
    the formatter.
    """
    options = coerce_options(options)
    default_options = resolve_defaults(defaults)

    explicit_locale_options = getattr(options.locale, "options", None)
    default_locale_options = getattr(default_options.locale, "options", None)

    locale = _first_set(options.locale, default_options.locale, DEFAULT_LOCALE)
    week_starts_on = DateTimeUtil.to_integer(_first_set(
        options.week_starts_on,
        getattr(explicit_locale_options, "week_starts_on", None),
        default_options.week_starts_on,
        getattr(default_locale_options, "week_starts_on", None),
        0,
    ))
    first_week_contains_date = DateTimeUtil.to_integer(_first_set(
        options.first_week_contains_date,
        getattr(explicit_locale_options, "first_week_contains_date", None),
        default_options.first_week_contains_date,
        getattr(default_locale_options, "first_week_contains_date", None),
        1,
    ))
    time_zone = DateTimeUtil.get_time_zone(_first_set(options.time_zone, default_options.time_zone))

    return ResolvedOptions(
        locale=locale,
        week_starts_on=week_starts_on,
        first_week_contains_date=first_week_contains_date,
        time_zone=time_zone,
    )


def clean_escaped_string(value: str) -> str:
    match = ESCAPED_STRING_RE.match(value)
    if not match:
        return value
    return match.group(1).replace("''", "'")


class DateFormatter:
    """Renders dates against pattern strings for one set of resolved options."""

    def __init__(self, resolved: ResolvedOptions):
        first_week_contains_date = resolved.first_week_contains_date
        if first_week_contains_date is None or not 1 <= first_week_contains_date <= 7:
            raise WeekOptionRangeError("firstWeekContainsDate", 1, 7)

        week_starts_on = resolved.week_starts_on
        if week_starts_on is None or not 0 <= week_starts_on <= 6:
            raise WeekOptionRangeError("weekStartsOn", 0, 6)

        assert_locale_capabilities(resolved.locale, ("localize", "format_long"))

        self.locale = resolved.locale
        self.time_zone = resolved.time_zone
        self.context = FormatContext(
            localize=resolved.locale.localize,
            week_starts_on=week_starts_on,
            first_week_contains_date=first_week_contains_date,
        )

    def format(self, value: Any, format_str: str) -> str:
        """
        Render a date.

        Args:
            value: date-like input (see DateTimeUtil.to_date)
            format_str: pattern string

        Returns:
            rendered string

        Raises:
            InvalidDateError: value is not a valid date
            FormatPatternError: pattern has an unescaped unsupported letter
        """
        local_dt = DateTimeUtil.to_date(value, self.time_zone)
        if local_dt is None:
            raise InvalidDateError()

        expanded = expand_long_formats(format_str, self.locale.format_long)
        if expanded != format_str:
            logger.debug(f"Long formats expanded: {format_str!r} -> {expanded!r}")
        return "".join(
            self._render_token(local_dt, match.group(0))
            for match in FORMATTING_TOKENS_RE.finditer(expanded)
        )

    def _render_token(self, local_dt: datetime, token: str) -> str:
        if token == "''":
            return "'"

        first_character = token[0]
        if first_character == "'":
            return clean_escaped_string(token)

        formatter = FORMATTERS.get(first_character)
        if formatter:
            return formatter(local_dt, token, self.context)

        if UNESCAPED_LATIN_RE.match(first_character):
            raise FormatPatternError(first_character)

        return token


def format_date(
    date: Any = MISSING,
    format_str: Any = MISSING,
    options: OptionsLike = None,
    *,
    defaults: DefaultsSource = None,
) -> str:
    """
    Format a date with a pattern string.

    Args:
        date: date-like input
        format_str: pattern string ("MM/dd/yyyy", "PPpp", ...)
        options: FormatOptions or mapping with locale / week_starts_on /
            first_week_contains_date / time_zone
        defaults: DefaultOptionsProvider or DefaultOptions to fall back to
            (the module-level defaults when omitted)

    Returns:
        rendered string

    Raises:
        ArgumentCountError: date or format_str missing
        WeekOptionRangeError: week settings out of range
        LocaleCapabilityError: locale lacks localize / formatLong
        InvalidDateError: date is not a valid date
        FormatPatternError: unescaped unsupported letter in the pattern
    """
    required_args(2, (date, format_str))
    resolved = resolve_options(options, defaults)
    return DateFormatter(resolved).format(date, str(format_str))
