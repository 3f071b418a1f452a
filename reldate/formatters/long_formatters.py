"""
Long-format expansion

P / PP / PPP / PPPP  -> locale date pattern (short / medium / long / full)
p / pp / ppp / pppp  -> locale time pattern
Pp, PPpp, ...        -> locale date-time pattern with both substituted
"""

import re

from reldate.locale.types import FormatLong

LONG_FORMATTING_TOKENS_RE = re.compile(r"P+p+|P+|p+|''|'(''|[^'])+('|$)|.", re.S)

WIDTHS = {1: "short", 2: "medium", 3: "long"}


def _width(pattern: str) -> str:
    return WIDTHS.get(len(pattern), "full")


def date_long_formatter(pattern: str, format_long: FormatLong) -> str:
    return format_long.date(_width(pattern))


def time_long_formatter(pattern: str, format_long: FormatLong) -> str:
    return format_long.time(_width(pattern))


def date_time_long_formatter(pattern: str, format_long: FormatLong) -> str:
    match = re.match(r"(P+)(p+)?", pattern)
    date_pattern, time_pattern = match.group(1), match.group(2)
    if not time_pattern:
        return date_long_formatter(pattern, format_long)

    date_time_format = format_long.date_time(_width(date_pattern))
    return (
        date_time_format
        .replace("{{date}}", date_long_formatter(date_pattern, format_long))
        .replace("{{time}}", time_long_formatter(time_pattern, format_long))
    )


def expand_long_formats(format_str: str, format_long: FormatLong) -> str:
    """Replace every P / p run in format_str with the locale's pattern."""

    def expand(match: re.Match) -> str:
        substring = match.group(0)
        if substring[0] == "P":
            return date_time_long_formatter(substring, format_long)
        if substring[0] == "p":
            return time_long_formatter(substring, format_long)
        return substring

    return LONG_FORMATTING_TOKENS_RE.sub(expand, format_str)
