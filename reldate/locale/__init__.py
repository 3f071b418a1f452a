"""
Locales

Registry of the bundled locales. en-US is the default.
"""
from typing import Dict

from reldate.errors import UnknownLocaleError
from .types import FormatLong, Locale, LocaleOptions, Localize, build_format_relative
from .en_us import en_US
from .en_gb import en_GB
from .it import it

DEFAULT_LOCALE = en_US

LOCALES: Dict[str, Locale] = {
    "en-us": en_US,
    "en-gb": en_GB,
    "it": it,
}


def get_locale(code: str) -> Locale:
    """
    Look up a bundled locale by code.

    Codes are case-insensitive and accept "_" in place of "-" (en_GB).

    Raises:
        UnknownLocaleError: code not registered
    """
    key = code.strip().lower().replace("_", "-")
    if key not in LOCALES:
        raise UnknownLocaleError(code)
    return LOCALES[key]


__all__ = [
    'DEFAULT_LOCALE',
    'FormatLong',
    'Locale',
    'LocaleOptions',
    'Localize',
    'build_format_relative',
    'en_US',
    'en_GB',
    'it',
    'get_locale',
]
