"""
Process-wide default options

Fallback source for locale, week settings and time zone when a call does
not pass them. The initial values come from config (environment / .env).
Tests inject their own DefaultOptionsProvider instead of mutating the
module-level one.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from reldate.config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultOptions:
    """Default values for FormatOptions fields."""
    locale: Optional[Any] = None
    week_starts_on: Optional[int] = None
    first_week_contains_date: Optional[int] = None
    time_zone: Optional[Any] = None

    @classmethod
    def from_config(cls) -> "DefaultOptions":
        from reldate.locale import get_locale

        return cls(
            locale=get_locale(config.DEFAULT_LOCALE),
            week_starts_on=config.WEEK_STARTS_ON,
            first_week_contains_date=config.FIRST_WEEK_CONTAINS_DATE,
            time_zone=config.TIME_ZONE,
        )


class DefaultOptionsProvider:
    """
    Holder for the current DefaultOptions.

    Values are immutable; set() swaps in a new DefaultOptions, so readers
    never observe a half-updated record.
    """

    def __init__(self, initial: Optional[DefaultOptions] = None):
        # None = build from config on first read
        self._initial = initial
        self._options = initial

    def get(self) -> DefaultOptions:
        if self._options is None:
            self._options = DefaultOptions.from_config()
            logger.debug(f"Default options loaded from config: {self._options}")
        return self._options

    def set(self, **changes) -> DefaultOptions:
        """Replace the given fields. Unknown field names raise TypeError."""
        self._options = replace(self.get(), **changes)
        return self._options

    def reset(self) -> None:
        self._options = self._initial


_provider = DefaultOptionsProvider()

DefaultsSource = Union[DefaultOptionsProvider, DefaultOptions, None]


def get_default_options() -> DefaultOptions:
    return _provider.get()


def set_default_options(**changes) -> DefaultOptions:
    return _provider.set(**changes)


def reset_default_options() -> None:
    _provider.reset()


def resolve_defaults(defaults: DefaultsSource = None) -> DefaultOptions:
    """Current defaults from an injected provider/record, or the module provider."""
    if defaults is None:
        return _provider.get()
    if isinstance(defaults, DefaultOptionsProvider):
        return defaults.get()
    return defaults
