"""
Boundary checks shared by the public functions.
"""

from typing import Any, Iterable, Sequence

from reldate.errors import ArgumentCountError, LocaleCapabilityError

# Sentinel for "argument not passed" (None is a value and counts as passed)
MISSING = object()


def required_args(required: int, args: Sequence[Any]) -> None:
    """
    Check that the first `required` positional arguments were passed.

    Raises:
        ArgumentCountError: fewer arguments than required
    """
    present = sum(1 for arg in args if arg is not MISSING)
    if present < required:
        raise ArgumentCountError(required, present)


# Attribute name on Locale -> name used in error messages
LOCALE_CAPABILITIES = {
    "localize": "localize",
    "format_long": "formatLong",
    "format_relative": "formatRelative",
}


def assert_locale_capabilities(locale: Any, capabilities: Iterable[str]) -> None:
    """
    Check each capability independently, in the given order.

    Raises:
        LocaleCapabilityError: the first missing capability
    """
    for attr in capabilities:
        if not getattr(locale, attr, None):
            raise LocaleCapabilityError(LOCALE_CAPABILITIES[attr])
