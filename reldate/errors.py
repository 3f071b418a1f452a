"""
Exception classes for reldate.

Every error is raised immediately to the caller. Nothing here is retried.
"""


class RelDateError(Exception):
    """Base class for all reldate errors."""


class ArgumentCountError(RelDateError, TypeError):
    """Raised when a function is called with too few positional arguments."""

    def __init__(self, required: int, present: int):
        self.required = required
        self.present = present
        plural = "s" if required > 1 else ""
        super().__init__(f"{required} argument{plural} required, but only {present} present")


class InvalidDateError(RelDateError, ValueError):
    """Raised when a date cannot be used because it is invalid."""

    def __init__(self, message: str = "Invalid time value"):
        super().__init__(message)


class LocaleCapabilityError(RelDateError, ValueError):
    """Raised when a locale lacks one of its required capabilities."""

    def __init__(self, capability: str):
        self.capability = capability
        super().__init__(f"locale must contain {capability} property")


class WeekOptionRangeError(RelDateError, ValueError):
    """Raised when weekStartsOn or firstWeekContainsDate is out of range."""

    def __init__(self, option: str, lower: int, upper: int):
        self.option = option
        super().__init__(f"{option} must be between {lower} and {upper} inclusively")


class FormatPatternError(RelDateError, ValueError):
    """Raised when a pattern string contains an unescaped unsupported letter."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(
            f"Format string contains an unescaped latin alphabet character `{character}`"
        )


class UnknownLocaleError(RelDateError, LookupError):
    """Raised when a locale code is not registered."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown locale: {code}")
