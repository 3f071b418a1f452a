"""utils package"""
from .datetime_util import DateTimeUtil, UTC
from .validation import MISSING, required_args, assert_locale_capabilities

__all__ = [
    'DateTimeUtil',
    'UTC',
    'MISSING',
    'required_args',
    'assert_locale_capabilities',
]
