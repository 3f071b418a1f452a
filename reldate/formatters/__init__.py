"""
Formatters module.
"""
from .date_formatter import DateFormatter, format_date
from .relative_formatter import format_relative

__all__ = ['DateFormatter', 'format_date', 'format_relative']
