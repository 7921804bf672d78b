"""
caldate - Calendar Date Value Type

A small calendar-date wrapper: parse ISO text or native dates, heal
unrecognized input to today, validate, compare at day granularity and shift
by years, months and days.

Domain Packages:
- core: CalendarDate, calendar helpers, input classification, configuration
- cli: Command-line interface

Example Usage:
    from caldate import make_calendar_date

    d = make_calendar_date("2024-1-31")
    d.iso_string              # '2024-01-31'
    d.add_month(1).iso_string  # '2024-03-02'

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "caldate contributors"

from .core.calendar_math import days_in_month, is_leap_year
from .core.config import Environment, get_config
from .core.dates import CalendarDate, make_calendar_date

__all__ = [
    # Value type
    "CalendarDate",
    "make_calendar_date",

    # Calendar helpers
    "days_in_month",
    "is_leap_year",

    # Configuration
    "get_config",
    "Environment",
]
