"""
Core Package

The CalendarDate value type and the helpers it is built from.

This package provides:
- CalendarDate, an immutable date wrapper with healing, validation,
  comparison and arithmetic
- Gregorian calendar helpers (leap years, month lengths, carry normalization)
- Classification of constructor input into ISO text, native values or
  unrecognized input
- Configuration management for environment-specific settings
"""

from .calendar_math import days_in_month, is_leap_year, normalize, pad_iso_text, to_iso
from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .dates import CalendarDate, make_calendar_date
from .inputs import (
    DateInput,
    IsoInput,
    NativeInput,
    UnrecognizedInput,
    classify_input,
    is_iso,
    is_native,
)

__all__ = [
    "CalendarDate",
    # Configuration
    "Config",
    "DateInput",
    "Environment",
    "IsoInput",
    "NativeInput",
    "UnrecognizedInput",
    "classify_input",
    # Calendar helpers
    "days_in_month",
    "get_config",
    "is_development",
    "is_iso",
    "is_leap_year",
    "is_native",
    "is_production",
    "is_test",
    "make_calendar_date",
    "normalize",
    "pad_iso_text",
    "reload_config",
    "to_iso",
]
