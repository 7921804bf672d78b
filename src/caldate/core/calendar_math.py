#!/usr/bin/env python3
"""
Calendar Arithmetic Helpers

Gregorian leap year rule, month lengths, zero-padded ISO text and carry
normalization of out-of-range calendar fields.
"""

from datetime import datetime, timedelta

_THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def is_leap_year(year: int) -> bool:
    """Check if year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """
    Get the number of days in a month of a specific year.

    Args:
        month: Month of the year (1-12)
        year: Year the month belongs to

    Returns:
        28-31 depending on month and leap year
    """
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def pad_iso_text(text: str) -> str:
    """
    Add a leading zero to single-digit segments of a YYYY-M-D string.

    Text that already has the canonical length of 10 is returned unchanged.
    """
    if len(text) == 10:
        return text
    return "-".join(f"0{item}" if len(item) == 1 else item for item in text.split("-"))


def to_iso(year: int, month: int, day: int) -> str:
    """Format calendar fields as YYYY-MM-DD."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def normalize(year: int, month: int, day: int) -> datetime:
    """
    Build midnight of the given calendar fields, carrying overflow.

    Month overflow carries into the year (month 13 is January of the next
    year, month 0 is December of the previous one). Day overflow carries into
    the month (February 31 2024 is March 2 2024, day 0 is the last day of the
    previous month).

    Raises:
        ValueError: If the carried year is outside 1-9999
        OverflowError: If the day carry leaves the representable range
    """
    carry, month_index = divmod(month - 1, 12)
    first_of_month = datetime(year + carry, month_index + 1, 1)
    return first_of_month + timedelta(days=day - 1)
