#!/usr/bin/env python3
"""
CalendarDate Primitive Type

Immutable calendar-date wrapper around a native datetime. Parses ISO text or
adopts native values, heals unrecognized input to the current instant, and
provides day-granularity comparison and year/month/day arithmetic.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any

from .calendar_math import days_in_month, is_leap_year, normalize, pad_iso_text, to_iso
from .inputs import IsoInput, NativeInput, classify_input

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_ONE_MINUTE = timedelta(minutes=1)


@dataclass(frozen=True)
class CalendarDate:
    """
    Immutable calendar date backed by a native datetime.

    ``date`` is None when the wrapped instant is invalid; every derived field
    (year, month, day, time, iso_string, timezone_offset_minutes) is then None
    as well and the date compares unequal to everything.

    Examples:
        >>> d = make_calendar_date("2024-3-1")
        >>> d.iso_string
        '2024-03-01'
        >>> d.subtract_day(1).iso_string
        '2024-02-29'
        >>> make_calendar_date("yolo").was_healed
        True
    """

    date: datetime | None
    source_text: str = ""
    was_healed: bool = False
    diagnostics: logging.Logger | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.date is None:
            self._logger.warning("CalendarDate does not wrap a valid date")

    # Construction

    @classmethod
    def from_value(cls, value: Any = None, diagnostics: logging.Logger | None = None) -> "CalendarDate":
        """
        Build a CalendarDate from ISO text, a native date or anything else.

        Native values (date, datetime, CalendarDate) are adopted as-is. ISO
        text is zero padded and parsed. Anything else is healed to the
        current instant with ``was_healed`` set. Never raises.

        Args:
            value: ISO string, native date value, or any other object
            diagnostics: Logger receiving warnings (default: module logger)

        Returns:
            CalendarDate object
        """
        parsed = classify_input(value)

        if isinstance(parsed, NativeInput):
            native = parsed.value
            return cls(
                date=native,
                source_text=to_iso(native.year, native.month, native.day),
                diagnostics=diagnostics,
            )

        if isinstance(parsed, IsoInput):
            return cls.from_iso_text(pad_iso_text(parsed.text), diagnostics=diagnostics)

        (diagnostics or logger).debug("Healing unrecognized date input %r to now", parsed.value)
        return cls(date=datetime.now(), source_text="", was_healed=True, diagnostics=diagnostics)

    @classmethod
    def from_iso_text(
        cls,
        iso_text: str,
        diagnostics: logging.Logger | None = None,
        was_healed: bool = False,
    ) -> "CalendarDate":
        """
        Build from canonical YYYY-MM-DD text without checking the year range.

        Days past the end of the month carry into the following month, so
        "2024-02-31" wraps March 2 2024. Text that cannot be parsed at all
        produces an invalid date.
        """
        try:
            year, month, day = (int(part) for part in iso_text.split("-"))
            native = normalize(year, month, day)
        except (ValueError, OverflowError):
            return cls(date=None, source_text="", was_healed=was_healed, diagnostics=diagnostics)
        return cls(date=native, source_text=iso_text, was_healed=was_healed, diagnostics=diagnostics)

    @classmethod
    def today(cls) -> "CalendarDate":
        """Get today's date."""
        return cls.from_value(date.today())

    # Accessors

    @property
    def year(self) -> int | None:
        """Calendar year."""
        return None if self.date is None else self.date.year

    @property
    def month(self) -> int | None:
        """Month of the year, 1-based."""
        return None if self.date is None else self.date.month

    @property
    def day(self) -> int | None:
        """Day of the month, 1-based."""
        return None if self.date is None else self.date.day

    @property
    def time(self) -> int | None:
        """Milliseconds since the Unix epoch (naive dates are local time)."""
        if self.date is None:
            return None
        return (self._aware() - _EPOCH) // _ONE_MILLISECOND

    @property
    def iso_string(self) -> str | None:
        """Zero-padded YYYY-MM-DD computed from year, month and day."""
        if self.date is None:
            return None
        return to_iso(self.date.year, self.date.month, self.date.day)

    @property
    def timezone_offset_minutes(self) -> int | None:
        """
        UTC minus local time, in minutes.

        Positive west of UTC (New York in winter is 300), negative east of it.
        """
        if self.date is None:
            return None
        offset = self._aware().utcoffset()
        return -(offset // _ONE_MINUTE)

    def to_date(self) -> date | None:
        """Get the wrapped value as a datetime.date."""
        return None if self.date is None else self.date.date()

    # Validation

    def is_valid_date_string(self) -> bool:
        """
        Check that the canonical ISO text of this date equals its source text.

        False for healed dates and for ISO input that carried into a different
        calendar date (e.g. "2024-02-31").
        """
        return self.iso_string is not None and self.iso_string == self.source_text

    def is_valid_date(self) -> bool:
        """Check that the wrapped instant is a real calendar date."""
        if self.date is None:
            return False
        month = self.month
        day = self.day
        return 1 <= month <= 12 and 1 <= day <= days_in_month(month, self.year)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return is_leap_year(year)

    @staticmethod
    def days_in_month(month: int, year: int) -> int:
        return days_in_month(month, year)

    # Comparison

    def is_equal(self, other: "CalendarDate") -> bool:
        """Check year, month and day all match, ignoring time."""
        fields = self._fields()
        return fields is not None and fields == other._fields()

    def is_before(self, other: "CalendarDate") -> bool:
        """
        Compare dates by year, then month, then day, ignoring time.

        Note the polarity: this returns True when this date falls
        chronologically AFTER ``other``. Existing callers depend on it; use
        the ``<`` operator for chronological ordering.
        """
        mine, theirs = self._fields(), other._fields()
        if mine is None or theirs is None:
            return False
        year, month, day = mine
        other_year, other_month, other_day = theirs

        if year > other_year:
            return True
        if year == other_year and month > other_month:
            return True
        return year == other_year and month == other_month and day > other_day

    def is_after(self, other: "CalendarDate") -> bool:
        """
        Mirror of is_before: True when this date falls chronologically
        BEFORE ``other``.
        """
        mine, theirs = self._fields(), other._fields()
        if mine is None or theirs is None:
            return False
        year, month, day = mine
        other_year, other_month, other_day = theirs

        if year < other_year:
            return True
        if year == other_year and month < other_month:
            return True
        return year == other_year and month == other_month and day < other_day

    # Arithmetic

    def add_year(self, number: int) -> "CalendarDate":
        """Add years; February 29 carries to March 1 in a non-leap year."""
        return self._shift(years=number)

    def add_month(self, number: int) -> "CalendarDate":
        """Add months; day overflow carries, so 2024-01-31 + 1 is 2024-03-02."""
        return self._shift(months=number)

    def add_day(self, number: int) -> "CalendarDate":
        return self._shift(days=number)

    def subtract_year(self, number: int) -> "CalendarDate":
        return self._shift(years=-number)

    def subtract_month(self, number: int) -> "CalendarDate":
        return self._shift(months=-number)

    def subtract_day(self, number: int) -> "CalendarDate":
        return self._shift(days=-number)

    def _shift(self, years: int = 0, months: int = 0, days: int = 0) -> "CalendarDate":
        if self.date is None:
            return self._rebuild(None)
        try:
            shifted = normalize(self.year + years, self.month + months, self.day + days)
        except (ValueError, OverflowError):
            # _rebuild(None) logs the warning
            return self._rebuild(None)
        return self._rebuild(to_iso(shifted.year, shifted.month, shifted.day))

    def _rebuild(self, iso_text: str | None) -> "CalendarDate":
        if iso_text is None:
            return CalendarDate(date=None, was_healed=self.was_healed, diagnostics=self.diagnostics)
        return CalendarDate.from_iso_text(iso_text, diagnostics=self.diagnostics, was_healed=self.was_healed)

    # Helpers

    @property
    def _logger(self) -> logging.Logger:
        return self.diagnostics or logger

    def _fields(self) -> tuple[int, int, int] | None:
        if self.date is None:
            return None
        return (self.date.year, self.date.month, self.date.day)

    def _aware(self) -> datetime:
        if self.date.tzinfo is not None and self.date.utcoffset() is not None:
            return self.date
        try:
            return self.date.astimezone()
        except (ValueError, OverflowError, OSError):
            # Local conversion near year 1 or 9999 leaves the datetime range.
            # 2000 is a leap year, so February 29 has a reference day.
            reference = datetime(2000, self.date.month, self.date.day)
            offset = reference.astimezone().utcoffset()
            self._logger.debug("Using the %s offset of 2000 for %s", offset, self.iso_string)
            return self.date.replace(tzinfo=timezone(offset))

    def __str__(self) -> str:
        """String representation."""
        return self.iso_string or "Invalid Date"

    def __eq__(self, other: object) -> bool:
        """Check equality at day granularity."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self._fields())

    def __lt__(self, other: "CalendarDate") -> bool:
        """Chronologically earlier."""
        return self._ordered(other, lambda a, b: a < b)

    def __le__(self, other: "CalendarDate") -> bool:
        return self._ordered(other, lambda a, b: a <= b)

    def __gt__(self, other: "CalendarDate") -> bool:
        """Chronologically later."""
        return self._ordered(other, lambda a, b: a > b)

    def __ge__(self, other: "CalendarDate") -> bool:
        return self._ordered(other, lambda a, b: a >= b)

    def _ordered(self, other: object, compare: Any) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        mine, theirs = self._fields(), other._fields()
        if mine is None or theirs is None:
            return False
        return compare(mine, theirs)

    def __repr__(self) -> str:
        """Repr format."""
        return f"CalendarDate(date={self.date!r})"


def make_calendar_date(value: Any = None, diagnostics: logging.Logger | None = None) -> CalendarDate:
    """
    Create a CalendarDate from ISO text, a native date value, or anything else.

    Unrecognized input (None, numbers, non-ISO strings) is healed to now.
    """
    return CalendarDate.from_value(value, diagnostics=diagnostics)
