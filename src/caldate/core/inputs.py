#!/usr/bin/env python3
"""
Date Input Classification

Resolves arbitrary constructor input into exactly one of three tagged cases
(ISO text, native instant, unrecognized) before any date is built.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

ISO_DATE_PATTERN = re.compile(
    r"[12][0-9]{3}-(0?[1-9]|1[0-2])-(0?[1-9]|[12][0-9]|3[01])",
)


@dataclass(frozen=True)
class IsoInput:
    """ISO calendar-date text matching the YYYY-MM-DD grammar."""

    text: str


@dataclass(frozen=True)
class NativeInput:
    """An already-constructed native instant."""

    value: datetime


@dataclass(frozen=True)
class UnrecognizedInput:
    """Anything that is neither ISO text nor a native instant."""

    value: Any


DateInput = IsoInput | NativeInput | UnrecognizedInput


def is_iso(value: Any) -> bool:
    """
    Check if value is an ISO calendar-date string.

    Examples:
        >>> is_iso("2018-12-10")
        True
        >>> is_iso("2018-1-5")
        True
        >>> is_iso("10.12.2018")
        False
        >>> is_iso("yolo")
        False
    """
    if not isinstance(value, str) or value == "":
        return False
    return ISO_DATE_PATTERN.fullmatch(value) is not None


def is_native(value: Any) -> bool:
    """Check if value is a native date, datetime or a valid CalendarDate."""
    return _as_native(value) is not None


def classify_input(value: Any) -> DateInput:
    """Resolve constructor input, preferring native values over ISO text."""
    native = _as_native(value)
    if native is not None:
        return NativeInput(native)
    if is_iso(value):
        return IsoInput(value)
    return UnrecognizedInput(value)


def _as_native(value: Any) -> datetime | None:
    from .dates import CalendarDate

    if isinstance(value, CalendarDate):
        return value.date
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return None
