#!/usr/bin/env python3
"""
Date CLI - Inspect, Shift and Compare Calendar Dates

Command-line access to CalendarDate parsing, validation, comparison and
arithmetic.
"""

import click

from ..core import calendar_math
from ..core.dates import CalendarDate, make_calendar_date


def _load(ctx: click.Context, value: str, strict: bool | None) -> CalendarDate:
    """Parse VALUE, rejecting healed input when strict mode is on."""
    if strict is None:
        strict = ctx.obj["config"].strict if ctx.obj else False

    parsed = make_calendar_date(value)
    if parsed.was_healed and strict:
        raise click.BadParameter(f"Not an ISO date (YYYY-MM-DD): {value}", param_hint="VALUE")
    return parsed


@click.command()
@click.argument("value")
@click.option("--strict/--no-strict", default=None, help="Reject input that would be healed to today")
@click.pass_context
def parse(ctx: click.Context, value: str, strict: bool | None) -> None:
    """
    Show the calendar fields and validity of a date.

    Examples:
      caldate parse 2024-2-29
      caldate parse 2024-02-31
    """
    parsed = _load(ctx, value, strict)

    click.echo(f"ISO: {parsed}")
    click.echo(f"Year: {parsed.year}")
    click.echo(f"Month: {parsed.month}")
    click.echo(f"Day: {parsed.day}")
    click.echo(f"Valid Date: {parsed.is_valid_date()}")
    click.echo(f"Valid Date String: {parsed.is_valid_date_string()}")
    click.echo(f"Healed: {parsed.was_healed}")

    if ctx.obj.get("verbose", False):
        click.echo(f"Source Text: {parsed.source_text!r}")
        click.echo(f"Time (ms): {parsed.time}")
        click.echo(f"Timezone Offset (min): {parsed.timezone_offset_minutes}")


@click.command()
@click.argument("value")
@click.option("--years", type=int, default=0, help="Years to add (negative subtracts)")
@click.option("--months", type=int, default=0, help="Months to add (negative subtracts)")
@click.option("--days", type=int, default=0, help="Days to add (negative subtracts)")
@click.option("--strict/--no-strict", default=None, help="Reject input that would be healed to today")
@click.pass_context
def shift(ctx: click.Context, value: str, years: int, months: int, days: int, strict: bool | None) -> None:
    """
    Shift a date by years, then months, then days.

    Overflow carries into the next field, so a month added to January 31
    lands in early March.

    Examples:
      caldate shift 2024-01-31 --months 1
      caldate shift 2024-03-01 --days -1
    """
    result = _load(ctx, value, strict)

    result = result.add_year(years) if years >= 0 else result.subtract_year(-years)
    result = result.add_month(months) if months >= 0 else result.subtract_month(-months)
    result = result.add_day(days) if days >= 0 else result.subtract_day(-days)

    if not result.is_valid_date():
        raise click.ClickException(f"Shifting {value} leaves the supported date range")

    click.echo(str(result))


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """
    Compare two dates chronologically, ignoring time of day.

    Example:
      caldate compare 2024-01-01 2023-12-31
    """
    a = make_calendar_date(first)
    b = make_calendar_date(second)

    if a == b:
        relation = "equal to"
    elif a < b:
        relation = "earlier than"
    else:
        relation = "later than"

    click.echo(f"{a} is {relation} {b}")


@click.command()
@click.argument("year", type=int)
def leap(year: int) -> None:
    """Tell whether YEAR is a leap year."""
    if calendar_math.is_leap_year(year):
        click.echo(f"{year} is a leap year")
    else:
        click.echo(f"{year} is not a leap year")


@click.command(name="days-in-month")
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("year", type=int)
def days_in_month(month: int, year: int) -> None:
    """Print the number of days in MONTH of YEAR."""
    click.echo(calendar_math.days_in_month(month, year))
