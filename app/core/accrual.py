"""
Salary Accrual Math
===================
Pure functions shared by every salary proration in the app.

Proration law:
    accrued = yearly_amount / days_in_year * days

where `days` is the inclusive number of calendar days the period overlaps
the requested window, never negative.

Examples:
    >>> prorate(Decimal("365000"), 365, date(2025, 1, 1), None, None, date(2025, 1, 10))
    Decimal('10000')
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")


def is_leap_year(year: int) -> bool:
    """True when February 29 exists in `year`."""
    try:
        date(year, 2, 29)
    except ValueError:
        return False
    return True


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def effective_end(end_date: Optional[date], next_start: Optional[date]) -> Optional[date]:
    """
    Last day a period can accrue on its own.

    The earlier of the period's own end_date and the day before the next
    period of the same employee starts. None means open-ended.
    """
    candidates = [d for d in (end_date, next_start - timedelta(days=1) if next_start else None) if d]
    return min(candidates) if candidates else None


def accrual_days(
    start_date: date,
    end_date: Optional[date],
    window_start: Optional[date],
    window_end: date,
) -> int:
    """
    Inclusive day count of [start_date, end_date] inside [window_start, window_end].

    end_date=None means the period runs through window_end.
    window_start=None means the window has no lower bound.
    Spans that end before they start count as 0.
    """
    first = start_date if window_start is None else max(start_date, window_start)
    last = window_end if end_date is None else min(end_date, window_end)
    return max(0, (last - first).days + 1)


def prorate(
    yearly_amount,
    days_in_year: int,
    start_date: date,
    end_date: Optional[date],
    window_start: Optional[date],
    window_end: date,
) -> Decimal:
    """Amount accrued by one salary period inside the window (not rounded)."""
    days = accrual_days(start_date, end_date, window_start, window_end)
    if days == 0:
        return Decimal("0")
    return Decimal(str(yearly_amount)) / Decimal(days_in_year) * days


def to_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
