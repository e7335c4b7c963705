"""Calendar helpers for policy terms and ages."""

from __future__ import annotations

import calendar
from datetime import date, timedelta


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole months, clamping to the last day of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def term_end_date(start: date, duration_months: int) -> date:
    """Last covered day: start + duration_months, minus one day."""
    return add_months(start, duration_months) - timedelta(days=1)


def age_on(birth_date: date, as_of: date) -> int:
    """
    Completed years between ``birth_date`` and ``as_of``.

    Year difference, minus one when the birthday has not yet come
    round in the ``as_of`` year.
    """
    years = as_of.year - birth_date.year
    if (as_of.month, as_of.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years
