# app/domain/working_days.py
from __future__ import annotations

from datetime import date, timedelta

from .parsing import format_date_for_storage
from .types import BankHolidayCalendar

_ONE_DAY = timedelta(days=1)


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5  # Sat=5, Sun=6


def is_bank_holiday(d: date, calendar: BankHolidayCalendar) -> bool:
    return format_date_for_storage(d) in calendar.get(d.year, frozenset())


def is_working_day(d: date, calendar: BankHolidayCalendar) -> bool:
    return not (is_weekend(d) or is_bank_holiday(d, calendar))


def next_working_day(d: date, calendar: BankHolidayCalendar) -> date:
    """First weekday on or after d that is not a bank holiday."""
    cur = d
    while not is_working_day(cur, calendar):
        cur += _ONE_DAY
    return cur
