# app/domain/recurrence.py
from __future__ import annotations

import calendar
from datetime import date, timedelta

from .parsing import parse_iso_date
from .types import RecurrenceRule

FOUR_WEEKS = timedelta(days=28)


def add_months(d: date, months: int) -> date:
    """Same day-of-month `months` later, clamped to the last day of short months."""
    idx = d.month - 1 + months
    year, month = d.year + idx // 12, idx % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last))


def next_occurrence_on_or_after(base_date_str: str, recurrence_rule: str | None, today: date) -> date:
    """
    Walk a round's base date forward one interval at a time until it lands on or
    after `today`. Unknown rules step four-weekly.

    Cost is one step per elapsed interval, which is fine for base dates within a
    couple of years. Very old base dates would want a closed-form periods-elapsed
    calculation instead.

    Raises ScheduleDateError if the base date does not parse.
    """
    base = parse_iso_date(base_date_str)

    if recurrence_rule == RecurrenceRule.monthly_same_day.value:
        # Step from the base each time so a 31st does not drift to the 28th.
        n = 0
        cur = base
        while cur < today:
            n += 1
            cur = add_months(base, n)
        return cur

    cur = base
    while cur < today:
        cur += FOUR_WEEKS
    return cur
