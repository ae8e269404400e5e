# app/domain/availability.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from .parsing import ScheduleDateError
from .recurrence import next_occurrence_on_or_after
from .schedule import ScheduleCatalog
from .types import AvailabilityError, AvailabilityResult, BankHolidayCalendar
from .working_days import next_working_day

log = logging.getLogger(__name__)

BOOKING_HORIZON_DAYS = 42


@dataclass(frozen=True)
class AvailabilityQuery:
    schedule: ScheduleCatalog
    bank_holidays: BankHolidayCalendar
    horizon_days: int = BOOKING_HORIZON_DAYS

    def query(self, postcode: str | None, address_line1: str | None, today: date) -> AvailabilityResult:
        match = self.schedule.match_entries(postcode, address_line1)
        if match.error_kind is not None:
            return AvailabilityResult(dates=(), error_kind=match.error_kind)
        if not match.entries:
            return AvailabilityResult(dates=())

        # No same-day bookings.
        earliest = today + timedelta(days=1)
        latest = today + timedelta(days=self.horizon_days)

        found: set[date] = set()
        for entry in match.entries:
            for raw in entry.base_dates:
                try:
                    occurrence = next_occurrence_on_or_after(raw, entry.recurrence_rule, today)
                except ScheduleDateError as e:
                    log.warning("skipping bad schedule date area=%s raw=%r: %s", entry.area, raw, e)
                    continue
                adjusted = next_working_day(occurrence, self.bank_holidays)
                if earliest <= adjusted <= latest:
                    found.add(adjusted)

        if not found:
            return AvailabilityResult(dates=(), error_kind=AvailabilityError.no_dates_in_window)
        return AvailabilityResult(dates=tuple(sorted(found)))
