# app/adapters/reference_data.py
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..config import settings
from ..domain.schedule import ScheduleCatalog
from ..domain.types import BankHolidayCalendar, RecurrenceRule, ScheduleEntry

log = logging.getLogger(__name__)


class ReferenceDataError(RuntimeError):
    pass


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReferenceDataError(f"could not load reference data from {path}: {e}") from e


def _as_str_tuple(x: Any) -> tuple[str, ...]:
    if not isinstance(x, list):
        return ()
    return tuple(str(v).strip().upper() for v in x if v is not None and str(v).strip())


def parse_schedule(payload: Any) -> ScheduleCatalog:
    """
    Accept either:
      - {"entries": [ {...}, ... ]}
      - a bare list of entries

    Each entry: {"postcodes": [...], "dates": ["YYYY-MM-DD", ...], "recurrence": "4_WEEKLY", "area": "..."}
    Dates are kept raw; bad ones are skipped (and logged) at query time.
    """
    rows = payload.get("entries") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise ReferenceDataError("schedule data must be a list of entries")

    entries: list[ScheduleEntry] = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            log.warning("schedule row %d is not an object, skipping", i)
            continue
        prefixes = _as_str_tuple(row.get("postcodes"))
        if not prefixes:
            log.warning("schedule row %d has no postcodes, skipping", i)
            continue
        dates = row.get("dates")
        if not isinstance(dates, list):
            log.warning("schedule row %d has no dates list (got %r), skipping", i, dates)
            continue
        entries.append(
            ScheduleEntry(
                postcode_prefixes=prefixes,
                base_dates=tuple(str(d) for d in dates),
                recurrence_rule=str(row.get("recurrence") or RecurrenceRule.four_weekly.value),
                area=row.get("area"),
            )
        )
    return ScheduleCatalog.from_entries(entries)


def parse_bank_holidays(payload: Any) -> BankHolidayCalendar:
    years = payload.get("years") if isinstance(payload, dict) else None
    if not isinstance(years, dict):
        raise ReferenceDataError("bank holiday data must have a 'years' object")

    out: dict[int, frozenset[str]] = {}
    for year, days in years.items():
        try:
            y = int(year)
        except (TypeError, ValueError) as e:
            raise ReferenceDataError(f"bad bank holiday year {year!r}") from e
        if not isinstance(days, list):
            raise ReferenceDataError(f"bank holidays for {y} must be a list of dates, got {days!r}")
        out[y] = frozenset(str(d) for d in days)
    return MappingProxyType(out)


def bank_holidays_from_feed(payload: Any, division: str) -> BankHolidayCalendar:
    """
    gov.uk shape:
      {"england-and-wales": {"division": "...", "events": [{"title": "...", "date": "YYYY-MM-DD", ...}]}}
    """
    block = payload.get(division) if isinstance(payload, dict) else None
    events = block.get("events") if isinstance(block, dict) else None
    if not isinstance(events, list):
        raise ReferenceDataError(f"bank holiday feed has no events for division {division!r}")

    by_year: dict[int, set[str]] = {}
    for ev in events:
        raw = ev.get("date") if isinstance(ev, dict) else None
        if not isinstance(raw, str) or len(raw) < 4 or not raw[:4].isdigit():
            continue
        by_year.setdefault(int(raw[:4]), set()).add(raw)
    return MappingProxyType({y: frozenset(days) for y, days in by_year.items()})


def dump_bank_holidays(calendar: BankHolidayCalendar, division: str) -> dict[str, Any]:
    return {
        "division": division,
        "years": {str(y): sorted(calendar[y]) for y in sorted(calendar)},
    }


def load_schedule(path: Path) -> ScheduleCatalog:
    catalog = parse_schedule(_read_json(path))
    log.info("loaded schedule entries=%d path=%s", len(catalog.entries), path)
    return catalog


def load_bank_holidays(path: Path) -> BankHolidayCalendar:
    calendar = parse_bank_holidays(_read_json(path))
    log.info("loaded bank holidays years=%s path=%s", sorted(calendar), path)
    return calendar


@lru_cache(maxsize=1)
def default_schedule() -> ScheduleCatalog:
    return load_schedule(settings.SCHEDULE_DATA_PATH)


@lru_cache(maxsize=1)
def default_bank_holidays() -> BankHolidayCalendar:
    return load_bank_holidays(settings.BANK_HOLIDAYS_PATH)
