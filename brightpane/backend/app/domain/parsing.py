# app/domain/parsing.py
from __future__ import annotations

from datetime import date
from typing import Any


class ScheduleDateError(ValueError):
    """A catalog date that is not a real YYYY-MM-DD day."""


def parse_iso_date(raw: Any) -> date:
    if not raw or not isinstance(raw, str):
        raise ScheduleDateError(f"expected YYYY-MM-DD string, got {raw!r}")
    parts = raw.strip().split("-")
    if len(parts) != 3:
        raise ScheduleDateError(f"expected YYYY-MM-DD, got {raw!r}")
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError as e:
        raise ScheduleDateError(f"invalid date {raw!r}: {e}") from e


def format_date_for_storage(d: date) -> str:
    return d.isoformat()


DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date_for_display(d: date) -> str:
    """en-GB short form, e.g. 'Mon, 15 Jul'. Independent of the process locale."""
    return f"{DAY_ABBR[d.weekday()]}, {d.day} {MONTH_ABBR[d.month - 1]}"


def normalize_postcode(raw: str | None) -> str:
    return (raw or "").strip().upper()
