# app/domain/schedule.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .parsing import normalize_postcode
from .types import AvailabilityError, ScheduleEntry, ScheduleMatch

MEARE_TOKEN = "BA6-MEARE"
MEARE_DISTRICT = "BA6"
MIN_POSTCODE_LEN = 3


def is_meare_address(postcode: str, address_line1: str | None) -> bool:
    """Meare sits inside BA6 but runs on its own round; only the address line tells them apart."""
    return postcode.startswith(MEARE_DISTRICT) and "meare" in (address_line1 or "").lower()


@dataclass(frozen=True)
class ScheduleCatalog:
    entries: tuple[ScheduleEntry, ...]

    @classmethod
    def from_entries(cls, entries: Sequence[ScheduleEntry]) -> ScheduleCatalog:
        return cls(entries=tuple(entries))

    def match_entries(self, postcode: str | None, address_line1: str | None) -> ScheduleMatch:
        pc = normalize_postcode(postcode)
        if len(pc) < MIN_POSTCODE_LEN:
            # Still typing.
            return ScheduleMatch(entries=())

        if is_meare_address(pc, address_line1):
            matched = tuple(e for e in self.entries if MEARE_TOKEN in e.postcode_prefixes)
        else:
            matched = tuple(
                e
                for e in self.entries
                if any(p != MEARE_TOKEN and pc.startswith(p) for p in e.postcode_prefixes)
            )

        if matched:
            return ScheduleMatch(entries=matched)
        if len(pc) == MIN_POSTCODE_LEN:
            return ScheduleMatch(entries=(), error_kind=AvailabilityError.need_more_input)
        return ScheduleMatch(entries=(), error_kind=AvailabilityError.not_covered)
