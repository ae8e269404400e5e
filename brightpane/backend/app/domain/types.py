# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Mapping

# Whole pounds. Every table in the business is priced to the pound.
Pounds = int

# year -> {"YYYY-MM-DD", ...}
BankHolidayCalendar = Mapping[int, frozenset[str]]


class TierKind(str, Enum):
    residential = "residential"
    custom_quote = "custom_quote"
    commercial = "commercial"


class PropertyType(str, Enum):
    semi_detached = "Semi-Detached"
    detached = "Detached"


class BedroomBand(str, Enum):
    two_three = "2-3"
    four = "4"
    five = "5"


class Frequency(str, Enum):
    four_weekly = "4-weekly"
    eight_weekly = "8-weekly"
    twelve_weekly = "12-weekly"
    adhoc = "adhoc"


class RecurrenceRule(str, Enum):
    four_weekly = "4_WEEKLY"
    monthly_same_day = "MONTHLY_SAME_DAY"


class AvailabilityError(str, Enum):
    need_more_input = "NEED_MORE_INPUT"
    not_covered = "NOT_COVERED"
    no_dates_in_window = "NO_DATES_IN_WINDOW"


@dataclass(frozen=True)
class PropertyTier:
    kind: TierKind
    property_type: PropertyType | None = None
    bedroom_band: BedroomBand | None = None

    def __post_init__(self) -> None:
        if self.kind == TierKind.residential and (self.property_type is None or self.bedroom_band is None):
            raise ValueError("residential tier needs both property_type and bedroom_band")

    @property
    def is_priced(self) -> bool:
        """Only residential tiers carry a price; the rest go to a human for quoting."""
        return self.kind == TierKind.residential

    @property
    def is_detached(self) -> bool:
        return self.property_type == PropertyType.detached


CUSTOM_QUOTE_TIER = PropertyTier(TierKind.custom_quote)
COMMERCIAL_TIER = PropertyTier(TierKind.commercial)


@dataclass(frozen=True)
class FrequencyOption:
    id: Frequency
    label: str
    uplift: Pounds

    def adjust(self, base_price: Pounds) -> Pounds:
        return base_price + self.uplift


@dataclass(frozen=True)
class AddonSelection:
    gutter_clearing: bool = False
    fascia_soffit_gutter: bool = False

    @property
    def both(self) -> bool:
        return self.gutter_clearing and self.fascia_soffit_gutter


@dataclass(frozen=True)
class SurchargeFlags:
    has_conservatory: bool = False
    has_extension: bool = False


@dataclass(frozen=True)
class QuoteSelection:
    tier: PropertyTier
    frequency: Frequency = Frequency.four_weekly
    addons: AddonSelection = field(default_factory=AddonSelection)
    surcharges: SurchargeFlags = field(default_factory=SurchargeFlags)


@dataclass(frozen=True)
class LineItem:
    code: str
    label: str
    amount: Pounds  # signed; discounts are negative


@dataclass(frozen=True)
class PriceBreakdown:
    line_items: tuple[LineItem, ...]
    base_price: Pounds
    window_price: Pounds
    surcharge_total: Pounds
    addons_total: Pounds
    subtotal_before_discount: Pounds
    discount: Pounds
    grand_total: Pounds


@dataclass(frozen=True)
class ScheduleEntry:
    postcode_prefixes: tuple[str, ...]
    base_dates: tuple[str, ...]
    recurrence_rule: str = RecurrenceRule.four_weekly.value
    area: str | None = None


@dataclass(frozen=True)
class ScheduleMatch:
    entries: tuple[ScheduleEntry, ...]
    error_kind: AvailabilityError | None = None


@dataclass(frozen=True)
class AvailabilityResult:
    dates: tuple[date, ...]
    error_kind: AvailabilityError | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None
