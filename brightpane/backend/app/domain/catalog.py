# app/domain/catalog.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .types import (
    BedroomBand,
    Frequency,
    FrequencyOption,
    Pounds,
    PropertyTier,
    PropertyType,
    TierKind,
)

BASE_PRICES: Mapping[tuple[PropertyType, BedroomBand], Pounds] = MappingProxyType(
    {
        (PropertyType.semi_detached, BedroomBand.two_three): 20,
        (PropertyType.detached, BedroomBand.two_three): 25,
        (PropertyType.semi_detached, BedroomBand.four): 25,
        (PropertyType.detached, BedroomBand.four): 30,
        (PropertyType.semi_detached, BedroomBand.five): 30,
        (PropertyType.detached, BedroomBand.five): 35,
    }
)

FREQUENCY_OPTIONS: Mapping[Frequency, FrequencyOption] = MappingProxyType(
    {
        Frequency.four_weekly: FrequencyOption(Frequency.four_weekly, "4 Weekly", 0),
        Frequency.eight_weekly: FrequencyOption(Frequency.eight_weekly, "8 Weekly", 3),
        Frequency.twelve_weekly: FrequencyOption(Frequency.twelve_weekly, "12 Weekly", 5),
        Frequency.adhoc: FrequencyOption(Frequency.adhoc, "One-off", 20),
    }
)

PROPERTY_TYPE_LABELS: Mapping[PropertyType, str] = MappingProxyType(
    {
        PropertyType.semi_detached: "Semi-Detached House",
        PropertyType.detached: "Detached House",
    }
)

_NON_PRICED_LABELS: Mapping[TierKind, str] = MappingProxyType(
    {
        TierKind.custom_quote: "6+ Beds & Bespoke",
        TierKind.commercial: "Commercial Property",
    }
)


def tier_label(tier: PropertyTier) -> str:
    if not tier.is_priced:
        return _NON_PRICED_LABELS[tier.kind]
    return f"{PROPERTY_TYPE_LABELS[tier.property_type]}, {tier.bedroom_band.value} Bed"


def frequency_price(base_price: Pounds, frequency: Frequency) -> Pounds:
    """Frequency uplift on the base price. Surcharges and addons are never adjusted."""
    return FREQUENCY_OPTIONS[frequency].adjust(base_price)


@dataclass(frozen=True)
class PropertyPriceCatalog:
    prices: Mapping[tuple[PropertyType, BedroomBand], Pounds] = field(default_factory=lambda: BASE_PRICES)

    def base_price(self, tier: PropertyTier) -> Pounds:
        if not tier.is_priced:
            return 0
        return self.prices[(tier.property_type, tier.bedroom_band)]

    def priced_tiers(self) -> list[PropertyTier]:
        return [
            PropertyTier(TierKind.residential, property_type=ptype, bedroom_band=band)
            for (ptype, band) in self.prices
        ]


DEFAULT_CATALOG = PropertyPriceCatalog()
