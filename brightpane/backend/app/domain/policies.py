# app/domain/policies.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .types import (
    AddonSelection,
    BedroomBand,
    Frequency,
    Pounds,
    PropertyType,
    SurchargeFlags,
)

DEFAULT_GUTTER_PRICE: Pounds = 80
FASCIA_SOFFIT_UPLIFT: Pounds = 20

# bedroom band -> (semi-detached, detached)
GUTTER_PRICES: Mapping[str, tuple[Pounds, Pounds]] = MappingProxyType(
    {
        BedroomBand.two_three.value: (80, 100),
        BedroomBand.four.value: (100, 120),
        BedroomBand.five.value: (120, 140),
    }
)


@dataclass(frozen=True)
class SurchargeRules:
    conservatory: Pounds = 5
    extension: Pounds = 5

    def conservatory_surcharge(self, flags: SurchargeFlags) -> Pounds:
        return self.conservatory if flags.has_conservatory else 0

    def extension_surcharge(self, flags: SurchargeFlags) -> Pounds:
        return self.extension if flags.has_extension else 0

    def total(self, flags: SurchargeFlags) -> Pounds:
        return self.conservatory_surcharge(flags) + self.extension_surcharge(flags)


def gutter_clearing_price(
    property_type: PropertyType | str | None,
    bedroom_band: BedroomBand | str | None,
) -> Pounds:
    """
    Gutter clearing by size. Bands outside the table (custom, commercial, anything
    the UI did not offer) fall back to the default instead of failing the estimate.
    """
    band = bedroom_band.value if isinstance(bedroom_band, BedroomBand) else bedroom_band
    row = GUTTER_PRICES.get(band or "")
    if row is None:
        return DEFAULT_GUTTER_PRICE
    semi, detached = row
    return detached if _is_detached(property_type) else semi


def fascia_soffit_gutter_price(
    property_type: PropertyType | str | None,
    bedroom_band: BedroomBand | str | None,
) -> Pounds:
    return gutter_clearing_price(property_type, bedroom_band) + FASCIA_SOFFIT_UPLIFT


def _is_detached(property_type: PropertyType | str | None) -> bool:
    # "Semi-Detached" contains "detached"; compare on the whole token.
    if isinstance(property_type, PropertyType):
        return property_type == PropertyType.detached
    if not property_type:
        return False
    s = property_type.strip().lower()
    return s in ("detached", "detached house")


def addons_eligible(base_price: Pounds) -> bool:
    """Addons are sold alongside a priced window clean, never standalone."""
    return base_price > 0


def bundle_discount(
    *,
    base_price: Pounds,
    surcharge_total: Pounds,
    frequency: Frequency,
    addons: AddonSelection,
) -> Pounds:
    """
    Free window clean: both gutter addons on a recurring round waive the window
    price. The amount is always the unadjusted base price, never the frequency
    uplift or the surcharges.
    """
    if not addons.both:
        return 0
    if base_price + surcharge_total <= 0:
        return 0
    if frequency == Frequency.adhoc:
        return 0
    return base_price
