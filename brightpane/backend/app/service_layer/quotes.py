# app/service_layer/quotes.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Any

from ..adapters.reference_data import default_bank_holidays, default_schedule
from ..config import settings
from ..domain.availability import AvailabilityQuery
from ..domain.catalog import DEFAULT_CATALOG, FREQUENCY_OPTIONS, frequency_price, tier_label
from ..domain.policies import SurchargeRules, fascia_soffit_gutter_price, gutter_clearing_price
from ..domain.pricing import PriceBreakdownCalculator
from ..domain.types import (
    COMMERCIAL_TIER,
    CUSTOM_QUOTE_TIER,
    AvailabilityResult,
    PriceBreakdown,
    QuoteSelection,
)


@lru_cache(maxsize=1)
def get_calculator() -> PriceBreakdownCalculator:
    return PriceBreakdownCalculator(
        catalog=DEFAULT_CATALOG,
        surcharges=SurchargeRules(
            conservatory=settings.CONSERVATORY_SURCHARGE,
            extension=settings.EXTENSION_SURCHARGE,
        ),
    )


@lru_cache(maxsize=1)
def get_availability_query() -> AvailabilityQuery:
    return AvailabilityQuery(
        schedule=default_schedule(),
        bank_holidays=default_bank_holidays(),
        horizon_days=settings.BOOKING_HORIZON_DAYS,
    )


def price_quote(selection: QuoteSelection, calculator: PriceBreakdownCalculator | None = None) -> PriceBreakdown:
    return (calculator or get_calculator()).compute(selection)


def available_dates(
    postcode: str | None,
    address_line1: str | None,
    today: date,
    query: AvailabilityQuery | None = None,
) -> AvailabilityResult:
    return (query or get_availability_query()).query(postcode, address_line1, today)


@dataclass(frozen=True)
class TierOption:
    kind: str
    label: str
    property_type: str | None
    bedroom_band: str | None
    base_price: int
    quote_only: bool
    frequency_prices: dict[str, int]
    gutter_clearing_price: int | None
    fascia_soffit_gutter_price: int | None


def quote_options() -> dict[str, Any]:
    """
    What the property step renders: each priced tier with its price on every
    frequency button, then the quote-only tiers.
    """
    calc = get_calculator()
    tiers: list[TierOption] = []
    for tier in calc.catalog.priced_tiers():
        base = calc.catalog.base_price(tier)
        tiers.append(
            TierOption(
                kind=tier.kind.value,
                label=tier_label(tier),
                property_type=tier.property_type.value,
                bedroom_band=tier.bedroom_band.value,
                base_price=base,
                quote_only=False,
                frequency_prices={f.value: frequency_price(base, f) for f in FREQUENCY_OPTIONS},
                gutter_clearing_price=gutter_clearing_price(tier.property_type, tier.bedroom_band),
                fascia_soffit_gutter_price=fascia_soffit_gutter_price(tier.property_type, tier.bedroom_band),
            )
        )
    for tier in (CUSTOM_QUOTE_TIER, COMMERCIAL_TIER):
        tiers.append(
            TierOption(
                kind=tier.kind.value,
                label=tier_label(tier),
                property_type=None,
                bedroom_band=None,
                base_price=0,
                quote_only=True,
                frequency_prices={},
                gutter_clearing_price=None,
                fascia_soffit_gutter_price=None,
            )
        )

    return {
        "tiers": tiers,
        "frequencies": [{"id": f.id.value, "label": f.label, "uplift": f.uplift} for f in FREQUENCY_OPTIONS.values()],
        "surcharges": {
            "conservatory": calc.surcharges.conservatory,
            "extension": calc.surcharges.extension,
        },
    }
