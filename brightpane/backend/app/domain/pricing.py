# app/domain/pricing.py
from __future__ import annotations

from dataclasses import dataclass, field

from .catalog import DEFAULT_CATALOG, FREQUENCY_OPTIONS, PropertyPriceCatalog, frequency_price, tier_label
from .policies import (
    SurchargeRules,
    addons_eligible,
    bundle_discount,
    fascia_soffit_gutter_price,
    gutter_clearing_price,
)
from .types import LineItem, PriceBreakdown, QuoteSelection


@dataclass(frozen=True)
class PriceBreakdownCalculator:
    catalog: PropertyPriceCatalog = field(default_factory=lambda: DEFAULT_CATALOG)
    surcharges: SurchargeRules = field(default_factory=SurchargeRules)

    def compute(self, selection: QuoteSelection) -> PriceBreakdown:
        tier = selection.tier
        base = self.catalog.base_price(tier)

        if not tier.is_priced:
            # Custom and commercial jobs are quoted by a person after a survey.
            return PriceBreakdown(
                line_items=(LineItem("window", f"Window Cleaning ({tier_label(tier)}) - quote to follow", 0),),
                base_price=0,
                window_price=0,
                surcharge_total=0,
                addons_total=0,
                subtotal_before_discount=0,
                discount=0,
                grand_total=0,
            )

        freq = FREQUENCY_OPTIONS[selection.frequency]
        window_price = frequency_price(base, selection.frequency)
        items: list[LineItem] = [
            LineItem("window", f"Window Cleaning ({tier_label(tier)}, {freq.label})", window_price),
        ]

        flags = selection.surcharges
        conservatory = self.surcharges.conservatory_surcharge(flags)
        extension = self.surcharges.extension_surcharge(flags)
        if conservatory:
            items.append(LineItem("conservatory", "Conservatory Surcharge", conservatory))
        if extension:
            items.append(LineItem("extension", "Extension Surcharge", extension))
        surcharge_total = conservatory + extension

        addons_total = 0
        if addons_eligible(base):
            if selection.addons.gutter_clearing:
                price = gutter_clearing_price(tier.property_type, tier.bedroom_band)
                items.append(LineItem("gutter_clearing", "Gutter Clearing", price))
                addons_total += price
            if selection.addons.fascia_soffit_gutter:
                price = fascia_soffit_gutter_price(tier.property_type, tier.bedroom_band)
                items.append(LineItem("fascia_soffit_gutter", "Fascia, Soffit & Gutter Clean", price))
                addons_total += price

        subtotal = window_price + surcharge_total + addons_total
        discount = bundle_discount(
            base_price=base,
            surcharge_total=surcharge_total,
            frequency=selection.frequency,
            addons=selection.addons,
        )
        if discount:
            items.append(LineItem("bundle_discount", "Free Window Clean (gutter bundle)", -discount))

        return PriceBreakdown(
            line_items=tuple(items),
            base_price=base,
            window_price=window_price,
            surcharge_total=surcharge_total,
            addons_total=addons_total,
            subtotal_before_discount=subtotal,
            discount=discount,
            grand_total=subtotal - discount,
        )
