# app/service_layer/email_params.py
from __future__ import annotations

from datetime import date

from ..domain.catalog import FREQUENCY_OPTIONS, PROPERTY_TYPE_LABELS
from ..domain.parsing import format_date_for_display, format_date_for_storage
from ..domain.types import PriceBreakdown, QuoteSelection, TierKind

ASAP = "ASAP"

_QUOTE_TYPES = {
    TierKind.residential: "standard",
    TierKind.custom_quote: "custom",
    TierKind.commercial: "commercial",
}


def format_price(amount: int | float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}£{abs(amount):.2f}"


def _flag(v: bool) -> str:
    # The email template treats any non-empty string as true.
    return "true" if v else ""


def build_email_template_params(
    selection: QuoteSelection,
    breakdown: PriceBreakdown,
    selected_date: date | str | None,
) -> dict[str, str]:
    """
    Flatten a quote into the string map handed to the email sender.
    Customer contact fields are added by the sender, not here.
    """
    tier = selection.tier
    priced = tier.is_priced

    if isinstance(selected_date, date):
        scheduled = format_date_for_storage(selected_date)
        scheduled_display = format_date_for_display(selected_date)
    elif selected_date == ASAP:
        scheduled = scheduled_display = ASAP
    else:
        scheduled = scheduled_display = ""

    return {
        "quote_type": _QUOTE_TYPES[tier.kind],
        "is_standard_residential": _flag(priced),
        "is_custom_quote": _flag(tier.kind == TierKind.custom_quote),
        "is_commercial": _flag(tier.kind == TierKind.commercial),
        "property_type": PROPERTY_TYPE_LABELS[tier.property_type] if priced else "",
        "bedrooms": f"{tier.bedroom_band.value} Bed" if priced else "",
        "frequency": FREQUENCY_OPTIONS[selection.frequency].label if priced else "",
        "has_conservatory": _flag(priced and selection.surcharges.has_conservatory),
        "has_extension": _flag(priced and selection.surcharges.has_extension),
        "has_gutter_clearing": _flag(priced and selection.addons.gutter_clearing),
        "has_fascia_soffit": _flag(priced and selection.addons.fascia_soffit_gutter),
        "line_items": "\n".join(f"{li.label}: {format_price(li.amount)}" for li in breakdown.line_items),
        "subtotal": format_price(breakdown.subtotal_before_discount) if priced else "",
        "discount": format_price(breakdown.discount) if breakdown.discount else "",
        "total_price": format_price(breakdown.grand_total) if priced else "",
        "scheduled_date": scheduled,
        "scheduled_date_display": scheduled_display,
    }
