# app/entrypoints/api/routers/quotes.py
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from ..deps import calculator_dep
from ....domain.pricing import PriceBreakdownCalculator
from ....domain.types import (
    AddonSelection,
    PriceBreakdown,
    PropertyTier,
    QuoteSelection,
    SurchargeFlags,
    TierKind,
)
from ....schemas import (
    EmailParamsIn,
    EmailParamsOut,
    LineItemOut,
    PriceBreakdownOut,
    QuoteOptionsOut,
    QuoteSelectionIn,
)
from ....service_layer.email_params import build_email_template_params
from ....service_layer.quotes import quote_options

router = APIRouter(prefix="/quotes", tags=["quotes"])


def _to_selection(body: QuoteSelectionIn) -> QuoteSelection:
    kind = TierKind(body.kind)
    if kind == TierKind.residential:
        tier = PropertyTier(kind, property_type=body.property_type, bedroom_band=body.bedroom_band)
    else:
        tier = PropertyTier(kind)
    return QuoteSelection(
        tier=tier,
        frequency=body.frequency,
        addons=AddonSelection(
            gutter_clearing=body.gutter_clearing,
            fascia_soffit_gutter=body.fascia_soffit_gutter,
        ),
        surcharges=SurchargeFlags(
            has_conservatory=body.has_conservatory,
            has_extension=body.has_extension,
        ),
    )


def _breakdown_out(b: PriceBreakdown, *, quote_only: bool) -> PriceBreakdownOut:
    return PriceBreakdownOut(
        line_items=[LineItemOut(code=li.code, label=li.label, amount=li.amount) for li in b.line_items],
        base_price=b.base_price,
        window_price=b.window_price,
        surcharge_total=b.surcharge_total,
        addons_total=b.addons_total,
        subtotal_before_discount=b.subtotal_before_discount,
        discount=b.discount,
        grand_total=b.grand_total,
        quote_only=quote_only,
    )


@router.get("/options", response_model=QuoteOptionsOut)
def options() -> QuoteOptionsOut:
    opts = quote_options()
    return QuoteOptionsOut(
        tiers=[asdict(t) for t in opts["tiers"]],
        frequencies=opts["frequencies"],
        surcharges=opts["surcharges"],
    )


@router.post("/price", response_model=PriceBreakdownOut)
def price(
    body: QuoteSelectionIn,
    calculator: PriceBreakdownCalculator = Depends(calculator_dep),
) -> PriceBreakdownOut:
    selection = _to_selection(body)
    return _breakdown_out(calculator.compute(selection), quote_only=not selection.tier.is_priced)


@router.post("/email-params", response_model=EmailParamsOut)
def email_params(
    body: EmailParamsIn,
    calculator: PriceBreakdownCalculator = Depends(calculator_dep),
) -> EmailParamsOut:
    selection = _to_selection(body.selection)
    breakdown = calculator.compute(selection)
    return EmailParamsOut(
        breakdown=_breakdown_out(breakdown, quote_only=not selection.tier.is_priced),
        params=build_email_template_params(selection, breakdown, body.selected_date),
    )
