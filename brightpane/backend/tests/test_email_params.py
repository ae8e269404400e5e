from datetime import date

from app.domain.pricing import PriceBreakdownCalculator
from app.domain.types import (
    COMMERCIAL_TIER,
    AddonSelection,
    BedroomBand,
    Frequency,
    PropertyTier,
    PropertyType,
    QuoteSelection,
    SurchargeFlags,
    TierKind,
)
from app.service_layer.email_params import build_email_template_params, format_price

calc = PriceBreakdownCalculator()


def test_format_price():
    assert format_price(180) == "£180.00"
    assert format_price(-20) == "-£20.00"


def test_standard_quote_params():
    selection = QuoteSelection(
        PropertyTier(TierKind.residential, PropertyType.semi_detached, BedroomBand.two_three),
        Frequency.four_weekly,
        addons=AddonSelection(gutter_clearing=True, fascia_soffit_gutter=True),
        surcharges=SurchargeFlags(has_extension=True),
    )
    breakdown = calc.compute(selection)

    params = build_email_template_params(selection, breakdown, date(2026, 10, 22))

    assert params["quote_type"] == "standard"
    assert params["is_standard_residential"] == "true"
    assert params["is_commercial"] == ""
    assert params["property_type"] == "Semi-Detached House"
    assert params["bedrooms"] == "2-3 Bed"
    assert params["frequency"] == "4 Weekly"
    assert params["has_extension"] == "true"
    assert params["has_conservatory"] == ""
    assert params["has_gutter_clearing"] == "true"
    assert params["has_fascia_soffit"] == "true"
    assert params["subtotal"] == "£205.00"
    assert params["discount"] == "£20.00"
    assert params["total_price"] == "£185.00"
    assert "Free Window Clean (gutter bundle): -£20.00" in params["line_items"]
    assert params["scheduled_date"] == "2026-10-22"
    assert params["scheduled_date_display"] == "Thu, 22 Oct"


def test_asap_and_commercial():
    selection = QuoteSelection(COMMERCIAL_TIER, addons=AddonSelection(gutter_clearing=True))
    params = build_email_template_params(selection, calc.compute(selection), "ASAP")

    assert params["quote_type"] == "commercial"
    assert params["is_commercial"] == "true"
    assert params["is_standard_residential"] == ""
    assert params["has_gutter_clearing"] == ""
    assert params["total_price"] == ""
    assert params["discount"] == ""
    assert params["scheduled_date"] == "ASAP"


def test_no_date_chosen():
    selection = QuoteSelection(PropertyTier(TierKind.residential, PropertyType.detached, BedroomBand.five))
    params = build_email_template_params(selection, calc.compute(selection), None)
    assert params["scheduled_date"] == ""
    assert params["total_price"] == "£35.00"
