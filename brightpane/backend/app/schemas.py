import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from .domain.types import BedroomBand, Frequency, PropertyType

TierKindIn = Literal["residential", "custom_quote", "commercial"]


class QuoteSelectionIn(BaseModel):
    kind: TierKindIn = "residential"
    property_type: PropertyType | None = None
    bedroom_band: BedroomBand | None = None
    frequency: Frequency = Frequency.four_weekly

    has_conservatory: bool = False
    has_extension: bool = False
    gutter_clearing: bool = False
    fascia_soffit_gutter: bool = False

    @model_validator(mode="after")
    def _residential_needs_tier(self) -> "QuoteSelectionIn":
        if self.kind == "residential" and (self.property_type is None or self.bedroom_band is None):
            raise ValueError("residential quotes need property_type and bedroom_band")
        return self


class LineItemOut(BaseModel):
    code: str
    label: str
    amount: int


class PriceBreakdownOut(BaseModel):
    line_items: list[LineItemOut]
    base_price: int
    window_price: int
    surcharge_total: int
    addons_total: int
    subtotal_before_discount: int
    discount: int = Field(..., ge=0)
    grand_total: int
    quote_only: bool = False


class EmailParamsIn(BaseModel):
    selection: QuoteSelectionIn
    selected_date: dt.date | Literal["ASAP"] | None = None


class EmailParamsOut(BaseModel):
    breakdown: PriceBreakdownOut
    params: dict[str, str]


class AvailableDateOut(BaseModel):
    date: dt.date
    display: str


class AvailabilityOut(BaseModel):
    postcode: str
    dates: list[AvailableDateOut]
    error_kind: Literal["NEED_MORE_INPUT", "NOT_COVERED", "NO_DATES_IN_WINDOW"] | None = None
    message: str | None = None
    # ASAP is always offered by the form, whatever the schedule says.
    asap_available: bool = True


class FrequencyOut(BaseModel):
    id: str
    label: str
    uplift: int


class TierOptionOut(BaseModel):
    kind: str
    label: str
    property_type: str | None = None
    bedroom_band: str | None = None
    base_price: int
    quote_only: bool
    frequency_prices: dict[str, int]
    gutter_clearing_price: int | None = None
    fascia_soffit_gutter_price: int | None = None


class QuoteOptionsOut(BaseModel):
    tiers: list[TierOptionOut]
    frequencies: list[FrequencyOut]
    surcharges: dict[str, int]
