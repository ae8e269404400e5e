# app/entrypoints/api/routers/availability.py
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from ..deps import availability_dep
from ....domain.availability import AvailabilityQuery
from ....domain.parsing import format_date_for_display, normalize_postcode
from ....domain.types import AvailabilityError
from ....schemas import AvailabilityOut, AvailableDateOut

router = APIRouter(tags=["availability"])

MESSAGES = {
    AvailabilityError.need_more_input: "Keep typing your postcode to see available dates.",
    AvailabilityError.not_covered: "Sorry, we don't currently have a round covering this postcode.",
    AvailabilityError.no_dates_in_window: "No scheduled dates in the next six weeks. Choose ASAP and we'll be in touch.",
}


@router.get("/availability", response_model=AvailabilityOut)
def availability(
    postcode: str = Query(..., max_length=10),
    address_line1: str = Query(""),
    today: date | None = Query(default=None),
    query: AvailabilityQuery = Depends(availability_dep),
) -> AvailabilityOut:
    # The clock is read here, at the edge; the engine only ever sees an explicit day.
    today = today or date.today()
    result = query.query(postcode, address_line1, today)
    return AvailabilityOut(
        postcode=normalize_postcode(postcode),
        dates=[AvailableDateOut(date=d, display=format_date_for_display(d)) for d in result.dates],
        error_kind=result.error_kind.value if result.error_kind else None,
        message=MESSAGES.get(result.error_kind) if result.error_kind else None,
    )
