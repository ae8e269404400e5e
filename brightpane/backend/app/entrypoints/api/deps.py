# app/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Header, HTTPException

from ...config import settings
from ...domain.availability import AvailabilityQuery
from ...domain.pricing import PriceBreakdownCalculator
from ...service_layer.quotes import get_availability_query, get_calculator


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    if settings.API_KEY:
        if not x_api_key or x_api_key != settings.API_KEY:
            raise HTTPException(status_code=401, detail="Invalid API key")


def calculator_dep() -> PriceBreakdownCalculator:
    return get_calculator()


def availability_dep() -> AvailabilityQuery:
    # Reference data is loaded once and cached for the process.
    return get_availability_query()
