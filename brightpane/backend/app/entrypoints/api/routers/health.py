# app/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import require_api_key
from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config() -> dict[str, Any]:
    return {
        "ENV": settings.ENV,
        "API_KEY_SET": bool(settings.API_KEY),
        "CONSERVATORY_SURCHARGE": settings.CONSERVATORY_SURCHARGE,
        "EXTENSION_SURCHARGE": settings.EXTENSION_SURCHARGE,
        "BOOKING_HORIZON_DAYS": settings.BOOKING_HORIZON_DAYS,
        "SCHEDULE_DATA_PATH": str(settings.SCHEDULE_DATA_PATH),
        "BANK_HOLIDAYS_PATH": str(settings.BANK_HOLIDAYS_PATH),
    }
