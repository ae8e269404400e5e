# app/adapters/clients/bank_holidays.py
from __future__ import annotations

import httpx

from ...config import settings
from ...domain.types import BankHolidayCalendar
from ..reference_data import bank_holidays_from_feed


async def fetch_bank_holidays(
    *,
    url: str | None = None,
    division: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BankHolidayCalendar:
    """
    Pull the published bank holidays (gov.uk feed) and group them by year.
    HTTP errors propagate; the sync script decides what to do with them.
    """
    url = url or settings.BANK_HOLIDAYS_URL
    division = division or settings.BANK_HOLIDAYS_DIVISION

    timeout = httpx.Timeout(float(settings.HTTP_TIMEOUT_S))
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        r = await client.get(url, headers={"accept": "application/json"})
        r.raise_for_status()
        data = r.json()

    return bank_holidays_from_feed(data, division)
