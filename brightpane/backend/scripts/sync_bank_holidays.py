from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path

from app.adapters.clients.bank_holidays import fetch_bank_holidays
from app.adapters.reference_data import dump_bank_holidays
from app.config import settings

log = logging.getLogger("sync_bank_holidays")


async def main() -> None:
    ap = argparse.ArgumentParser(description="Refresh the bank holiday calendar from the gov.uk feed.")
    ap.add_argument("--out", type=Path, default=settings.BANK_HOLIDAYS_PATH)
    ap.add_argument("--division", default=settings.BANK_HOLIDAYS_DIVISION)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)

    calendar = await fetch_bank_holidays(division=args.division)
    payload = dump_bank_holidays(calendar, args.division)

    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")

    log.info("wrote %d years to %s", len(payload["years"]), args.out)


if __name__ == "__main__":
    asyncio.run(main())
