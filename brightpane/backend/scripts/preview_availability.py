# scripts/preview_availability.py
import argparse
import logging
from datetime import date

from app.domain.parsing import format_date_for_display
from app.service_layer.quotes import available_dates


def main() -> None:
    ap = argparse.ArgumentParser(description="Show bookable cleaning dates for a postcode.")
    ap.add_argument("postcode")
    ap.add_argument("--address", default="", help="address line 1 (needed for Meare)")
    ap.add_argument("--today", type=date.fromisoformat, default=None)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    result = available_dates(args.postcode, args.address, args.today or date.today())
    if result.error_kind:
        print(result.error_kind.value)
        return
    for d in result.dates:
        print(d.isoformat(), format_date_for_display(d))
    print("ASAP")


if __name__ == "__main__":
    main()
