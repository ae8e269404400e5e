# tests/conftest.py
from datetime import date
from types import MappingProxyType

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.domain.schedule import ScheduleCatalog
from app.domain.types import ScheduleEntry
from app.entrypoints.fastapi_app import create_app

NO_HOLIDAYS = MappingProxyType({})


def make_catalog(*rows: tuple[list[str], list[str]] | tuple[list[str], list[str], str]) -> ScheduleCatalog:
    """Tiny catalog from (prefixes, base_dates[, rule]) tuples."""
    entries = []
    for i, row in enumerate(rows):
        prefixes, dates = row[0], row[1]
        rule = row[2] if len(row) > 2 else "4_WEEKLY"
        entries.append(
            ScheduleEntry(
                postcode_prefixes=tuple(prefixes),
                base_dates=tuple(dates),
                recurrence_rule=rule,
                area=f"area-{i}",
            )
        )
    return ScheduleCatalog.from_entries(entries)


@pytest.fixture
def wednesday() -> date:
    return date(2026, 10, 14)


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", "test-key")
    return "test-key"
