"""Shared test fixtures and configuration for Ledgerly backend tests."""
import pytest
from datetime import date
from decimal import Decimal

from app.entries.schemas import Entry, Asset


@pytest.fixture
def make_entry():
    """Factory for entries with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> Entry:
        counter["n"] += 1
        fields = {
            "id": f"entry-{counter['n']}",
            "category": "bill",
            "name": f"Entry {counter['n']}",
            "amount": Decimal("1000.00"),
        }
        fields.update(overrides)
        return Entry(**fields)

    return _make


@pytest.fixture
def make_asset():
    """Factory for assets with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> Asset:
        counter["n"] += 1
        fields = {
            "id": f"asset-{counter['n']}",
            "name": f"Asset {counter['n']}",
            "type": "asset",
            "value": Decimal("10000.00"),
        }
        fields.update(overrides)
        return Asset(**fields)

    return _make


@pytest.fixture
def today():
    """A fixed reference date: Saturday 15 June 2024."""
    return date(2024, 6, 15)
