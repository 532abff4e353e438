"""
Pytest configuration and fixtures.
"""

from decimal import Decimal

import pytest

from booking_ledger.core.config import get_settings
from booking_ledger.domain.value_objects import BookingInput


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_booking() -> BookingInput:
    return BookingInput(
        cost_amount=Decimal("1000"),
        sale_amount=Decimal("1500"),
        vat_rate=Decimal("5"),
        commission_rate=Decimal("10"),
        currency="AED"
    )


@pytest.fixture
def sample_payload() -> dict:
    return {
        "cost_amount": 1000.0,
        "sale_amount": 1500.0,
        "vat_rate": 5.0,
        "commission_rate": 10.0,
        "currency": "AED"
    }


@pytest.fixture
def degenerate_vat_booking() -> BookingInput:
    return BookingInput(
        cost_amount=Decimal("100"),
        sale_amount=Decimal("200"),
        vat_rate=Decimal("-100"),
        commission_rate=Decimal("10"),
        currency="AED"
    )
