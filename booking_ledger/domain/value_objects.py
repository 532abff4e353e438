"""
Domain Layer - Pure Python business logic following DDD.
Value objects for tourism booking financials and the ledger vocabulary.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NewType

AccountCode = NewType("AccountCode", str)

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

# Largest magnitude representable by a 96-bit decimal mantissa.
DECIMAL_MAX = Decimal("79228162514264337593543950335")

BALANCE_TOLERANCE = Decimal("0.01")

DEFAULT_CURRENCY = "AED"


@dataclass(frozen=True, slots=True)
class Money:
    """Value Object - Amount in a given currency."""
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __add__(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise ValueError("Cannot add amounts in different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: "Money") -> "Money":
        if self.currency != other.currency:
            raise ValueError("Cannot subtract amounts in different currencies")
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == ZERO

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(amount=ZERO, currency=currency)


@dataclass(frozen=True, slots=True)
class BookingInput:
    """
    Value Object - One booking as supplied by the caller.
    Rates are percentages (5 means 5%).
    """
    cost_amount: Decimal
    sale_amount: Decimal
    vat_rate: Decimal
    commission_rate: Decimal
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True, slots=True)
class VatBreakdown:
    """Value Object - VAT backed out of a VAT-inclusive sale amount."""
    vat_divisor: Decimal
    net_before_vat: Decimal
    vat_amount: Decimal


@dataclass(frozen=True, slots=True)
class BookingFinancials:
    """Value Object - Derived figures for a single booking, exact decimals."""
    gross_profit: Decimal
    vat_amount: Decimal
    net_before_vat: Decimal
    total_with_vat: Decimal
    commission_amount: Decimal
    net_profit: Decimal
    profit_margin_percentage: Decimal


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Value Object - Totals over the successfully calculated bookings."""
    total_cost: Decimal
    total_revenue: Decimal
    total_profit: Decimal
    total_vat: Decimal
    total_commission: Decimal
    average_profit_margin: Decimal
    booking_count: int


@dataclass(frozen=True, slots=True)
class SkippedBooking:
    """Booking left out of a batch, by input position."""
    index: int
    reason: str


@dataclass(frozen=True, slots=True)
class BatchResult:
    results: tuple[BookingFinancials, ...]
    summary: BatchSummary
    skipped: tuple[SkippedBooking, ...] = ()
