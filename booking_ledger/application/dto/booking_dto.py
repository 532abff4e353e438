"""
API DTOs - Wire schema for booking requests/responses.

Inside the engine every amount is an exact Decimal. Responses carry JSON
numbers, and to_wire_number() is the only place where a Decimal becomes a
float: values are rounded to the nearest IEEE-754 double there and nowhere
else.
"""

import logging
import math
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from booking_ledger.core.config import get_settings
from booking_ledger.domain.entities import JournalEntries, JournalEntry
from booking_ledger.domain.normalization import (
    NUMERIC_FIELDS,
    normalize_currency,
    normalize_decimal,
)
from booking_ledger.domain.value_objects import (
    BatchResult,
    BatchSummary,
    BookingFinancials,
    BookingInput,
)

logger = logging.getLogger(__name__)


def to_wire_number(value: Decimal) -> float:
    """
    Convert an exact Decimal to the float sent on the wire.

    The result is the double nearest to `value`. Non-finite values cannot
    occur in normal operation; if one does, 0.0 is sent and a warning logged.
    """
    if not value.is_finite():
        logger.warning("Non-finite value %s reached the wire boundary, sending 0.0", value)
        return 0.0
    number = float(value)
    if not math.isfinite(number):
        logger.warning("Value %s overflows a double, sending 0.0", value)
        return 0.0
    return number


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a Pydantic ValidationError into `loc: msg; loc: msg`."""
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class BookingInputDTO(BaseModel):
    """DTO - One booking request."""
    cost_amount: Decimal = Field(..., description="Amount paid to the supplier")
    sale_amount: Decimal = Field(..., description="Amount charged to the customer, VAT included")
    vat_rate: Decimal = Field(..., description="VAT rate %")
    commission_rate: Decimal = Field(..., description="Commission rate % of gross profit")
    currency: str = Field(..., description="Currency code")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "cost_amount": 1000,
            "sale_amount": 1500,
            "vat_rate": 5,
            "commission_rate": 10,
            "currency": "AED",
        }
    })

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _normalize_number(cls, value: Any, info: ValidationInfo) -> Decimal:
        return normalize_decimal(value, info.field_name, strict=get_settings().strict_numeric_input)

    @field_validator("currency", mode="before")
    @classmethod
    def _normalize_currency(cls, value: Any) -> str:
        return normalize_currency(value)

    def to_domain(self) -> BookingInput:
        return BookingInput(
            cost_amount=self.cost_amount,
            sale_amount=self.sale_amount,
            vat_rate=self.vat_rate,
            commission_rate=self.commission_rate,
            currency=self.currency,
        )


class BatchBookingInputDTO(BaseModel):
    """
    DTO - Batch request. Elements are validated one by one so a single bad
    booking does not reject the whole batch.
    """
    bookings: list[Any] = Field(..., description="Bookings to calculate")


class BookingFinancialsDTO(BaseModel):
    """DTO - Financial figures for one booking."""
    gross_profit: float
    vat_amount: float
    net_before_vat: float
    total_with_vat: float
    commission_amount: float
    net_profit: float
    profit_margin_percentage: float

    @classmethod
    def from_domain(cls, financials: BookingFinancials) -> "BookingFinancialsDTO":
        return cls(
            gross_profit=to_wire_number(financials.gross_profit),
            vat_amount=to_wire_number(financials.vat_amount),
            net_before_vat=to_wire_number(financials.net_before_vat),
            total_with_vat=to_wire_number(financials.total_with_vat),
            commission_amount=to_wire_number(financials.commission_amount),
            net_profit=to_wire_number(financials.net_profit),
            profit_margin_percentage=to_wire_number(financials.profit_margin_percentage),
        )


class JournalEntryDTO(BaseModel):
    """DTO - One journal line."""
    account_code: str
    account_name: str
    debit: float
    credit: float
    description: str

    @classmethod
    def from_domain(cls, entry: JournalEntry) -> "JournalEntryDTO":
        return cls(
            account_code=entry.account_code,
            account_name=entry.account_name,
            debit=to_wire_number(entry.debit.amount),
            credit=to_wire_number(entry.credit.amount),
            description=entry.description,
        )


class JournalEntriesDTO(BaseModel):
    """DTO - Journal for one booking. Totals come from the exact line amounts."""
    entries: list[JournalEntryDTO]
    total_debit: float
    total_credit: float
    is_balanced: bool

    @classmethod
    def from_domain(cls, journal: JournalEntries) -> "JournalEntriesDTO":
        return cls(
            entries=[JournalEntryDTO.from_domain(e) for e in journal.entries],
            total_debit=to_wire_number(journal.total_debit.amount),
            total_credit=to_wire_number(journal.total_credit.amount),
            is_balanced=journal.is_balanced(),
        )


class BatchSummaryDTO(BaseModel):
    """DTO - Batch totals."""
    total_cost: float
    total_revenue: float
    total_profit: float
    total_vat: float
    total_commission: float
    average_profit_margin: float
    booking_count: int

    @classmethod
    def from_domain(cls, summary: BatchSummary) -> "BatchSummaryDTO":
        return cls(
            total_cost=to_wire_number(summary.total_cost),
            total_revenue=to_wire_number(summary.total_revenue),
            total_profit=to_wire_number(summary.total_profit),
            total_vat=to_wire_number(summary.total_vat),
            total_commission=to_wire_number(summary.total_commission),
            average_profit_margin=to_wire_number(summary.average_profit_margin),
            booking_count=summary.booking_count,
        )


class BatchBookingResultDTO(BaseModel):
    """DTO - Batch response."""
    results: list[BookingFinancialsDTO]
    summary: BatchSummaryDTO

    @classmethod
    def from_domain(cls, batch: BatchResult) -> "BatchBookingResultDTO":
        return cls(
            results=[BookingFinancialsDTO.from_domain(r) for r in batch.results],
            summary=BatchSummaryDTO.from_domain(batch.summary),
        )


class ErrorDTO(BaseModel):
    """DTO - Error payload. Callers check for the `error` key."""
    error: str
