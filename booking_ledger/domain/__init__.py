"""Domain layer - Pure Python business logic."""

from booking_ledger.domain.entities import JournalEntries, JournalEntry
from booking_ledger.domain.exceptions import (
    BookingCalculationError,
    BookingLedgerError,
    InputDecodeError,
    NumericCoercionError,
    VatDivisorError,
)
from booking_ledger.domain.services import (
    BatchAggregationService,
    BookingFinancialService,
    JournalGenerationService,
    vat_breakdown,
)
from booking_ledger.domain.value_objects import (
    AccountCode,
    BatchResult,
    BatchSummary,
    BookingFinancials,
    BookingInput,
    Money,
    VatBreakdown,
)
