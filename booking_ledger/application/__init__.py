"""Application layer - Boundary operations and DTOs."""

from booking_ledger.application.booking_service import (
    calculate_batch_bookings,
    calculate_booking_financials,
    generate_journal_entries_for_booking,
)
