"""
Boundary operations - decode a request, run the domain service, encode the
response.

Every function returns a plain dict. Callers tell success from failure by the
presence of an `error` key; no exception escapes for bad input.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from booking_ledger.application.dto.booking_dto import (
    BatchBookingInputDTO,
    BatchBookingResultDTO,
    BookingFinancialsDTO,
    BookingInputDTO,
    ErrorDTO,
    JournalEntriesDTO,
    describe_validation_error,
)
from booking_ledger.domain.exceptions import BookingCalculationError, InputDecodeError
from booking_ledger.domain.services import (
    BatchAggregationService,
    BookingFinancialService,
    JournalGenerationService,
)
from booking_ledger.domain.value_objects import BookingInput, SkippedBooking

logger = logging.getLogger(__name__)

Payload = str | bytes | bytearray | Mapping[str, Any]

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: type[ModelT], payload: Payload) -> ModelT:
    """Parse JSON text or an already-decoded mapping into `model`."""
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InputDecodeError(describe_validation_error(exc)) from exc


def error_payload(message: str) -> dict[str, Any]:
    return ErrorDTO(error=message).model_dump()


def calculate_booking_financials(payload: Payload) -> dict[str, Any]:
    """Financial figures for one booking, or {"error": ...}."""
    try:
        booking = decode(BookingInputDTO, payload).to_domain()
    except InputDecodeError as exc:
        return error_payload(f"Invalid input: {exc}")

    try:
        financials = BookingFinancialService().calculate(booking)
    except BookingCalculationError as exc:
        logger.warning("Booking calculation failed: %s", exc)
        return error_payload(f"Calculation failed: {exc}")

    return BookingFinancialsDTO.from_domain(financials).model_dump()


def generate_journal_entries_for_booking(payload: Payload) -> dict[str, Any]:
    """Five-line double-entry journal for one booking, or {"error": ...}."""
    try:
        booking = decode(BookingInputDTO, payload).to_domain()
    except InputDecodeError as exc:
        return error_payload(f"Invalid input: {exc}")

    try:
        journal = JournalGenerationService().generate(booking)
    except BookingCalculationError as exc:
        logger.warning("Journal generation failed: %s", exc)
        return error_payload(f"Calculation failed: {exc}")

    return JournalEntriesDTO.from_domain(journal).model_dump()


def calculate_batch_bookings(payload: Payload) -> dict[str, Any]:
    """
    Financial figures for many bookings plus a summary.

    Only a malformed envelope fails the call. A booking that does not decode
    or does not calculate is dropped from both results and totals.
    """
    try:
        batch = decode(BatchBookingInputDTO, payload)
    except InputDecodeError as exc:
        return error_payload(f"Invalid input: {exc}")

    bookings: list[BookingInput] = []
    positions: list[int] = []
    undecodable: list[SkippedBooking] = []
    for index, raw in enumerate(batch.bookings):
        try:
            if not isinstance(raw, Mapping):
                raise InputDecodeError(f"expected an object, got {type(raw).__name__}")
            bookings.append(decode(BookingInputDTO, raw).to_domain())
            positions.append(index)
        except InputDecodeError as exc:
            logger.warning("Skipping booking %d in batch: invalid input: %s", index, exc)
            undecodable.append(SkippedBooking(index=index, reason=f"Invalid input: {exc}"))

    result = BatchAggregationService().aggregate(bookings, positions=positions, skipped=undecodable)
    return BatchBookingResultDTO.from_domain(result).model_dump()
