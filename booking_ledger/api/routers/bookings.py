"""
API Routers - Booking calculation endpoints.

Bodies are read raw and handed to the boundary operations so a malformed
request gets the same {"error": "Invalid input: ..."} payload as any other
caller, not FastAPI's validation response.
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from booking_ledger.application.booking_service import (
    calculate_batch_bookings,
    calculate_booking_financials,
    generate_journal_entries_for_booking,
)
from booking_ledger.application.dto.booking_dto import (
    BatchBookingInputDTO,
    BatchBookingResultDTO,
    BookingFinancialsDTO,
    BookingInputDTO,
    ErrorDTO,
    JournalEntriesDTO,
)

router = APIRouter(prefix="/api/v1/bookings", tags=["Bookings"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorDTO, "description": "Invalid input or calculation failure"},
}


def _request_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI request body for an endpoint that reads the raw body."""
    return {"requestBody": {"content": {"application/json": {"schema": model.model_json_schema()}}}}


def _respond(operation: Callable[[bytes], dict[str, Any]], body: bytes) -> JSONResponse:
    payload = operation(body)
    code = status.HTTP_400_BAD_REQUEST if "error" in payload else status.HTTP_200_OK
    return JSONResponse(status_code=code, content=payload)


@router.post(
    "/financials",
    response_model=BookingFinancialsDTO,
    responses=_ERROR_RESPONSES,
    openapi_extra=_request_body(BookingInputDTO),
)
async def booking_financials(request: Request):
    """
    Profit, VAT, commission and margin for one booking.

    - VAT is included in the sale amount
    - Commission is a percentage of gross profit
    """
    return _respond(calculate_booking_financials, await request.body())


@router.post(
    "/journal",
    response_model=JournalEntriesDTO,
    responses=_ERROR_RESPONSES,
    openapi_extra=_request_body(BookingInputDTO),
)
async def booking_journal(request: Request):
    """Five-line double-entry journal for one booking (Debit = Credit)."""
    return _respond(generate_journal_entries_for_booking, await request.body())


@router.post(
    "/batch",
    response_model=BatchBookingResultDTO,
    responses=_ERROR_RESPONSES,
    openapi_extra=_request_body(BatchBookingInputDTO),
)
async def booking_batch(request: Request):
    """Financial figures for many bookings with revenue-weighted totals."""
    return _respond(calculate_batch_bookings, await request.body())
