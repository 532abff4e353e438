"""
Main FastAPI application - Booking ledger calculation service.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from booking_ledger import __version__
from booking_ledger.api.routers import bookings
from booking_ledger.core.config import get_settings
from booking_ledger.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan - configure logging on startup."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    yield


app = FastAPI(
    title="Booking Ledger API",
    description="""
## Tourism booking financials

### Features:
- **Booking financials**: gross profit, VAT backed out of the sale price, commission on profit, net profit, margin
- **Journal entries**: five-line double-entry journal, always balanced (Debit = Credit)
- **Batch**: per-booking figures plus revenue-weighted totals

### Rules:
- All arithmetic uses exact decimals; numbers become floats only in the response
- Invalid input returns `{"error": "Invalid input: ..."}`
- A bad booking inside a batch is skipped, not fatal
    """,
    version=__version__,
    lifespan=lifespan
)

app.include_router(bookings.router)


@app.get("/")
def root():
    return {
        "name": get_settings().app_name,
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content={"error": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
