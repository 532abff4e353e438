"""Decimal context shared by every calculation in the engine."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)

from .exceptions import BookingCalculationError
from .value_objects import HUNDRED

DECIMAL_PRECISION = 28

# Signals that would otherwise turn into NaN/Infinity are raised instead.
_DECIMAL_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[DivisionByZero, InvalidOperation, Overflow],
)


@contextmanager
def exact_arithmetic() -> Iterator[None]:
    """
    Run a block in the engine's decimal context, whatever the caller's
    ambient context is. Trapped signals become BookingCalculationError.
    """
    with localcontext(_DECIMAL_CONTEXT):
        try:
            yield
        except DecimalException as exc:
            raise BookingCalculationError(f"Decimal arithmetic failed: {type(exc).__name__}") from exc


def percent_of(amount: Decimal, rate: Decimal) -> Decimal:
    return amount * (rate / HUNDRED)
