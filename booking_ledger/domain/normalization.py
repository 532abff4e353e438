"""
Input normalization - turn caller-supplied numbers into exact decimals.

Numbers arrive as JSON numbers (floats or ints) or as Decimals from Python
callers. Strings are not numbers.
Values that cannot be represented as a finite decimal fall back to zero unless
strict mode is on, in which case they are rejected.
"""

import logging
import numbers
from decimal import Decimal

from .exceptions import InputDecodeError, NumericCoercionError
from .value_objects import DECIMAL_MAX, ZERO

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("cost_amount", "sale_amount", "vat_rate", "commission_rate")


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, bool):
        raise InputDecodeError("boolean is not a valid number")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # str() gives the shortest repr, so 0.1 stays 0.1 rather than its binary expansion
        return Decimal(str(value))
    if isinstance(value, str):
        raise InputDecodeError("string is not a valid number")
    if isinstance(value, numbers.Real):
        return Decimal(str(float(value)))
    raise InputDecodeError(f"{type(value).__name__} is not a valid number")


def is_representable(value: Decimal) -> bool:
    # copy_abs() applies no context, so huge exponents cannot trap here
    return value.is_finite() and value.copy_abs() <= DECIMAL_MAX


def normalize_decimal(value: object, field_name: str, strict: bool = False) -> Decimal:
    """
    Convert one numeric field to Decimal.

    Non-finite or out-of-range values become Decimal("0") and a warning is
    logged. With strict=True they raise NumericCoercionError instead.
    """
    number = _to_decimal(value)
    if is_representable(number):
        return number
    if strict:
        raise NumericCoercionError(field_name, value)
    logger.warning(
        "Numeric field %s=%r is not representable, using 0",
        field_name,
        value,
        extra={"field": field_name},
    )
    return ZERO


def normalize_currency(value: object) -> str:
    if not isinstance(value, str):
        raise InputDecodeError("currency must be a string")
    return value.strip().upper()
