"""Domain errors raised by the booking ledger engine."""


class BookingLedgerError(ValueError):
    """Base class for every error the engine raises on purpose."""


class InputDecodeError(BookingLedgerError):
    """Payload does not match the expected booking schema."""


class NumericCoercionError(BookingLedgerError):
    """A numeric field could not be represented as a finite decimal."""

    def __init__(self, field_name: str, value: object):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name}: {value!r} is not a representable decimal amount")


class BookingCalculationError(BookingLedgerError):
    """Financial figures for a booking could not be computed."""


class VatDivisorError(BookingCalculationError):
    """VAT rate of -100% leaves nothing to divide the sale amount by."""

    def __init__(self, vat_rate: object):
        self.vat_rate = vat_rate
        super().__init__(f"VAT rate {vat_rate}% produces a zero VAT divisor")
