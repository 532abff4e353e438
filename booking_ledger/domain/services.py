"""
Domain Services - Financial calculation, journal generation and batch totals
for tourism bookings. All arithmetic is exact decimal arithmetic.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal
from operator import attrgetter

from .arithmetic import exact_arithmetic, percent_of
from .entities import JournalEntries, JournalEntry
from .exceptions import BookingCalculationError, VatDivisorError
from .value_objects import (
    HUNDRED,
    ONE,
    ZERO,
    AccountCode,
    BatchResult,
    BatchSummary,
    BookingFinancials,
    BookingInput,
    Money,
    SkippedBooking,
    VatBreakdown,
)

logger = logging.getLogger(__name__)


def vat_breakdown(sale_amount: Decimal, vat_rate: Decimal) -> VatBreakdown:
    """
    Back VAT out of a VAT-inclusive sale amount.

    vat_divisor = 1 + vat_rate / 100, net = sale / divisor, vat = sale - net.
    Must be called inside exact_arithmetic().
    """
    vat_divisor = ONE + vat_rate / HUNDRED
    if vat_divisor == ZERO:
        raise VatDivisorError(vat_rate)
    net_before_vat = sale_amount / vat_divisor
    vat_amount = sale_amount - net_before_vat
    return VatBreakdown(
        vat_divisor=vat_divisor,
        net_before_vat=net_before_vat,
        vat_amount=vat_amount,
    )


class BookingFinancialService:
    """
    Service - Profit, VAT, commission and margin for a single booking.

    VAT is treated as included in the sale price. Commission is charged on
    gross profit, so a loss-making booking gets a negative commission.
    """

    def calculate(self, booking: BookingInput) -> BookingFinancials:
        with exact_arithmetic():
            cost = booking.cost_amount
            sale = booking.sale_amount

            gross_profit = sale - cost
            vat = vat_breakdown(sale, booking.vat_rate)
            commission_amount = percent_of(gross_profit, booking.commission_rate)
            net_profit = gross_profit - commission_amount

            return BookingFinancials(
                gross_profit=gross_profit,
                vat_amount=vat.vat_amount,
                net_before_vat=vat.net_before_vat,
                total_with_vat=sale,
                commission_amount=commission_amount,
                net_profit=net_profit,
                profit_margin_percentage=self.profit_margin(net_profit, sale),
            )

    @staticmethod
    def profit_margin(net_profit: Decimal, sale_amount: Decimal) -> Decimal:
        """Net profit as a percentage of sale; zero when there is no sale."""
        if sale_amount > ZERO:
            return net_profit / sale_amount * HUNDRED
        return ZERO


class JournalGenerationService:
    """
    Service - Five-line double-entry journal for a booking.

    Receivable = Revenue + VAT Payable, Cost of Sales = Payable, so the
    journal balances by construction.
    """

    def generate(self, booking: BookingInput) -> JournalEntries:
        accounts = self._get_default_accounts()
        currency = booking.currency

        with exact_arithmetic():
            vat = vat_breakdown(booking.sale_amount, booking.vat_rate)

        sale = Money(booking.sale_amount, currency)
        cost = Money(booking.cost_amount, currency)

        entries = (
            JournalEntry.debit_line(
                *accounts["receivable"], sale, "Customer invoice for booking"
            ),
            JournalEntry.credit_line(
                *accounts["revenue"],
                Money(vat.net_before_vat, currency),
                "Revenue from booking (net of VAT)",
            ),
            JournalEntry.credit_line(
                *accounts["vat_payable"],
                Money(vat.vat_amount, currency),
                "VAT collected on sale",
            ),
            JournalEntry.debit_line(
                *accounts["cost_of_sales"], cost, "Cost paid to supplier"
            ),
            JournalEntry.credit_line(
                *accounts["payable"], cost, "Amount due to supplier"
            ),
        )
        return JournalEntries(entries=entries, currency=currency)

    def _get_default_accounts(self) -> dict[str, tuple[AccountCode, str]]:
        """Fixed booking accounts: key -> (code, name)."""
        return {
            "receivable": (AccountCode("1201"), "Accounts Receivable - Customers"),
            "revenue": (AccountCode("4101"), "Sales Revenue - Tourism Services"),
            "vat_payable": (AccountCode("2301"), "VAT Payable"),
            "cost_of_sales": (AccountCode("5101"), "Cost of Sales - Tourism Services"),
            "payable": (AccountCode("2101"), "Accounts Payable - Suppliers"),
        }


class BatchAggregationService:
    """
    Service - Run the financial calculation over many bookings and total them.

    A booking that fails to calculate is skipped and left out of the totals;
    it never aborts the batch.
    """

    def __init__(self, calculator: BookingFinancialService | None = None):
        self.calculator = calculator or BookingFinancialService()

    def aggregate(
        self,
        bookings: Sequence[BookingInput],
        positions: Sequence[int] | None = None,
        skipped: Sequence[SkippedBooking] = (),
    ) -> BatchResult:
        """
        Calculate every booking and reduce into a BatchSummary.

        `positions` gives each booking's index in the caller's input when some
        inputs were already dropped (e.g. failed to decode); those are passed
        in `skipped` so every SkippedBooking refers to the caller's input.
        """
        if positions is None:
            positions = range(len(bookings))
        elif len(positions) != len(bookings):
            raise ValueError("positions must match bookings one to one")

        results: list[BookingFinancials] = []
        rejected: list[SkippedBooking] = list(skipped)
        total_cost = total_revenue = total_profit = total_vat = total_commission = ZERO

        for index, booking in zip(positions, bookings):
            try:
                financials = self.calculator.calculate(booking)
            except BookingCalculationError as exc:
                logger.warning("Skipping booking %d in batch: %s", index, exc)
                rejected.append(SkippedBooking(index=index, reason=str(exc)))
                continue

            with exact_arithmetic():
                total_cost += booking.cost_amount
                total_revenue += booking.sale_amount
                total_profit += financials.net_profit
                total_vat += financials.vat_amount
                total_commission += financials.commission_amount
            results.append(financials)

        with exact_arithmetic():
            average_margin = BookingFinancialService.profit_margin(total_profit, total_revenue)

        summary = BatchSummary(
            total_cost=total_cost,
            total_revenue=total_revenue,
            total_profit=total_profit,
            total_vat=total_vat,
            total_commission=total_commission,
            average_profit_margin=average_margin,
            booking_count=len(results),
        )
        logger.debug(
            "Batch aggregated: %d calculated, %d skipped", len(results), len(rejected)
        )
        return BatchResult(
            results=tuple(results),
            summary=summary,
            skipped=tuple(sorted(rejected, key=attrgetter("index"))),
        )
