"""
Domain Entities - Double-entry journal for a booking.
Total debits must equal total credits.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .arithmetic import exact_arithmetic
from .value_objects import BALANCE_TOLERANCE, DEFAULT_CURRENCY, AccountCode, Money


@dataclass(frozen=True, slots=True)
class JournalEntry:
    """
    One journal line. Exactly one of debit/credit carries the amount,
    the other side is zero.
    """
    account_code: AccountCode
    account_name: str
    debit: Money
    credit: Money
    description: str = ""

    @classmethod
    def debit_line(cls, code: AccountCode, name: str, amount: Money, description: str) -> "JournalEntry":
        return cls(code, name, debit=amount, credit=Money.zero(amount.currency), description=description)

    @classmethod
    def credit_line(cls, code: AccountCode, name: str, amount: Money, description: str) -> "JournalEntry":
        return cls(code, name, debit=Money.zero(amount.currency), credit=amount, description=description)


@dataclass(frozen=True, slots=True)
class JournalEntries:
    """
    Ordered journal for one booking. Totals are derived from the lines,
    never stored separately.
    """
    entries: tuple[JournalEntry, ...]
    currency: str = DEFAULT_CURRENCY

    @property
    def total_debit(self) -> Money:
        return self._sum(entry.debit for entry in self.entries)

    @property
    def total_credit(self) -> Money:
        return self._sum(entry.credit for entry in self.entries)

    @property
    def difference(self) -> Money:
        with exact_arithmetic():
            return self.total_debit - self.total_credit

    def _sum(self, amounts: Iterable[Money]) -> Money:
        total = Money.zero(self.currency)
        with exact_arithmetic():
            for amount in amounts:
                total += amount
        return total

    def is_balanced(self) -> bool:
        return self.difference.amount.copy_abs() < BALANCE_TOLERANCE

    def __len__(self) -> int:
        return len(self.entries)
