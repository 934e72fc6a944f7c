"""Domain model entities for zenbudget.

These are pure data classes representing ledger concepts, independent of
how the ledger is persisted. Derived values such as a transaction's kind are
computed from the stored fields rather than stored alongside them, so they
can never drift out of sync.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Union

TransactionId = Union[int, str]

# Amounts must stay below this magnitude and carry at most AMOUNT_MAX_PLACES
# decimal places, so totals over them are exact at SUM_PRECISION digits.
AMOUNT_LIMIT = Decimal("1e15")
AMOUNT_MAX_PLACES = 20
SUM_PRECISION = 64


def amount_in_range(amount: Decimal) -> bool:
    """Return True if a finite amount is within the supported magnitude and scale."""
    return amount.copy_abs() < AMOUNT_LIMIT and amount.as_tuple().exponent >= -AMOUNT_MAX_PLACES


class TransactionKind(str, Enum):
    """Income or expense classification derived from the amount sign."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def for_amount(cls, amount: Decimal) -> "TransactionKind":
        return cls.INCOME if amount >= 0 else cls.EXPENSE


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: TransactionId
    name: str
    amount: Decimal
    category: str
    date: datetime

    @property
    def kind(self) -> TransactionKind:
        return TransactionKind.for_amount(self.amount)

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind is TransactionKind.EXPENSE


@dataclass(frozen=True)
class Totals:
    """Income, expense and net balance over a set of transactions.

    ``expense`` is reported as a positive magnitude.
    """

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """Expense total for one category and its share of all expenses."""

    category: str
    amount: Decimal
    percentage: float


@dataclass(frozen=True)
class CategoryStyle:
    """Display metadata for a category label."""

    color: str
    icon: str
