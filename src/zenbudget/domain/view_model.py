"""View models handed to the presentation layer.

Everything here is already formatted for display, so renderers only lay
out strings and never touch amounts or percentages themselves.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Sequence

from zenbudget.domain.category import get_category_style
from zenbudget.domain.entities import (
    CategoryBreakdownItem,
    CategoryStyle,
    Totals,
    Transaction,
    TransactionId,
    TransactionKind,
)
from zenbudget.utils.currency import format_currency, format_signed_currency, format_timestamp


class BalanceState(str, Enum):
    """Sign of the net balance, used to color it."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"

    @classmethod
    def for_amount(cls, amount: Decimal) -> "BalanceState":
        if amount > 0:
            return cls.POSITIVE
        if amount < 0:
            return cls.NEGATIVE
        return cls.ZERO


@dataclass(frozen=True)
class TransactionRow:
    """One line of the transaction list."""

    id: TransactionId
    name: str
    category: str
    kind: TransactionKind
    amount_label: str
    date_label: str
    style: CategoryStyle


@dataclass(frozen=True)
class BalanceView:
    """Formatted totals."""

    balance_label: str
    income_label: str
    expense_label: str
    state: BalanceState


@dataclass(frozen=True)
class CategoryBar:
    """One bar of the spending summary."""

    category: str
    amount_label: str
    percentage: float
    percentage_label: str
    style: CategoryStyle


@dataclass(frozen=True)
class LedgerView:
    """Everything needed to render the ledger screen."""

    rows: tuple[TransactionRow, ...]
    balance: BalanceView
    bars: tuple[CategoryBar, ...]

    @property
    def is_empty_list(self) -> bool:
        return not self.rows

    @property
    def is_empty_summary(self) -> bool:
        return not self.bars


def build_transaction_row(transaction: Transaction) -> TransactionRow:
    return TransactionRow(
        id=transaction.id,
        name=transaction.name,
        category=transaction.category,
        kind=transaction.kind,
        amount_label=format_signed_currency(transaction.amount),
        date_label=format_timestamp(transaction.date),
        style=get_category_style(transaction.category),
    )


def build_balance_view(totals: Totals) -> BalanceView:
    return BalanceView(
        balance_label=format_currency(totals.balance),
        income_label=format_currency(totals.income),
        expense_label=format_currency(totals.expense),
        state=BalanceState.for_amount(totals.balance),
    )


def build_category_bar(item: CategoryBreakdownItem) -> CategoryBar:
    return CategoryBar(
        category=item.category,
        amount_label=format_currency(item.amount),
        percentage=item.percentage,
        percentage_label=f"{item.percentage:.1f}%",
        style=get_category_style(item.category),
    )


def build_ledger_view(
    transactions: Sequence[Transaction],
    totals: Totals,
    breakdown: Sequence[CategoryBreakdownItem],
) -> LedgerView:
    """Build the ledger view model.

    Args:
        transactions: Filtered transactions for the list, in display order
        totals: Totals over the full ledger
        breakdown: Category breakdown over the full ledger

    Returns:
        LedgerView ready for rendering
    """
    return LedgerView(
        rows=tuple(build_transaction_row(txn) for txn in transactions),
        balance=build_balance_view(totals),
        bars=tuple(build_category_bar(item) for item in breakdown),
    )
