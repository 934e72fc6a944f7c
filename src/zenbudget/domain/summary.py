"""Totals and category breakdown over the full ledger."""

from decimal import Decimal, localcontext
from typing import Iterable

from zenbudget.domain.entities import SUM_PRECISION, CategoryBreakdownItem, Totals, Transaction

ZERO = Decimal("0")


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    """Sum income and expenses and derive the net balance.

    Expenses are accumulated as absolute values. Sums are exact: they run at
    SUM_PRECISION digits, which covers any ledger of in-range amounts.

    Args:
        transactions: Transactions to total, always the full store

    Returns:
        Totals for the given transactions
    """
    income = ZERO
    expense = ZERO
    with localcontext() as ctx:
        ctx.prec = SUM_PRECISION
        for txn in transactions:
            if txn.is_income:
                income += txn.amount
            else:
                expense += txn.amount.copy_abs()
        balance = income - expense
    return Totals(income=income, expense=expense, balance=balance)


def aggregate_expenses_by_category(
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Group expense magnitudes by category in first-seen order."""
    groups: dict[str, Decimal] = {}
    with localcontext() as ctx:
        ctx.prec = SUM_PRECISION
        for txn in transactions:
            if not txn.is_expense:
                continue
            groups[txn.category] = groups.get(txn.category, ZERO) + txn.amount.copy_abs()
    return groups


def compute_category_breakdown(
    transactions: Iterable[Transaction],
) -> list[CategoryBreakdownItem]:
    """Build the per-category spending breakdown.

    Only expenses contribute. Categories appear in the order they are first
    met while scanning the transactions front to back. When total spending is
    zero every percentage is 0.

    Args:
        transactions: Transactions to summarize, always the full store

    Returns:
        Breakdown items, one per expense category
    """
    groups = aggregate_expenses_by_category(transactions)
    with localcontext() as ctx:
        ctx.prec = SUM_PRECISION
        total = sum(groups.values(), ZERO)

    results: list[CategoryBreakdownItem] = []
    for category, amount in groups.items():
        percentage = float(amount / total * 100) if total > 0 else 0.0
        results.append(
            CategoryBreakdownItem(category=category, amount=amount, percentage=percentage)
        )
    return results
