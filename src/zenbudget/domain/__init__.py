"""Domain layer for zenbudget application."""

from zenbudget.domain.ledger import TransactionStore
from zenbudget.domain.search import filter_transactions
from zenbudget.domain.summary import compute_totals, compute_category_breakdown
from zenbudget.domain.category import get_category_style

__all__ = [
    "TransactionStore",
    "filter_transactions",
    "compute_totals",
    "compute_category_breakdown",
    "get_category_style",
]
