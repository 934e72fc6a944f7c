"""Free-text filtering over transactions."""

from typing import Iterable, Optional

from zenbudget.domain.entities import Transaction


def normalize_search_term(search_term: Optional[str]) -> str:
    """Trim and casefold a search term; None is treated as empty."""
    if search_term is None:
        return ""
    return search_term.strip().casefold()


def matches(transaction: Transaction, needle: str) -> bool:
    """Check a normalized term against name, category or kind."""
    return (
        needle in transaction.name.casefold()
        or needle in transaction.category.casefold()
        or needle in transaction.kind.value
    )


def filter_transactions(
    transactions: Iterable[Transaction], search_term: Optional[str]
) -> list[Transaction]:
    """Filter transactions by a case-insensitive substring.

    A blank term returns a new list holding every input transaction. Otherwise
    a transaction is kept when the term appears in its name, its category or
    its kind. Input order is preserved.

    Args:
        transactions: Transactions to filter, usually the full store
        search_term: Free text typed by the user

    Returns:
        New list of matching transactions
    """
    needle = normalize_search_term(search_term)
    if not needle:
        return list(transactions)
    return [txn for txn in transactions if matches(txn, needle)]
