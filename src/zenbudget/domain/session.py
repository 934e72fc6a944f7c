"""Ledger session: user intents in, recomputed views out."""

import logging

from zenbudget.domain.entities import CategoryBreakdownItem, Totals, Transaction
from zenbudget.domain.ledger import TransactionStore
from zenbudget.domain.search import filter_transactions
from zenbudget.domain.summary import compute_category_breakdown, compute_totals
from zenbudget.domain.view_model import LedgerView, build_ledger_view
from zenbudget.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)


class LedgerSession:
    """Service for handling user intents against a transaction store.

    Derived state is never cached: every read recomputes from the full
    current store, so results always reflect the latest mutation.
    """

    def __init__(self, store: TransactionStore, search_term: str = ""):
        """Initialize ledger session.

        Args:
            store: Loaded transaction store
            search_term: Initial search term for the transaction list
        """
        self.store = store
        self._search_term = search_term

    @property
    def search_term(self) -> str:
        return self._search_term

    def set_search_term(self, text: str) -> None:
        """Set the free-text filter applied to the transaction list."""
        self._search_term = text or ""

    def add_transaction(self, name: str, amount_text: str, category: str) -> Transaction:
        """Add a transaction from raw user input.

        Args:
            name: Transaction name
            amount_text: Amount as typed, e.g. "-12.50" or "$1,200"
            category: Category label

        Returns:
            The new transaction

        Raises:
            ValidationError: If any field is invalid; nothing is stored
        """
        amount = parse_amount(amount_text)
        return self.store.append(name, amount, category)

    def clear_all(self) -> None:
        """Remove every transaction."""
        self.store.clear_all()

    def filtered(self) -> list[Transaction]:
        return filter_transactions(self.store.records, self._search_term)

    def totals(self) -> Totals:
        return compute_totals(self.store.records)

    def breakdown(self) -> list[CategoryBreakdownItem]:
        return compute_category_breakdown(self.store.records)

    def view(self) -> LedgerView:
        """Recompute the full view model from the current store."""
        records = self.store.records
        logger.debug("Recomputing view over %d transaction(s)", len(records))
        return build_ledger_view(
            filter_transactions(records, self._search_term),
            compute_totals(records),
            compute_category_breakdown(records),
        )
