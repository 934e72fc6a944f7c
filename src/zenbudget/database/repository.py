"""Best-effort persistence of the transaction collection."""

import json
import logging
from typing import Sequence

from zenbudget.database.base import Storage
from zenbudget.database.mappers import record_to_transaction, transaction_to_record
from zenbudget.domain.entities import Transaction
from zenbudget.domain.errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "zenbudget_transactions"


class TransactionRepository:
    """Reads and writes the full transaction collection to one storage slot.

    Every failure degrades to in-memory operation: ``save`` logs and returns,
    ``load`` logs and returns an empty list. Neither raises.
    """

    def __init__(self, storage: Storage, slot: str = DEFAULT_SLOT):
        """Initialize transaction repository.

        Args:
            storage: Storage instance holding the slot
            slot: Key of the slot that holds the serialized collection
        """
        self.storage = storage
        self.slot = slot

    def save(self, transactions: Sequence[Transaction]) -> None:
        """Serialize and write the full collection, in order."""
        try:
            blob = json.dumps([transaction_to_record(txn) for txn in transactions])
            self.storage.write_slot(self.slot, blob)
        except (PersistenceError, TypeError, ValueError) as e:
            logger.error("Error saving transactions: %s", e)
            return
        logger.debug("Saved %d transaction(s)", len(transactions))

    def load(self) -> list[Transaction]:
        """Read the collection back. Absent, unreadable or corrupt slots yield []."""
        try:
            blob = self.storage.read_slot(self.slot)
        except PersistenceError as e:
            logger.error("Error loading transactions: %s", e)
            return []

        if blob is None:
            return []

        try:
            records = json.loads(blob)
            if not isinstance(records, list):
                raise ValueError(
                    f"Expected a list of transactions, got {type(records).__name__}"
                )
            transactions = [record_to_transaction(record) for record in records]
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            logger.warning("Discarding unreadable transaction data in '%s': %s", self.slot, e)
            return []

        logger.debug("Loaded %d transaction(s)", len(transactions))
        return transactions
