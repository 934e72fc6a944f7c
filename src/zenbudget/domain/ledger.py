"""Transaction store: the canonical in-memory ledger."""

import logging
import math
import uuid
from datetime import datetime, timedelta, UTC
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Iterator, Optional, Union

from zenbudget.domain.entities import (
    AMOUNT_LIMIT,
    AMOUNT_MAX_PLACES,
    Transaction,
    TransactionId,
    amount_in_range,
)
from zenbudget.domain.errors import (
    ValidationError,
    amount_out_of_range,
    empty_category,
    empty_name,
    invalid_amount,
    zero_amount,
)

if TYPE_CHECKING:
    from zenbudget.database.repository import TransactionRepository

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]

# (name, amount, category, days ago)
SAMPLE_TRANSACTIONS: tuple[tuple[str, str, str, int], ...] = (
    ("Salary", "3500", "Income", 7),
    ("Rent", "-1200", "Rent", 6),
    ("Groceries", "-150", "Food", 5),
    ("Concert Tickets", "-85", "Fun", 4),
    ("Freelance Work", "800", "Income", 3),
    ("Restaurant", "-65", "Food", 2),
    ("Netflix Subscription", "-15.99", "Fun", 1),
    ("Coffee Shop", "-12.5", "Food", 0),
)


def generate_transaction_id() -> str:
    """Return a new globally unique transaction ID."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_amount(amount: Number) -> Decimal:
    """Normalize a numeric amount to Decimal.

    Raises:
        ValidationError: If amount is not a finite, non-zero number within
            the supported magnitude and scale
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ValidationError(invalid_amount(amount))
    if isinstance(amount, float):
        if not math.isfinite(amount):
            raise ValidationError(invalid_amount(amount))
        # str() keeps the shortest repr, so 12.5 becomes Decimal("12.5")
        amount = Decimal(str(amount))
    elif isinstance(amount, int):
        amount = Decimal(amount)
    if not amount.is_finite():
        raise ValidationError(invalid_amount(amount))
    if amount == 0:
        raise ValidationError(zero_amount())
    if not amount_in_range(amount):
        raise ValidationError(
            amount_out_of_range(amount, int(AMOUNT_LIMIT), AMOUNT_MAX_PLACES)
        )
    return amount


class TransactionStore:
    """Owns the ledger's transactions, newest first.

    Each mutation writes the full collection through the repository.
    Filtering and aggregation read ``records`` and never hold on to it.
    """

    def __init__(
        self,
        repository: "TransactionRepository",
        id_factory: Callable[[], TransactionId] = generate_transaction_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize transaction store.

        Args:
            repository: Repository used to load and persist the collection
            id_factory: Callable returning a fresh unique ID per call
            clock: Callable returning the current timezone-aware time
        """
        self.repository = repository
        self.id_factory = id_factory
        self.clock = clock
        self._transactions: list[Transaction] = []

    @property
    def records(self) -> tuple[Transaction, ...]:
        """Snapshot of all transactions, newest first."""
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.records)

    def load(self) -> None:
        """Replace in-memory state with the persisted collection.

        The repository never raises; unreadable data loads as an empty ledger.
        """
        self._transactions = list(self.repository.load())
        logger.info("Loaded %d transaction(s)", len(self._transactions))

    def persist(self) -> None:
        self.repository.save(self._transactions)

    def append(self, name: str, amount: Number, category: str) -> Transaction:
        """Add a transaction at the front of the ledger.

        Args:
            name: Transaction name, trimmed before storing
            amount: Signed amount; positive is income, negative is expense
            category: Category label, trimmed before storing

        Returns:
            The new transaction

        Raises:
            ValidationError: If name or category is blank, or amount is not
                a finite non-zero number. The ledger is left unchanged.
        """
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError(empty_name())
        txn_amount = to_amount(amount)
        clean_category = (category or "").strip()
        if not clean_category:
            raise ValidationError(empty_category())

        transaction = Transaction(
            id=self.id_factory(),
            name=clean_name,
            amount=txn_amount,
            category=clean_category,
            date=self.clock(),
        )
        self._transactions.insert(0, transaction)
        self.persist()
        logger.debug("Added %s '%s' (%s)", transaction.kind.value, clean_name, transaction.id)
        return transaction

    def clear_all(self) -> None:
        """Remove every transaction and persist the empty ledger."""
        count = len(self._transactions)
        self._transactions = []
        self.persist()
        logger.info("Cleared %d transaction(s)", count)

    def add_sample_data(self, now: Optional[datetime] = None) -> bool:
        """Fill an empty ledger with sample transactions.

        Args:
            now: Reference time for sample dates, defaults to the store clock

        Returns:
            True if sample data was loaded, False if the ledger was not empty
        """
        if self._transactions:
            return False

        now = now or self.clock()
        self._transactions = [
            Transaction(
                id=self.id_factory(),
                name=name,
                amount=Decimal(amount),
                category=category,
                date=now - timedelta(days=days_ago),
            )
            for name, amount, category, days_ago in SAMPLE_TRANSACTIONS
        ]
        self.persist()
        logger.info("Loaded %d sample transaction(s)", len(self._transactions))
        return True
