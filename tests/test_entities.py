"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from zenbudget.domain.entities import (
    CategoryBreakdownItem,
    Totals,
    Transaction,
    TransactionKind,
)


def _transaction(amount: str, **overrides) -> Transaction:
    fields = dict(
        id=1,
        name="Groceries",
        amount=Decimal(amount),
        category="Food",
        date=datetime(2024, 1, 15, tzinfo=UTC),
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestTransaction:
    """Tests for Transaction entity."""

    def test_create_transaction(self):
        """Test creating a Transaction entity."""
        txn = _transaction("-150")
        assert txn.id == 1
        assert txn.name == "Groceries"
        assert txn.amount == Decimal("-150")
        assert txn.category == "Food"
        assert isinstance(txn.date, datetime)

    @pytest.mark.parametrize(
        "amount, kind",
        [
            ("3500", TransactionKind.INCOME),
            ("0.01", TransactionKind.INCOME),
            ("0", TransactionKind.INCOME),
            ("-0.01", TransactionKind.EXPENSE),
            ("-1200", TransactionKind.EXPENSE),
        ],
    )
    def test_kind_follows_amount_sign(self, amount, kind):
        """Test that kind is income iff amount >= 0."""
        txn = _transaction(amount)
        assert txn.kind is kind
        assert txn.is_income == (kind is TransactionKind.INCOME)
        assert txn.is_expense == (kind is TransactionKind.EXPENSE)

    def test_kind_value_is_lowercase_label(self):
        assert _transaction("10").kind.value == "income"
        assert _transaction("-10").kind.value == "expense"

    def test_transaction_immutability(self):
        """Test that Transaction entities are immutable."""
        txn = _transaction("-150")
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            txn.amount = Decimal("150")

    def test_transaction_equality(self):
        """Test Transaction entity equality."""
        assert _transaction("-150") == _transaction("-150")
        assert _transaction("-150") != _transaction("-150", id=2)


class TestValueTypes:
    """Tests for aggregation value types."""

    def test_totals_default_to_zero(self):
        totals = Totals()
        assert totals.income == Decimal("0")
        assert totals.expense == Decimal("0")
        assert totals.balance == Decimal("0")

    def test_breakdown_item_fields(self):
        item = CategoryBreakdownItem(category="Food", amount=Decimal("200"), percentage=50.0)
        assert item.category == "Food"
        assert item.amount == Decimal("200")
        assert item.percentage == 50.0
