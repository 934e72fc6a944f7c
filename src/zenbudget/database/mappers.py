"""Mapper functions to convert between domain entities and stored records.

Stored records are plain JSON-compatible dicts with the fields
``id, name, amount, category, date, kind``. Older blobs name the kind field
``type`` and store amounts as JSON numbers; both are accepted when reading.
"""

from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any

from dateutil import parser as date_parser

from zenbudget.domain.entities import Transaction, TransactionId, TransactionKind, amount_in_range


def transaction_to_record(transaction: Transaction) -> dict[str, Any]:
    """Convert a domain Transaction to a stored record."""
    return {
        "id": transaction.id,
        "name": transaction.name,
        "amount": str(transaction.amount),
        "category": transaction.category,
        "date": transaction.date.isoformat(),
        "kind": transaction.kind.value,
    }


def _parse_id(value: Any) -> TransactionId:
    # bool is a subclass of int and never a valid id
    if isinstance(value, bool):
        raise ValueError(f"Invalid transaction id {value!r}")
    if isinstance(value, (int, str)):
        return value
    if isinstance(value, float):
        # Legacy ids were millisecond timestamps, sometimes with a random fraction
        return int(value) if value.is_integer() else repr(value)
    raise ValueError(f"Invalid transaction id {value!r}")


def _parse_text(record: dict[str, Any], field: str) -> str:
    value = record.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Field '{field}' must be a non-empty string")
    return value


def _parse_amount(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Invalid amount {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount {value!r}")
    if not amount_in_range(amount):
        raise ValueError(f"Amount {value!r} is out of range")
    return amount


def _parse_date(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"Invalid date {value!r}")
    parsed = date_parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def record_to_transaction(record: Any) -> Transaction:
    """Convert a stored record to a domain Transaction.

    Raises:
        ValueError: If the record is missing fields or holds invalid values
    """
    if not isinstance(record, dict):
        raise ValueError(f"Stored transaction must be an object, got {type(record).__name__}")
    if "id" not in record:
        raise ValueError("Stored transaction has no id")

    transaction = Transaction(
        id=_parse_id(record["id"]),
        name=_parse_text(record, "name"),
        amount=_parse_amount(record.get("amount")),
        category=_parse_text(record, "category"),
        date=_parse_date(record.get("date")),
    )

    stored_kind = record.get("kind", record.get("type"))
    if stored_kind is not None:
        if TransactionKind(stored_kind) is not transaction.kind:
            raise ValueError(
                f"Stored kind '{stored_kind}' does not match amount {transaction.amount}"
            )
    return transaction
