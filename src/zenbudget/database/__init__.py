"""Storage layer for zenbudget application."""

from zenbudget.database.base import Storage
from zenbudget.database.factories import create_sqlite_storage
from zenbudget.database.memory import InMemoryStorage
from zenbudget.database.repository import TransactionRepository

__all__ = ["Storage", "create_sqlite_storage", "InMemoryStorage", "TransactionRepository"]
