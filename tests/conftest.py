"""Shared pytest fixtures for zenbudget tests."""

import tempfile
import os
from datetime import datetime, timedelta, UTC
from itertools import count
import pytest

from zenbudget.database.factories import create_sqlite_storage
from zenbudget.database.memory import InMemoryStorage
from zenbudget.database.repository import TransactionRepository
from zenbudget.domain.errors import PersistenceError
from zenbudget.domain.ledger import TransactionStore
from zenbudget.domain.session import LedgerSession

START_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


class FailingStorage(InMemoryStorage):
    """Storage whose reads and/or writes always fail."""

    def __init__(self, fail_reads: bool = False, fail_writes: bool = True, slots=None):
        super().__init__(slots)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_attempts = 0

    def read_slot(self, key):
        if self.fail_reads:
            raise PersistenceError(f"read of '{key}' refused")
        return super().read_slot(key)

    def write_slot(self, key, value):
        self.write_attempts += 1
        if self.fail_writes:
            raise PersistenceError("quota exceeded")
        super().write_slot(key, value)


class CapacityLimitedStorage(InMemoryStorage):
    """Storage that rejects blobs longer than a fixed number of characters."""

    def __init__(self, capacity: int):
        super().__init__()
        self.capacity = capacity

    def write_slot(self, key, value):
        if len(value) > self.capacity:
            raise PersistenceError(f"quota exceeded: {len(value)} > {self.capacity}")
        super().write_slot(key, value)


def sequential_ids():
    """Return an id factory yielding 1, 2, 3, ..."""
    counter = count(1)
    return lambda: next(counter)


def ticking_clock(start: datetime = START_TIME):
    """Return a clock that advances one minute per call."""
    ticks = count()
    return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def temp_db():
    """Create a temporary SQLite storage for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create storage
    db = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_storage():
    """Create an empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def repository(memory_storage):
    """Create a TransactionRepository over in-memory storage."""
    return TransactionRepository(memory_storage)


@pytest.fixture
def store(repository):
    """Create an empty store with deterministic ids and timestamps."""
    return TransactionStore(repository, id_factory=sequential_ids(), clock=ticking_clock())


@pytest.fixture
def session(store):
    """Create a LedgerSession over the deterministic store."""
    return LedgerSession(store)


@pytest.fixture
def scenario_store(store):
    """Store holding the salary and rent transactions from the README."""
    store.append("Salary", 3500, "Income")
    store.append("Rent", -1200, "Rent")
    return store


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_store():
    """Factory building a deterministic store over the given storage."""

    def _make_store(storage):
        return TransactionStore(
            TransactionRepository(storage),
            id_factory=sequential_ids(),
            clock=ticking_clock(),
        )

    return _make_store


@pytest.fixture
def failing_storage():
    """Storage that accepts reads but fails every write."""
    return FailingStorage()


@pytest.fixture
def unreadable_storage():
    """Storage whose reads fail."""
    return FailingStorage(fail_reads=True, fail_writes=False)


@pytest.fixture
def limited_storage():
    """Storage with room for roughly two serialized transactions."""
    return CapacityLimitedStorage(capacity=300)
