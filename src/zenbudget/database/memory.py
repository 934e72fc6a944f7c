"""In-memory slot storage."""

from typing import Optional

from zenbudget.database.base import Storage


class InMemoryStorage(Storage):
    """Storage that keeps slots in a dict for the lifetime of the process.

    Used when durable storage is unavailable, and by tests.
    """

    def __init__(self, slots: Optional[dict[str, str]] = None):
        self.slots: dict[str, str] = dict(slots or {})

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def read_slot(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def write_slot(self, key: str, value: str) -> None:
        self.slots[key] = value
