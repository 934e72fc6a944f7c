"""Abstract slot storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Abstract key-value slot storage for zenbudget.

    Implementations store opaque text blobs under string keys and raise
    PersistenceError for any backend failure.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def read_slot(self, key: str) -> Optional[str]:
        """Read the blob stored under key. Returns None if the slot is absent."""
        pass

    @abstractmethod
    def write_slot(self, key: str, value: str) -> None:
        """Write a blob under key, replacing any previous value."""
        pass
