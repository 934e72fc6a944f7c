"""Generic SQLAlchemy slot storage implementation."""

import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from zenbudget.database.base import Storage
from zenbudget.database.models import (
    Base,
    StorageSlot,
    create_session_factory,
    create_storage_engine,
)
from zenbudget.domain.errors import (
    PersistenceError,
    slot_read_failed,
    slot_write_failed,
)

logger = logging.getLogger(__name__)


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of Storage interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.engine = create_storage_engine(database_url)
        self.session_factory = create_session_factory(self.engine)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database and release pooled connections."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self.engine.dispose()

    def initialize_schema(self) -> None:
        """Create the slot table if it does not exist.

        Raises:
            PersistenceError: If the database cannot be opened or created
        """
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Could not initialize storage at {self.database_url}: {e}"
            ) from e

    def read_slot(self, key: str) -> Optional[str]:
        """Read the blob stored under key.

        Raises:
            PersistenceError: If the query fails
        """
        session = self._get_session()
        try:
            slot = session.query(StorageSlot).filter(StorageSlot.key == key).first()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(slot_read_failed(key, e)) from e
        if slot is None:
            return None
        return slot.value

    def write_slot(self, key: str, value: str) -> None:
        """Write a blob under key, replacing any previous value.

        Raises:
            PersistenceError: If the write cannot be committed
        """
        session = self._get_session()
        try:
            slot = session.query(StorageSlot).filter(StorageSlot.key == key).first()
            if slot is None:
                session.add(StorageSlot(key=key, value=value))
            else:
                slot.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(slot_write_failed(key, e)) from e
        logger.debug("Wrote %d characters to slot '%s'", len(value), key)
