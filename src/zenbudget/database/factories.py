"""Storage factory functions for creating storage instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from zenbudget.database.sqlalchemy_db import SQLAlchemyStorage

logger = logging.getLogger(__name__)

DB_PATH_ENV = "ZENBUDGET_DB_PATH"
DEFAULT_DB_PATH = Path("~") / ".zenbudget" / "zenbudget.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the ledger file: explicit path, then $ZENBUDGET_DB_PATH, then the home default."""
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)
    if not database_path:
        return DEFAULT_DB_PATH.expanduser()
    return Path(database_path).expanduser()


def create_sqlite_storage(database_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite storage instance, creating its directory if missing.

    Args:
        database_path: Path to the SQLite ledger file. If None, uses
            ZENBUDGET_DB_PATH, then ~/.zenbudget/zenbudget.db

    Returns:
        SQLAlchemyStorage instance configured for SQLite

    Raises:
        OSError: If the ledger directory cannot be created
    """
    path = resolve_database_path(database_path)
    if not path.parent.is_dir():
        logger.info("Creating ledger directory %s", path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
    return SQLAlchemyStorage(f"sqlite:///{path}")
