"""SQLAlchemy models for zenbudget storage."""

from datetime import datetime, UTC
from sqlalchemy import Column, String, Text, DateTime, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StorageSlot(Base):
    """Named slot holding one serialized blob."""

    __tablename__ = "storage_slots"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


def create_storage_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine. Connections are opened lazily."""
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to engine."""
    return sessionmaker(bind=engine)
