"""SQLAlchemy models for nospend database."""

from datetime import datetime, UTC
from sqlalchemy import Column, String, Text, DateTime, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class KeyValue(Base):
    """Single storage slot holding a serialized value."""

    __tablename__ = "kv_store"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


def create_db_engine(database_url: str) -> Engine:
    """Create an engine. Nothing touches the file until the first query."""
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine)


def create_schema(engine: Engine) -> None:
    """Create the storage table if it does not exist."""
    Base.metadata.create_all(engine)
