"""Generic SQLAlchemy database implementation."""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nospend.database.base import Database
from nospend.database.models import (
    KeyValue,
    create_db_engine,
    create_schema,
    create_session_factory,
)
from nospend.domain.errors import PersistenceError


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface.

    Every driver failure surfaces as PersistenceError, including a file that
    is not a database at all.
    """

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.engine = create_db_engine(database_url)
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
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self.engine.dispose()

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        try:
            create_schema(self.engine)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not initialize {self.database_url}: {e}") from e

    def get_value(self, key: str) -> Optional[str]:
        """Get the raw value stored under key, or None if absent."""
        session = self._get_session()
        try:
            # Another process may have written the slot since it was cached
            row = session.get(KeyValue, key, populate_existing=True)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not read '{key}': {e}") from e
        if row is None:
            return None
        return row.value

    def set_value(self, key: str, value: str) -> None:
        """Store a raw value under key, replacing any previous value."""
        session = self._get_session()
        try:
            row = session.get(KeyValue, key, populate_existing=True)
            if row is None:
                session.add(KeyValue(key=key, value=value))
            else:
                row.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not write '{key}': {e}") from e
