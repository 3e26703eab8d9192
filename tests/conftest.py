"""Shared pytest fixtures for nospend tests."""

import tempfile
import os
from datetime import datetime, UTC
from itertools import count
import pytest

from nospend.database.factories import create_sqlite_database
from nospend.domain.ledger import Ledger
from nospend.domain.persistence import LedgerRepository


FIXED_NOW = datetime(2025, 2, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
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
def repository(temp_db):
    """Create a LedgerRepository with a temporary database."""
    return LedgerRepository(temp_db)


@pytest.fixture
def fixed_now():
    """Timestamp used for entries created by the ledger fixture."""
    return FIXED_NOW


@pytest.fixture
def ledger():
    """Create an empty ledger with a fixed clock and predictable IDs."""
    ids = count(1)
    return Ledger(clock=lambda: FIXED_NOW, id_factory=lambda: f"entry-{next(ids)}")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
