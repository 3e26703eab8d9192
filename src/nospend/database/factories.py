"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from nospend.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "NOSPEND_DB_PATH"
DEFAULT_DB_DIR = ".nospend"
DEFAULT_DB_NAME = "nospend.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the database file: explicit path, then $NOSPEND_DB_PATH, then ~/.nospend."""
    chosen = database_path or os.environ.get(DB_PATH_ENV)
    if chosen:
        return Path(chosen).expanduser()

    db_dir = Path.home() / DEFAULT_DB_DIR
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DEFAULT_DB_NAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    The file is not opened here; call initialize_schema() before first use.
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
