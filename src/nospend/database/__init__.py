"""Database layer for nospend application."""

from nospend.database.base import Database
from nospend.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
