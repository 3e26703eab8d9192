"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Database(ABC):
    """Abstract key-value database interface for nospend."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def get_value(self, key: str) -> Optional[str]:
        """Get the raw value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Store a raw value under key, replacing any previous value."""
        pass

