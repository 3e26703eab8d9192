"""Loading and saving the ledger through the key-value database."""

import json
import logging
from typing import Any

from nospend.database.base import Database
from nospend.database import mappers
from nospend.domain.entities import BUDGET_MAX, BUDGET_MIN, Budget, Entry, LedgerSnapshot
from nospend.domain.errors import PersistenceError
from nospend.domain.ledger import Ledger

logger = logging.getLogger(__name__)

ENTRIES_KEY = "februar-challenge-entries"
BUDGET_KEY = "februar-challenge-budget"


class LedgerRepository:
    """Service for persisting ledger entries and budget.

    Reads never fail: absent, unreadable or malformed data is replaced by the
    defaults. Writes are best-effort and only logged on failure.
    """

    def __init__(self, db: Database):
        """Initialize ledger repository.

        Args:
            db: Database instance
        """
        self.db = db

    def load_entries(self) -> list[Entry]:
        """Load stored entries, newest first.

        Returns:
            Stored entries, or an empty list if nothing usable is stored
        """
        try:
            raw = self.db.get_value(ENTRIES_KEY)
        except PersistenceError:
            logger.warning("Could not read stored entries, starting empty", exc_info=True)
            return []
        if raw is None:
            return []

        try:
            payload: Any = json.loads(raw)
        except ValueError:
            logger.warning("Stored entries are not valid JSON, starting empty")
            return []
        if not isinstance(payload, list):
            logger.warning("Stored entries are not a list, starting empty")
            return []

        entries = []
        for item in payload:
            try:
                entries.append(mappers.entry_from_dict(item))
            except ValueError as e:
                logger.warning("Dropping stored entry: %s", e)
        return entries

    def load_budget(self) -> Budget:
        """Load the stored budget.

        Returns:
            Stored budget, or the default budget if nothing usable is stored
        """
        try:
            raw = self.db.get_value(BUDGET_KEY)
        except PersistenceError:
            logger.warning("Could not read stored budget, using default", exc_info=True)
            return Budget()
        if raw is None:
            return Budget()

        try:
            budget = mappers.budget_from_str(raw)
        except ValueError as e:
            logger.warning("%s, using default", e)
            return Budget()
        if not BUDGET_MIN <= budget.monthly_amount <= BUDGET_MAX:
            logger.warning(
                "Stored budget %s outside policy range, using default", budget.monthly_amount
            )
            return Budget()
        return budget

    def load_ledger(self, **kwargs) -> Ledger:
        """Load entries and budget into a new Ledger.

        Args:
            **kwargs: Passed to the Ledger constructor (clock, id_factory)
        """
        return Ledger(entries=self.load_entries(), budget=self.load_budget(), **kwargs)

    def save_entries(self, snapshot: LedgerSnapshot) -> bool:
        """Store the entry sequence. Returns False if the write failed."""
        try:
            self.db.set_value(ENTRIES_KEY, mappers.entries_to_json(snapshot.entries))
        except PersistenceError:
            logger.error("Failed to save entries", exc_info=True)
            return False
        logger.debug("Saved %d entries", len(snapshot.entries))
        return True

    def save_budget(self, snapshot: LedgerSnapshot) -> bool:
        """Store the budget scalar. Returns False if the write failed."""
        try:
            self.db.set_value(BUDGET_KEY, mappers.budget_to_str(snapshot.budget))
        except PersistenceError:
            logger.error("Failed to save budget", exc_info=True)
            return False
        logger.debug("Saved budget %s", snapshot.budget.monthly_amount)
        return True

    def save(self, snapshot: LedgerSnapshot) -> bool:
        """Store both slots. Returns False if either write failed."""
        entries_saved = self.save_entries(snapshot)
        budget_saved = self.save_budget(snapshot)
        return entries_saved and budget_saved
