"""Domain model entities for nospend.

These are pure data classes representing the challenge ledger, independent of
how they are persisted. The key-value storage layer serializes them through
the mappers in ``nospend.database.mappers``.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


BUDGET_MIN = Decimal("1500")
BUDGET_MAX = Decimal("12000")
BUDGET_STEP = Decimal("100")
DEFAULT_BUDGET = Decimal("4500")

CENTS = Decimal("0.01")


class EntryType(str, Enum):
    """Kind of ledger entry."""

    ESSENTIAL = "essential"
    SKIP = "skip"


@dataclass(frozen=True)
class Entry:
    """A single logged purchase or skipped temptation."""

    id: str
    type: EntryType
    amount: Decimal
    note: str
    created_at: datetime


@dataclass(frozen=True)
class Budget:
    """Monthly essentials budget."""

    monthly_amount: Decimal = DEFAULT_BUDGET


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of a ledger at one point in time."""

    entries: tuple[Entry, ...]
    budget: Budget


@dataclass(frozen=True)
class ChallengeWindow:
    """Position of a date relative to the February challenge."""

    is_active: bool
    day_of_month: int
    days_in_month: int
    days_left: int
    days_until_start: int
    year: int

    def status_label(self) -> str:
        """Return the short status badge shown above the stats."""
        if self.is_active:
            return f"Dag {self.day_of_month} af {self.days_in_month}"
        if self.days_until_start > 0:
            return f"Starter om {self.days_until_start} dage"
        return "Challenge afsluttet"


@dataclass(frozen=True)
class StatsSnapshot:
    """Derived statistics for a ledger and challenge window.

    Monetary values are unrounded; rounding happens when they are displayed.
    """

    essential_total: Decimal
    skip_total: Decimal
    essential_count: int
    skip_count: int
    daily_allowance: Decimal
    average_spend: Decimal
    budget_target_so_far: Decimal
    budget_delta: Decimal
    saved_amount: Decimal
    progress_ratio: Decimal

    @property
    def is_under_pace(self) -> bool:
        """True when actual spend is at or below the expected curve."""
        return self.budget_delta >= 0
