"""Domain layer for nospend application."""

from nospend.domain.challenge import compute_window
from nospend.domain.ledger import Ledger
from nospend.domain.stats import compute_stats
from nospend.domain.persistence import LedgerRepository
from nospend.domain.motivation import MotivationFeed

__all__ = [
    "compute_window",
    "Ledger",
    "compute_stats",
    "LedgerRepository",
    "MotivationFeed",
]
