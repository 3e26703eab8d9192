"""Statistics derived from a ledger snapshot and challenge window."""

from decimal import Decimal
from typing import Iterable

from nospend.domain.entities import (
    ChallengeWindow,
    Entry,
    EntryType,
    LedgerSnapshot,
    StatsSnapshot,
)

ZERO = Decimal("0")
ONE = Decimal("1")


def _total(entries: Iterable[Entry]) -> Decimal:
    return sum((entry.amount for entry in entries), ZERO)


def progress_ratio(
    essential_total: Decimal, budget_target_so_far: Decimal, monthly_amount: Decimal
) -> Decimal:
    """Share of the budget used so far, clamped to [0, 1].

    Falls back to the full monthly budget as denominator when there is no
    pacing target yet.
    """
    denominator = max(budget_target_so_far or monthly_amount, monthly_amount)
    if denominator <= 0:
        return ZERO
    return min(max(essential_total / denominator, ZERO), ONE)


def compute_stats(snapshot: LedgerSnapshot, window: ChallengeWindow) -> StatsSnapshot:
    """Compute all display aggregates.

    Pure function: the same snapshot and window always give the same result.

    Args:
        snapshot: Ledger entries and budget
        window: Challenge window for the reference date

    Returns:
        StatsSnapshot with unrounded Decimal values
    """
    essentials = [e for e in snapshot.entries if e.type == EntryType.ESSENTIAL]
    skips = [e for e in snapshot.entries if e.type == EntryType.SKIP]

    monthly = snapshot.budget.monthly_amount
    essential_total = _total(essentials)
    skip_total = _total(skips)
    daily_allowance = monthly / window.days_in_month

    active_day = max(window.day_of_month, 1) if window.is_active else 1
    average_spend = essential_total / max(active_day, 1) if essentials else ZERO

    budget_target_so_far = daily_allowance * active_day if window.is_active else ZERO
    budget_delta = budget_target_so_far - essential_total
    saved_amount = max(monthly - essential_total, ZERO) + skip_total

    return StatsSnapshot(
        essential_total=essential_total,
        skip_total=skip_total,
        essential_count=len(essentials),
        skip_count=len(skips),
        daily_allowance=daily_allowance,
        average_spend=average_spend,
        budget_target_so_far=budget_target_so_far,
        budget_delta=budget_delta,
        saved_amount=saved_amount,
        progress_ratio=progress_ratio(essential_total, budget_target_so_far, monthly),
    )
