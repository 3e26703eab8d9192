"""Challenge ledger: entries plus the monthly budget."""

import uuid
from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, Optional

from nospend.domain import errors
from nospend.domain.entities import (
    BUDGET_MAX,
    BUDGET_MIN,
    CENTS,
    Budget,
    Entry,
    EntryType,
    LedgerSnapshot,
)
from nospend.utils.amount_parser import parse_amount


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def coerce_amount(raw_amount: str | int | float | Decimal | None) -> Decimal:
    """Turn raw user input into a finite Decimal.

    Raises:
        InvalidAmountError: If the input is missing or not a finite number
    """
    if raw_amount is None or isinstance(raw_amount, bool):
        raise errors.InvalidAmountError(errors.INVALID_AMOUNT)
    if isinstance(raw_amount, Decimal):
        amount = raw_amount
    else:
        try:
            amount = parse_amount(str(raw_amount))
        except ValueError as e:
            raise errors.InvalidAmountError(errors.INVALID_AMOUNT) from e
    if not amount.is_finite():
        raise errors.InvalidAmountError(errors.INVALID_AMOUNT)
    return amount


class Ledger:
    """Ordered entries (newest first) and the current budget.

    The ledger only mutates in memory; callers persist it afterwards.
    """

    def __init__(
        self,
        entries: Optional[list[Entry]] = None,
        budget: Optional[Budget] = None,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_entry_id,
    ):
        """Initialize ledger.

        Args:
            entries: Existing entries, newest first
            budget: Current budget (defaults to the standard budget)
            clock: Returns the timestamp for new entries
            id_factory: Returns a fresh entry id
        """
        self._entries: list[Entry] = list(entries or [])
        self._budget = budget or Budget()
        self._clock = clock
        self._id_factory = id_factory

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def budget(self) -> Budget:
        return self._budget

    def essentials(self) -> list[Entry]:
        """Return essential entries in display order."""
        return [e for e in self._entries if e.type == EntryType.ESSENTIAL]

    def skips(self) -> list[Entry]:
        """Return skip entries in display order."""
        return [e for e in self._entries if e.type == EntryType.SKIP]

    def add_entry(
        self,
        entry_type: EntryType | str,
        raw_amount: str | int | float | Decimal | None,
        raw_note: Optional[str],
    ) -> Entry:
        """Validate input and prepend a new entry.

        Args:
            entry_type: "essential" or "skip"
            raw_amount: Amount as typed by the user
            raw_note: Free-form note

        Returns:
            The created entry

        Raises:
            InvalidAmountError: If the amount is not a positive number
            MissingNoteError: If the note is empty after trimming
        """
        entry_type = EntryType(entry_type)

        amount = coerce_amount(raw_amount)
        if amount <= 0:
            raise errors.InvalidAmountError(errors.INVALID_AMOUNT)

        try:
            amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            # More integer digits than the decimal context can hold
            raise errors.InvalidAmountError(errors.INVALID_AMOUNT) from e

        note = (raw_note or "").strip()
        if not note:
            raise errors.MissingNoteError(errors.MISSING_NOTE)

        entry = Entry(
            id=self._id_factory(),
            type=entry_type,
            amount=amount,
            note=note,
            created_at=self._clock(),
        )
        self._entries.insert(0, entry)
        return entry

    def set_budget(self, amount: str | int | float | Decimal) -> Budget:
        """Replace the monthly budget.

        Raises:
            InvalidAmountError: If the amount is not a number
            OutOfRangeError: If the amount is outside the policy range
        """
        value = coerce_amount(amount)
        if value < BUDGET_MIN or value > BUDGET_MAX:
            raise errors.OutOfRangeError(
                errors.budget_out_of_range(value, BUDGET_MIN, BUDGET_MAX)
            )
        self._budget = Budget(monthly_amount=value)
        return self._budget

    def reset(self) -> None:
        """Remove every entry. The caller must confirm with the user first."""
        self._entries.clear()

    def snapshot(self) -> LedgerSnapshot:
        """Return an immutable copy of the current state."""
        return LedgerSnapshot(entries=tuple(self._entries), budget=self._budget)
