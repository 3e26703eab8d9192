"""Mapper functions to convert between domain models and stored payloads.

Entries are stored as a JSON array of plain objects and the budget as a
decimal string. This layer isolates that encoding from the domain.
"""

import json
from datetime import datetime, UTC
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from nospend.domain import entities as domain


def entry_to_dict(entry: domain.Entry) -> dict[str, Any]:
    """Convert a domain Entry to a JSON-compatible dict."""
    return {
        "id": entry.id,
        "type": entry.type.value,
        "amount": str(entry.amount),
        "note": entry.note,
        "createdAt": entry.created_at.isoformat(),
    }


def entry_from_dict(data: dict[str, Any]) -> domain.Entry:
    """Convert a stored dict to a domain Entry.

    Amounts are rounded to cents and a timestamp without an offset is taken
    to be UTC.

    Raises:
        ValueError: If the payload is incomplete or breaks the entry invariant
    """
    try:
        entry_id = str(data["id"])
        entry_type = domain.EntryType(data["type"])
        amount = Decimal(str(data["amount"]))
        note = str(data["note"]).strip()
        created_at = datetime.fromisoformat(str(data["createdAt"]).replace("Z", "+00:00"))
    except (KeyError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Malformed entry payload: {e!r}") from e

    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Entry {entry_id} has non-positive amount {amount}")
    try:
        amount = amount.quantize(domain.CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Entry {entry_id} amount {amount} is too large") from e
    if not note:
        raise ValueError(f"Entry {entry_id} has an empty note")
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)

    return domain.Entry(
        id=entry_id,
        type=entry_type,
        amount=amount,
        note=note,
        created_at=created_at,
    )


def entries_to_json(entries: tuple[domain.Entry, ...] | list[domain.Entry]) -> str:
    """Serialize entries in display order."""
    return json.dumps([entry_to_dict(e) for e in entries], ensure_ascii=False)


def budget_to_str(budget: domain.Budget) -> str:
    """Serialize a budget scalar."""
    return str(budget.monthly_amount)


def budget_from_str(raw: str) -> domain.Budget:
    """Parse a stored budget scalar.

    Raises:
        ValueError: If the value is not a finite number
    """
    try:
        amount = Decimal(raw.strip())
    except (InvalidOperation, AttributeError) as e:
        raise ValueError(f"Malformed budget value {raw!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Malformed budget value {raw!r}")
    return domain.Budget(monthly_amount=amount)
