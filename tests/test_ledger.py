"""Tests for the ledger."""

from decimal import Decimal

import pytest

from nospend.domain.entities import DEFAULT_BUDGET, EntryType
from nospend.domain.errors import (
    DomainError,
    InvalidAmountError,
    MissingNoteError,
    OutOfRangeError,
)
from nospend.domain.ledger import Ledger


def test_new_ledger_is_empty_with_default_budget():
    ledger = Ledger()
    assert ledger.entries == ()
    assert ledger.budget.monthly_amount == DEFAULT_BUDGET


def test_add_entry_returns_entry(ledger, fixed_now):
    entry = ledger.add_entry("essential", "125", "Mælk")
    assert entry.id == "entry-1"
    assert entry.type == EntryType.ESSENTIAL
    assert entry.amount == Decimal("125.00")
    assert entry.note == "Mælk"
    assert entry.created_at == fixed_now


def test_add_entry_prepends(ledger):
    first = ledger.add_entry(EntryType.ESSENTIAL, "10", "first")
    second = ledger.add_entry(EntryType.SKIP, "20", "second")
    assert ledger.entries == (second, first)


def test_add_entry_rounds_to_two_decimals(ledger):
    entry = ledger.add_entry("skip", "12.345", "Kaffe")
    assert entry.amount == Decimal("12.35")


def test_add_entry_accepts_decimal_comma(ledger):
    entry = ledger.add_entry("essential", "89,50", "Busbillet")
    assert entry.amount == Decimal("89.50")


def test_add_entry_accepts_numbers(ledger):
    assert ledger.add_entry("essential", 40, "Brød").amount == Decimal("40.00")
    assert ledger.add_entry("essential", 0.1, "Tyggegummi").amount == Decimal("0.10")
    assert ledger.add_entry("essential", Decimal("7.5"), "Æble").amount == Decimal("7.50")


def test_add_entry_trims_note(ledger):
    entry = ledger.add_entry("essential", "5", "   Gulerødder  ")
    assert entry.note == "Gulerødder"


@pytest.mark.parametrize(
    "raw_amount",
    ["0", "-5", "abc", "", "   ", None, "NaN", "Infinity", True, "1e30", "123456789012345678901234567"],
)
def test_invalid_amount_leaves_entries_unchanged(ledger, raw_amount):
    ledger.add_entry("essential", "10", "existing")
    before = ledger.entries

    with pytest.raises(InvalidAmountError):
        ledger.add_entry("essential", raw_amount, "note")

    assert ledger.entries == before


@pytest.mark.parametrize("raw_note", ["", "   ", "\t\n", None])
def test_missing_note_leaves_entries_unchanged(ledger, raw_note):
    with pytest.raises(MissingNoteError):
        ledger.add_entry("skip", "10", raw_note)
    assert ledger.entries == ()


def test_amount_checked_before_note(ledger):
    with pytest.raises(InvalidAmountError):
        ledger.add_entry("essential", "0", "")


def test_validation_errors_are_domain_errors(ledger):
    with pytest.raises(DomainError):
        ledger.add_entry("essential", "x", "note")
    with pytest.raises(ValueError):
        ledger.add_entry("essential", "1", " ")


def test_unknown_entry_type_rejected(ledger):
    with pytest.raises(ValueError):
        ledger.add_entry("splurge", "10", "note")


def test_default_ids_are_unique():
    ledger = Ledger()
    ids = {ledger.add_entry("essential", "1", "n").id for _ in range(20)}
    assert len(ids) == 20


def test_partition_keeps_order(ledger):
    e1 = ledger.add_entry("essential", "1", "a")
    s1 = ledger.add_entry("skip", "2", "b")
    e2 = ledger.add_entry("essential", "3", "c")
    assert ledger.essentials() == [e2, e1]
    assert ledger.skips() == [s1]


@pytest.mark.parametrize("amount", ["1500", "12000", "4500", 6000, Decimal("7800")])
def test_set_budget_in_range(ledger, amount):
    budget = ledger.set_budget(amount)
    assert budget.monthly_amount == Decimal(str(amount))
    assert ledger.budget == budget


@pytest.mark.parametrize("amount", ["1499", "12001", "0", "-4500"])
def test_set_budget_out_of_range(ledger, amount):
    with pytest.raises(OutOfRangeError):
        ledger.set_budget(amount)
    assert ledger.budget.monthly_amount == DEFAULT_BUDGET


def test_set_budget_non_numeric(ledger):
    with pytest.raises(InvalidAmountError):
        ledger.set_budget("lots")
    assert ledger.budget.monthly_amount == DEFAULT_BUDGET


def test_reset_empties_entries_and_keeps_budget(ledger):
    ledger.set_budget("3000")
    ledger.add_entry("essential", "10", "a")
    ledger.add_entry("skip", "10", "b")

    ledger.reset()

    assert ledger.entries == ()
    assert ledger.budget.monthly_amount == Decimal("3000")


def test_reset_is_idempotent(ledger):
    ledger.reset()
    ledger.reset()
    assert ledger.entries == ()


def test_snapshot_is_detached(ledger):
    ledger.add_entry("essential", "10", "a")
    snapshot = ledger.snapshot()
    ledger.add_entry("essential", "20", "b")
    assert len(snapshot.entries) == 1

