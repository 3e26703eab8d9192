"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Amount is missing, not a number, or not positive."""


class MissingNoteError(ValidationError):
    """Note is empty after trimming."""


class OutOfRangeError(ValidationError):
    """Budget falls outside the allowed policy range."""


class PersistenceError(DomainError):
    """Storage could not be read or written."""


class FeedFetchError(DomainError):
    """A motivational content source could not be used."""


INVALID_AMOUNT = "Beløbet skal være et positivt tal."
MISSING_NOTE = "Tilføj en kort note, så du husker konteksten."


def budget_out_of_range(amount: Decimal, minimum: Decimal, maximum: Decimal) -> str:
    """Return message for a budget outside the policy bounds."""
    return f"Budgettet skal ligge mellem {minimum} og {maximum} kr. (fik {amount})"
