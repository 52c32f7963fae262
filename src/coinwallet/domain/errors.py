"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DateOrderError(ValidationError):
    """New record's date precedes the latest existing record's date."""


class NonPositiveEarningError(ValidationError):
    """Earning mode used while the balance did not increase."""


class NonNegativeSpendError(ValidationError):
    """Spending mode used while the balance did not decrease."""


class InvalidAmountError(ValidationError):
    """Balance reading that can never be valid (e.g. negative)."""


class SchemaError(ValidationError):
    """Malformed import or persisted JSON."""

    def __init__(self, cause: str):
        super().__init__(f"Invalid JSON format: {cause}")
        self.cause = cause


class NoSessionUndoError(NotFoundError):
    """Nothing was added in the current session."""


class RecordNotFoundError(NotFoundError):
    """Record id is not present in the ledger."""


class NotInitializedError(NotFoundError):
    """The wallet has not been initialized yet."""


def date_before_last_record(new_date: date, last_date: date) -> str:
    """Return message for a back-dated record."""
    return (
        f"Date {new_date.isoformat()} is earlier than the last record's date "
        f"({last_date.isoformat()})"
    )


def earning_requires_increase(diff: int) -> str:
    """Return message for an earning that did not increase the balance."""
    return f"Earning mode requires the balance to increase (difference: {diff:+,})"


def spending_requires_decrease(mode: str, diff: int) -> str:
    """Return message for a spend that did not decrease the balance."""
    return (
        f"Spending mode '{mode}' requires the balance to decrease "
        f"(difference: {diff:+,})"
    )


def negative_amount(amount: int) -> str:
    """Return message for a negative coin amount."""
    return f"Coin amount must not be negative, got {amount:,}"


def record_not_found(record_id: str) -> str:
    """Return message for missing record."""
    return f"Record '{record_id}' not found"


NO_SESSION_UNDO = "No record added in this session to undo"
NOT_INITIALIZED = "Wallet is not initialized. Run 'coinwallet init AMOUNT' first."
