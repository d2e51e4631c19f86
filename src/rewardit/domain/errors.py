"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidDateRangeError(ValidationError):
    """Start or end date missing, or start after end."""


class NotFoundError(DomainError):
    """No transactions match the requested customer or date range."""


class CalculationError(DomainError):
    """Reward points could not be computed for a customer's transactions.

    Raised when a negative amount reaches aggregation. This points at bad
    upstream data rather than bad user input.
    """

    def __init__(self, message: str, customer_name: Optional[str] = None):
        super().__init__(message)
        self.customer_name = customer_name


def no_transactions_for_customer(customer_name: str) -> str:
    """Return message for a customer without transactions in range."""
    return f"No transactions found for customer: {customer_name}"


def no_transactions_in_range() -> str:
    """Return message for a date range without any transactions."""
    return "No transactions found for any customer"


def reward_calculation_failed(customer_name: Optional[str] = None) -> str:
    """Return message for a failed (negative) reward calculation."""
    if customer_name is None:
        return "Reward calculation failed/negative for customers."
    return f"Reward calculation failed/negative for customer: {customer_name}"
