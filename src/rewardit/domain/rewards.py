"""Reward aggregation domain service."""

import logging
from datetime import date
from types import MappingProxyType
from typing import Callable, Optional, Sequence

from rewardit.database.base import Database
from rewardit.domain.entities import (
    EnrichedTransaction,
    RewardSummary,
    TransactionRecord,
    customer_key,
)
from rewardit.domain.errors import (
    CalculationError,
    InvalidDateRangeError,
    NotFoundError,
    no_transactions_for_customer,
    no_transactions_in_range,
    reward_calculation_failed,
)
from rewardit.domain.points import PointCalculator

logger = logging.getLogger(__name__)


def month_label(value: date) -> str:
    """Return the 'YYYY-MM' aggregation key for a date."""
    return f"{value.year:04d}-{value.month:02d}"


class RewardAggregator:
    """Builds reward summaries from in-memory transaction records."""

    def __init__(
        self,
        calculator: Optional[PointCalculator] = None,
        label_for: Callable[[date], str] = month_label,
    ):
        """Initialize reward aggregator.

        Args:
            calculator: Point calculator, defaults to the tiered PointCalculator
            label_for: Function mapping a transaction date to its month label
        """
        self.calculator = calculator or PointCalculator()
        self.label_for = label_for

    def build_summary(
        self, customer_name: str, transactions: Sequence[TransactionRecord]
    ) -> RewardSummary:
        """Build the reward summary of one customer.

        Args:
            customer_name: Name reported on the summary
            transactions: Non-empty records of that customer, in display order

        Returns:
            RewardSummary with total, per-month and per-transaction points

        Raises:
            CalculationError: If any transaction has a negative amount
        """
        monthly_points: dict[str, int] = {}
        enriched: list[EnrichedTransaction] = []
        total_points = 0

        for txn in transactions:
            result = self.calculator.calculate(txn.amount)
            if not result.ok:
                logger.error(
                    "Reward calculation failed for %s: %s (amount=%s, date=%s)",
                    customer_name,
                    result.failure,
                    txn.amount,
                    txn.date,
                )
                raise CalculationError(
                    reward_calculation_failed(customer_name),
                    customer_name=customer_name,
                )

            label = self.label_for(txn.date)
            monthly_points[label] = monthly_points.get(label, 0) + result.points
            enriched.append(
                EnrichedTransaction(
                    customer_name=txn.customer_name,
                    date=txn.date,
                    amount=txn.amount,
                    points=result.points,
                )
            )
            total_points += result.points

        return RewardSummary(
            customer_name=customer_name,
            total_points=total_points,
            monthly_points=MappingProxyType(monthly_points),
            transactions=tuple(enriched),
        )

    def group_by_customer(
        self, transactions: Sequence[TransactionRecord]
    ) -> dict[str, list[TransactionRecord]]:
        """Partition records by customer, ignoring case.

        Keys are the customer names as first seen in the input; groups keep
        input order and dict order follows first occurrence.
        """
        display_names: dict[str, str] = {}
        groups: dict[str, list[TransactionRecord]] = {}

        for txn in transactions:
            key = customer_key(txn.customer_name)
            if key not in display_names:
                display_names[key] = txn.customer_name
                groups[txn.customer_name] = []
            groups[display_names[key]].append(txn)

        return groups

    def build_all_summaries(
        self, transactions: Sequence[TransactionRecord]
    ) -> list[RewardSummary]:
        """Build one summary per customer present in the records.

        A negative amount for any customer fails the whole batch.

        Raises:
            CalculationError: If any customer's summary cannot be built
        """
        summaries = []
        for customer_name, records in self.group_by_customer(transactions).items():
            try:
                summaries.append(self.build_summary(customer_name, records))
            except CalculationError as e:
                logger.error("Reward calculation failed for customer batch")
                raise CalculationError(
                    str(e), customer_name=e.customer_name
                ) from e
        return summaries


class RewardService:
    """Service answering reward queries against the transaction store."""

    def __init__(self, db: Database, aggregator: Optional[RewardAggregator] = None):
        """Initialize reward service.

        Args:
            db: Database instance
            aggregator: Aggregator to build summaries with
        """
        self.db = db
        self.aggregator = aggregator or RewardAggregator()

    def validate_date_range(self, start_date: Optional[date], end_date: Optional[date]) -> None:
        """Check an inclusive date range.

        Raises:
            InvalidDateRangeError: If a date is missing or start is after end
        """
        if start_date is None or end_date is None:
            raise InvalidDateRangeError("Start and end dates must be provided.")
        if start_date > end_date:
            raise InvalidDateRangeError("Start date must not be after end date.")

    def get_customer_rewards(
        self,
        customer_name: str,
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> RewardSummary:
        """Get the reward summary of one customer.

        Args:
            customer_name: Customer name, matched case-insensitively
            start_date: First day of the range (inclusive)
            end_date: Last day of the range (inclusive)

        Returns:
            RewardSummary for the customer

        Raises:
            InvalidDateRangeError: If the date range is invalid
            NotFoundError: If the customer has no transactions in range
            CalculationError: If any transaction has a negative amount
        """
        self.validate_date_range(start_date, end_date)

        transactions = self.db.list_transactions(
            start_date=start_date, end_date=end_date, customer_name=customer_name
        )
        if not transactions:
            logger.warning("No transactions found for customer: %s", customer_name)
            raise NotFoundError(no_transactions_for_customer(customer_name))

        logger.info(
            "Building rewards for %s from %d transactions between %s and %s",
            customer_name,
            len(transactions),
            start_date,
            end_date,
        )
        return self.aggregator.build_summary(customer_name, transactions)

    def get_all_customer_rewards(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> list[RewardSummary]:
        """Get reward summaries of every customer with transactions in range.

        Raises:
            InvalidDateRangeError: If the date range is invalid
            NotFoundError: If no transactions fall in the range
            CalculationError: If any transaction has a negative amount
        """
        self.validate_date_range(start_date, end_date)

        transactions = self.db.list_transactions(start_date=start_date, end_date=end_date)
        if not transactions:
            logger.warning(
                "No transactions found in date range %s to %s", start_date, end_date
            )
            raise NotFoundError(no_transactions_in_range())

        logger.info(
            "Building rewards for all customers from %d transactions between %s and %s",
            len(transactions),
            start_date,
            end_date,
        )
        return self.aggregator.build_all_summaries(transactions)
