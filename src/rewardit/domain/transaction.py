"""Transaction domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from rewardit.database.base import Database
from rewardit.domain.entities import TransactionRecord
from rewardit.domain.errors import ValidationError

logger = logging.getLogger(__name__)

# Amounts are stored with two decimal places
CENT = Decimal("0.01")


class TransactionService:
    """Service for recording and listing customer transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(self, customer_name: str, date: date, amount: Decimal) -> int:
        """Record a transaction.

        Args:
            customer_name: Customer who made the purchase
            date: Transaction date
            amount: Transaction amount

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the customer name is empty or the amount has
                more than two decimal places
        """
        customer_name = (customer_name or "").strip()
        if not customer_name:
            raise ValidationError("Customer name is required")

        if amount != amount.quantize(CENT):
            raise ValidationError(
                f"Amount {amount} has more than two decimal places"
            )

        if amount < 0:
            logger.warning(
                "Recording negative amount %s for customer %s", amount, customer_name
            )

        transaction_id = self.db.create_transaction(
            customer_name=customer_name, date=date, amount=amount
        )
        logger.info(
            "Recorded transaction %d for customer '%s', amount: %s",
            transaction_id,
            customer_name,
            amount,
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionRecord]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            TransactionRecord or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        customer_name: Optional[str] = None,
    ) -> list[TransactionRecord]:
        """List transactions with optional filters.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            customer_name: Optional customer filter, case-insensitive

        Returns:
            Transactions in the order they were recorded
        """
        return self.db.list_transactions(
            start_date=start_date, end_date=end_date, customer_name=customer_name
        )
