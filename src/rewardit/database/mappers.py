"""Mapper functions to convert SQLAlchemy models to domain entities."""

from rewardit.domain import entities as domain
from rewardit.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.TransactionRecord:
    """Convert SQLAlchemy Transaction model to domain TransactionRecord."""
    return domain.TransactionRecord(
        id=orm_transaction.id,
        customer_name=orm_transaction.customer_name,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
    )
