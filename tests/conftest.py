"""Shared pytest fixtures for rewardit tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest

from rewardit.database.factories import create_sqlite_database
from rewardit.domain.entities import TransactionRecord
from rewardit.domain.rewards import RewardAggregator, RewardService
from rewardit.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def reward_service(temp_db):
    """Create a RewardService with a temporary database."""
    return RewardService(temp_db)


@pytest.fixture
def aggregator():
    """Create a RewardAggregator with the default calculator."""
    return RewardAggregator()


@pytest.fixture
def make_record():
    """Return a factory for in-memory transaction records."""

    def _make(customer_name, txn_date, amount):
        return TransactionRecord(
            customer_name=customer_name, date=txn_date, amount=Decimal(str(amount))
        )

    return _make


@pytest.fixture
def sample_transactions(transaction_service):
    """Record purchases for two customers over July and August 2025."""
    rows = [
        ("Satyam", date(2025, 7, 1), Decimal("120.00")),
        ("Satyam", date(2025, 7, 2), Decimal("50.00")),
        ("ManuTiwari", date(2025, 7, 15), Decimal("75.00")),
        ("satyam", date(2025, 8, 3), Decimal("75.00")),
        ("ManuTiwari", date(2025, 8, 20), Decimal("200.00")),
    ]
    return [
        transaction_service.create_transaction(
            customer_name=name, date=txn_date, amount=amount
        )
        for name, txn_date, amount in rows
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
