"""Tests for transaction commands."""

from datetime import date
from decimal import Decimal

from rewardit.cli.main import cli


def test_add_transaction(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "Satyam",
            "--date",
            "2025-07-01",
            "--amount",
            "120.00",
        ],
    )

    assert result.exit_code == 0
    assert "Recorded transaction for 'Satyam'" in result.output

    (txn,) = temp_db.list_transactions()
    assert txn.customer_name == "Satyam"
    assert txn.date == date(2025, 7, 1)
    assert txn.amount == Decimal("120.00")


def test_add_transaction_invalid_date(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "Satyam",
            "--date",
            "someday",
            "--amount",
            "10",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output
    assert temp_db.list_transactions() == []


def test_add_transaction_invalid_amount(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "Satyam",
            "--date",
            "2025-07-01",
            "--amount",
            "ten",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_add_transaction_blank_customer(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "  ",
            "--date",
            "2025-07-01",
            "--amount",
            "10",
        ],
    )

    assert result.exit_code == 1
    assert "Customer name is required" in result.output


def test_view_transactions(cli_runner, temp_db, sample_transactions):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "view",
            "--customer",
            "SATYAM",
            "--start-date",
            "2025-07-01",
            "--end-date",
            "2025-07-31",
        ],
    )

    assert result.exit_code == 0
    assert "Satyam" in result.output
    assert "ManuTiwari" not in result.output
    assert "120.00" in result.output
    assert "90" in result.output


def test_view_marks_negative_amounts(cli_runner, temp_db, transaction_service):
    transaction_service.create_transaction(
        customer_name="ManuTiwari", date=date(2025, 7, 1), amount=Decimal("-3.00")
    )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "view"])

    assert result.exit_code == 0
    assert "invalid" in result.output


def test_view_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "view"])

    assert result.exit_code == 0
    assert "No transactions found" in result.output


def test_add_transaction_rejects_sub_cent_amount(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "Satyam",
            "--date",
            "2025-07-01",
            "--amount",
            "50.999",
        ],
    )

    assert result.exit_code == 1
    assert "more than two decimal places" in result.output
    assert temp_db.list_transactions() == []


def test_add_transaction_echoes_stored_amount(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "add",
            "--customer",
            "  Satyam ",
            "--date",
            "2025-07-01",
            "--amount",
            "120",
        ],
    )

    assert result.exit_code == 0
    assert "Recorded transaction for 'Satyam' on 2025-07-01 amount 120.00" in result.output
