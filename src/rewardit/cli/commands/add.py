"""Add transaction command."""

import click
from rewardit.cli.error_handling import handle_domain_error
from rewardit.domain.errors import ValidationError
from rewardit.domain.transaction import TransactionService
from rewardit.utils.date_parser import parse_date
from rewardit.utils.amount_parser import parse_amount


@click.command("add")
@click.option("--customer", required=True, help="Customer name")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Purchase amount (e.g., 120.00)")
@click.pass_context
def add_transaction(ctx, customer: str, date: str, amount: str):
    """Record a customer purchase.

    Examples:
        rewardit add --customer Satyam --date 2025-07-01 --amount 120.00
        rewardit add --customer Satyam --date today --amount 75
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            customer_name=customer, date=txn_date, amount=txn_amount
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)

    stored = service.get_transaction(transaction_id)
    click.echo(
        f"Recorded transaction for '{stored.customer_name}' on {stored.date} "
        f"amount {stored.amount} (ID: {transaction_id})"
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
