"""Transaction viewing commands."""

import click
from rewardit.cli.date_filters import resolve_cli_date_range
from rewardit.domain.points import calculate_points
from rewardit.domain.transaction import TransactionService


@click.command("view")
@click.option("--customer", help="Customer name (case-insensitive)")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.pass_context
def view_transactions(ctx, customer: str | None, start_date: str | None, end_date: str | None):
    """View recorded transactions and the points each one earns."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags={}
    )

    transactions = service.list_transactions(
        start_date=start, end_date=end, customer_name=customer
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Customer':<24} {'Amount':>12} {'Points':>8}")
    click.echo("-" * 66)
    for txn in transactions:
        result = calculate_points(txn.amount)
        points = str(result.points) if result.ok else "invalid"
        click.echo(
            f"{txn.id:<6} {txn.date.isoformat():<12} {txn.customer_name:<24} "
            f"{txn.amount:>12.2f} {points:>8}"
        )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
