"""Reward summary commands."""

import json

import click
from rewardit.cli.date_filters import resolve_cli_date_range
from rewardit.cli.error_handling import handle_domain_error
from rewardit.domain.entities import RewardSummary
from rewardit.domain.errors import DomainError
from rewardit.domain.rewards import RewardService
from rewardit.utils.date_parser import get_date_range


def _display_summary(summary: RewardSummary) -> None:
    """Print one customer's reward summary."""
    click.echo(f"Customer: {summary.customer_name}")
    for month in sorted(summary.monthly_points):
        click.echo(f"  {month:<10} {summary.monthly_points[month]:>10}")
    click.echo(f"  {'Total':<10} {summary.total_points:>10}")


@click.command("rewards")
@click.argument("customer", required=False)
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option("--last-three-months", is_flag=True, help="Filter to the last three months (default)")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--json", "as_json", is_flag=True, help="Print summaries as JSON")
@click.pass_context
def rewards(
    ctx,
    customer: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    last_three_months: bool,
    this_year: bool,
    as_json: bool,
):
    """Show reward points for CUSTOMER, or for all customers.

    Without any date option the last three months are reported.

    Examples:
        rewardit rewards --start-date 2025-07-01 --end-date 2025-09-30
        rewardit rewards Satyam --last-month --json
    """
    db = ctx.obj["db"]
    service = RewardService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "last-three-months": last_three_months,
            "this-year": this_year,
        },
        default_range=get_date_range("last-three-months"),
    )

    try:
        if customer is not None:
            summaries = [service.get_customer_rewards(customer, start, end)]
        else:
            summaries = service.get_all_customer_rewards(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        payload = [summary.to_dict() for summary in summaries]
        if customer is not None:
            payload = payload[0]
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Reward Summary ({start} to {end})")
    click.echo("=" * 40)
    for i, summary in enumerate(summaries):
        if i > 0:
            click.echo()
        _display_summary(summary)


def register_commands(cli):
    """Register rewards command with main CLI."""
    cli.add_command(rewards)
