"""CLI error handling helpers."""

import click

from rewardit.domain.errors import CalculationError, DomainError

# Calculation failures mean bad stored data, not bad user input
CALCULATION_ERROR_EXIT_CODE = 2


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, CalculationError):
        click.echo(f"Reward calculation error: {error}", err=True)
        ctx.exit(CALCULATION_ERROR_EXIT_CODE)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
