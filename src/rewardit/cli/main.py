"""Main CLI entry point."""

import logging

import click
from rewardit.database.factories import create_sqlite_database

# Import and register all commands at module level
from rewardit.cli.commands import add, rewards, view

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class ClickEchoHandler(logging.Handler):
    """Logging handler writing through click.echo to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(log_level: str) -> logging.Logger:
    """Attach a stderr handler to the rewardit logger."""
    logger = logging.getLogger("rewardit")
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.handlers.clear()

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides REWARDIT_DB_PATH environment variable)",
    envvar="REWARDIT_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="REWARDIT_LOG_LEVEL",
    help="Logging level (overrides REWARDIT_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Rewardit - Customer loyalty rewards.

    Record customer purchases and report the reward points they earned,
    per customer and per month, over any date range.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
rewards.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
