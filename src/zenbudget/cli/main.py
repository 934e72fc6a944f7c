"""Main CLI entry point."""

import logging

import click
from zenbudget.database import InMemoryStorage, TransactionRepository, create_sqlite_storage
from zenbudget.domain.errors import PersistenceError
from zenbudget.domain.ledger import TransactionStore
from zenbudget.domain.session import LedgerSession
from zenbudget.logging_config import setup_logging

# Import and register all commands at module level
from zenbudget.cli.commands import add, category, clear, sample, summary, view

logger = logging.getLogger(__name__)


def open_storage(db_path: str | None):
    """Open SQLite storage, falling back to in-memory storage if it is unusable."""
    try:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        return storage
    except (PersistenceError, OSError) as e:
        logger.warning("Durable storage unavailable, changes will not be saved: %s", e)
        return InMemoryStorage()


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ZENBUDGET_DB_PATH environment variable)",
    envvar="ZENBUDGET_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (overrides ZENBUDGET_LOG_LEVEL environment variable)",
    envvar="ZENBUDGET_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """ZenBudget - Personal finance ledger.

    Record income and expenses, check your balance and see where
    your money goes by category.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Open storage only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = open_storage(db_path)
        ctx.call_on_close(storage.disconnect)
        store = TransactionStore(TransactionRepository(storage))
        store.load()
        ctx.obj["db"] = storage
        ctx.obj["store"] = store
        ctx.obj["session"] = LedgerSession(store)


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
clear.register_commands(cli)
sample.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
