"""Add transaction command."""

import click
from zenbudget.cli.error_handling import handle_domain_error
from zenbudget.domain.category import DEFAULT_CATEGORIES, is_known_category
from zenbudget.domain.errors import ValidationError
from zenbudget.utils.currency import format_signed_currency

USAGE_HINT = "zenbudget add NAME --amount AMOUNT --category LABEL"


@click.command("add")
@click.argument("name")
@click.option(
    "--amount", required=True, help="Transaction amount; positive for income, negative for expense (e.g., 3500 or -12.50)"
)
@click.option(
    "--category",
    "-c",
    required=True,
    help=f"Category label ({', '.join(DEFAULT_CATEGORIES)} or any other label)",
)
@click.pass_context
def add_transaction(ctx, name: str, amount: str, category: str):
    """Add a transaction.

    Examples:
        zenbudget add "Salary" --amount 3500 --category Income
        zenbudget add "Coffee Shop" --amount -4.50 -c Food
    """
    session = ctx.obj["session"]

    try:
        transaction = session.add_transaction(name, amount, category)
    except ValidationError as e:
        handle_domain_error(ctx, e, hint=USAGE_HINT)

    click.echo(
        f"Added {transaction.kind.value} '{transaction.name}' "
        f"{format_signed_currency(transaction.amount)} ({transaction.category})"
    )
    if not is_known_category(transaction.category):
        click.echo(f"Note: '{transaction.category}' is a custom category and uses the default style.")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
