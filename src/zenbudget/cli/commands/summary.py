"""Balance and spending summary commands."""

import click
from zenbudget.cli.render import echo_balance, echo_ledger, echo_summary


@click.command("balance")
@click.pass_context
def balance(ctx):
    """Show total balance, income and expenses."""
    view = ctx.obj["session"].view()
    echo_balance(view.balance)


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show spending by category."""
    view = ctx.obj["session"].view()
    echo_summary(view.bars)


@click.command("dashboard")
@click.option("--search", "-s", default="", help="Filter the transaction list (totals always cover everything)")
@click.pass_context
def dashboard(ctx, search: str):
    """Show balance, transactions and spending summary together."""
    session = ctx.obj["session"]
    session.set_search_term(search)
    echo_ledger(session.view(), session.search_term)


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(balance)
    cli.add_command(summary)
    cli.add_command(dashboard)
