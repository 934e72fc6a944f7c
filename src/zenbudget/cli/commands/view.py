"""Transaction viewing commands."""

import click
from zenbudget.cli.render import echo_transactions


@click.command("view")
@click.option("--search", "-s", default="", help="Only show transactions whose name, category or kind contains this text")
@click.pass_context
def view_transactions(ctx, search: str):
    """View transactions, newest first."""
    session = ctx.obj["session"]
    session.set_search_term(search)

    view = session.view()
    echo_transactions(view.rows, session.search_term)


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
