"""Clear all transactions command."""

import click


@click.command("clear")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def clear_transactions(ctx, yes: bool):
    """Delete every transaction. This cannot be undone."""
    session = ctx.obj["session"]
    count = len(session.store)

    if not yes and not click.confirm(
        f"Delete all {count} transaction(s)? This action cannot be undone."
    ):
        click.echo("Cancelled.")
        return

    session.clear_all()
    click.echo("All transactions have been cleared.")


def register_commands(cli):
    """Register clear command with main CLI."""
    cli.add_command(clear_transactions)
