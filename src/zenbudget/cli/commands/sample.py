"""Sample data command."""

import click


@click.command("sample")
@click.pass_context
def load_sample_data(ctx):
    """Load sample transactions into an empty ledger."""
    store = ctx.obj["store"]

    if not store.add_sample_data():
        click.echo(
            f"Ledger already has {len(store)} transaction(s); sample data is only loaded into an empty ledger."
        )
        return

    click.echo(f"Loaded {len(store)} sample transactions. Try 'zenbudget view --search food'.")


def register_commands(cli):
    """Register sample command with main CLI."""
    cli.add_command(load_sample_data)
