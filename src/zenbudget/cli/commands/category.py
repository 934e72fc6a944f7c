"""Category listing command."""

import click
from zenbudget.cli.render import style_category
from zenbudget.domain.category import DEFAULT_CATEGORIES, DEFAULT_CATEGORY_STYLE, get_category_style


@click.command("categories")
@click.pass_context
def list_categories(ctx):
    """List known categories with their color and icon.

    Any other label can be used too; it is shown with the default style.
    """
    click.echo("\nCategories:")
    for name in DEFAULT_CATEGORIES:
        style = get_category_style(name)
        click.echo(f"  {style_category(f'{name:<10}', style)} {style.color}  {style.icon}")
    click.echo(f"  {'(other)':<10} {DEFAULT_CATEGORY_STYLE.color}  {DEFAULT_CATEGORY_STYLE.icon}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(list_categories)
