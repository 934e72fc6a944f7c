"""CLI error handling helpers."""

import logging
from typing import Optional

import click

from zenbudget.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(
    ctx: click.Context, error: DomainError | ValueError, hint: Optional[str] = None
) -> None:
    """Report a rejected command on stderr and exit with status 1.

    Args:
        ctx: Context of the failing command
        error: Error whose message is shown to the user
        hint: Optional line telling the user how to retry
    """
    logger.debug("%s rejected: %s", ctx.command_path, error)
    click.echo(f"Error: {error}", err=True)
    if hint:
        click.echo(f"Hint: {hint}", err=True)
    ctx.exit(1)
