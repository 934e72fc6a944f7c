"""Terminal rendering of ledger view models."""

import click

from zenbudget.domain.entities import CategoryStyle, TransactionKind
from zenbudget.domain.view_model import BalanceState, BalanceView, CategoryBar, LedgerView, TransactionRow

BAR_WIDTH = 30

KIND_COLORS = {
    TransactionKind.INCOME: "green",
    TransactionKind.EXPENSE: "red",
}

BALANCE_COLORS = {
    BalanceState.POSITIVE: "green",
    BalanceState.NEGATIVE: "red",
    BalanceState.ZERO: None,
}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' to an (r, g, b) tuple for click.style."""
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def style_category(label: str, style: CategoryStyle) -> str:
    return click.style(label, fg=hex_to_rgb(style.color))


def render_progress_bar(percentage: float, width: int = BAR_WIDTH) -> str:
    """Render a fixed-width bar, e.g. '██████░░░░'."""
    filled = round(width * max(0.0, min(percentage, 100.0)) / 100)
    return "█" * filled + "░" * (width - filled)


def echo_balance(balance: BalanceView) -> None:
    click.echo("\nBalance")
    click.echo("-" * 40)
    click.echo(
        f"{'Total balance:':<20} "
        + click.style(f"{balance.balance_label:>19}", fg=BALANCE_COLORS[balance.state], bold=True)
    )
    click.echo(f"{'Income:':<20} {balance.income_label:>19}")
    click.echo(f"{'Expenses:':<20} {balance.expense_label:>19}")


def echo_row(row: TransactionRow) -> None:
    amount = click.style(f"{row.amount_label:>14}", fg=KIND_COLORS[row.kind])
    category = style_category(f"{row.category:<14}", row.style)
    click.echo(f"{row.date_label:<18} {row.name[:30]:<30} {category} {amount}")


def echo_transactions(rows: tuple[TransactionRow, ...], search_term: str = "") -> None:
    if not rows:
        if search_term.strip():
            click.echo(f"No transactions match '{search_term.strip()}'.")
        else:
            click.echo("No transactions yet. Add one with 'zenbudget add'.")
        return

    click.echo(f"\nFound {len(rows)} transaction(s):")
    click.echo("-" * 78)
    click.echo(f"{'Date':<18} {'Name':<30} {'Category':<14} {'Amount':>14}")
    click.echo("-" * 78)
    for row in rows:
        echo_row(row)


def echo_bar(bar: CategoryBar) -> None:
    click.echo(f"{style_category(f'{bar.category:<14}', bar.style)} {bar.amount_label:>14}")
    click.echo(
        f"  {click.style(render_progress_bar(bar.percentage), fg=hex_to_rgb(bar.style.color))}"
        f" {bar.percentage_label:>6}"
    )


def echo_summary(bars: tuple[CategoryBar, ...]) -> None:
    if not bars:
        click.echo("No expenses to summarize yet.")
        return

    click.echo("\nSpending by category")
    click.echo("-" * 40)
    for bar in bars:
        echo_bar(bar)


def echo_ledger(view: LedgerView, search_term: str = "") -> None:
    """Render balance, transaction list and spending summary."""
    echo_balance(view.balance)
    echo_transactions(view.rows, search_term)
    echo_summary(view.bars)
