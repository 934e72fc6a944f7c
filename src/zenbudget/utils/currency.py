"""Currency and date display formatting."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Format an amount as US dollars with exactly two decimals.

    Rounds half away from zero. Negative amounts get a leading minus sign.
    Any finite amount can be formatted, however many digits it has.

    Examples:
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
        >>> format_currency(Decimal("-15.99"))
        '-$15.99'
    """
    amount = Decimal(amount)
    with localcontext() as ctx:
        # room for every integer digit, the cents and a rounding carry
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${rounded.copy_abs():,.2f}"


def format_signed_currency(amount: Decimal) -> str:
    """Format an amount with an explicit + or - sign, e.g. '+$3,500.00'."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{format_currency(amount.copy_abs())}"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp in local time, e.g. 'Jan 5, 09:30 AM'."""
    local = value.astimezone()
    return f"{local:%b} {local.day}, {local:%I:%M %p}"
