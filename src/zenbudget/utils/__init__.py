"""Utility functions for zenbudget."""

from zenbudget.utils.amount_parser import parse_amount
from zenbudget.utils.currency import format_currency, format_signed_currency, format_timestamp

__all__ = ["parse_amount", "format_currency", "format_signed_currency", "format_timestamp"]
