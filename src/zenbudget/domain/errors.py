"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class PersistenceError(DomainError):
    """Durable storage could not be read or written."""


def empty_name() -> str:
    """Return message for a blank transaction name."""
    return "Transaction name must not be empty"


def empty_category() -> str:
    """Return message for a blank category label."""
    return "Category must not be empty"


def invalid_amount(amount: object) -> str:
    """Return message for an amount that is not a finite number."""
    return f"Amount must be a finite number, got {amount!r}"


def zero_amount() -> str:
    """Return message for a zero amount."""
    return "Amount must not be zero"


def amount_out_of_range(amount: object, limit: object, places: int) -> str:
    """Return message for an amount too large or too precise to total exactly."""
    return (
        f"Amount must be smaller than {limit:,} in magnitude "
        f"with at most {places} decimal places, got {amount}"
    )


def slot_read_failed(key: str, reason: object) -> str:
    """Return message when a storage slot cannot be read."""
    return f"Could not read storage slot '{key}': {reason}"


def slot_write_failed(key: str, reason: object) -> str:
    """Return message when a storage slot cannot be written."""
    return f"Could not write storage slot '{key}': {reason}"
