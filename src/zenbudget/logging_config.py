"""Logging configuration."""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure application logging.

    Args:
        level: Log level name, e.g. "DEBUG" or "warning"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
