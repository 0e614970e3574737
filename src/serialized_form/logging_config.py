"""Logging configuration for serialized-form."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure loguru with appropriate level.

    ``quiet`` wins over ``verbose``: only warnings and errors are shown.
    """
    logger.remove()
    if quiet:
        level = "WARNING"
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
