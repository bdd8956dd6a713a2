"""Logging configuration for bootloader.

Provides a single place to configure log levels and formats for the CLI and
library modules. Library modules obtain loggers via ``get_logger(__name__)``
and never configure handlers themselves.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers from third-party SDKs that are too chatty at DEBUG level
NOISY_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")

_ROOT_LOGGER_NAME = "bootloader"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Module name, typically ``__name__``

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the bootloader package.

    Args:
        verbose: Enable DEBUG level output
        quiet: Only show ERROR level output (takes precedence over verbose)
    """
    global _handler

    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Avoid stacking handlers when called more than once
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(_handler)

    for handler in root.handlers:
        handler.setLevel(level)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)
