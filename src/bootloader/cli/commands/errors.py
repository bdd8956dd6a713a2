"""Shared error handling for CLI commands."""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from bootloader.lib.errors import BootloaderError, ConfigError, StateError
from bootloader.lib.logging_config import get_logger

logger = get_logger(__name__)


@contextmanager
def handle_command_errors(operation: str) -> Generator[None, None, None]:
    """Context manager for consistent error handling in CLI commands.

    Exit codes:
        2: Configuration or state file error
        3: Operation error
    """
    try:
        yield
    except (ConfigError, StateError) as e:
        logger.error(f"Configuration error: {e}")
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(2)
    except BootloaderError as e:
        logger.error(f"{operation} failed: {e}")
        click.secho(f"Error: {operation} failed", fg="red", err=True)
        click.echo(f"  {e}", err=True)
        sys.exit(3)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)
