"""Entry point for the ``bbl`` command line."""

from __future__ import annotations

from pathlib import Path

import click

from bootloader import __version__
from bootloader.cli.commands.lbs import lbs
from bootloader.cli.commands.outputs import outputs
from bootloader.config.loader import load_config
from bootloader.lib.errors import ConfigError
from bootloader.lib.logging_config import setup_logging


@click.group(name="bbl", invoke_without_command=True)
@click.version_option(__version__, prog_name="bbl")
@click.option(
    "--state-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing bbl-state.json",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a bbl.yml configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors")
@click.pass_context
def main(
    ctx: click.Context,
    state_dir: Path | None,
    config_path: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Inspect and manage bootloader environments.

    Example:

        bbl lbs

        bbl --state-dir ./env lbs --json
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        ctx.exit(2)

    if state_dir is not None:
        config = config.model_copy(update={"state_dir": state_dir})

    setup_logging(verbose=verbose or config.debug, quiet=quiet)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


main.add_command(lbs)
main.add_command(outputs)
