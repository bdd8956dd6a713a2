"""CLI command that prints environment load balancers."""

from __future__ import annotations

import click

from bootloader.cli.commands.errors import handle_command_errors
from bootloader.commands.aws_lbs import AWSLBs
from bootloader.config.loader import BootloaderConfig
from bootloader.lib.errors import BootloaderError
from bootloader.models.state import IAAS
from bootloader.storage.state import load_state
from bootloader.terraform.cli import TerraformCLI


@click.command()
@click.option("--json", "json_output", is_flag=True, help="Print as JSON")
@click.pass_obj
def lbs(obj: dict[str, BootloaderConfig], json_output: bool) -> None:
    """Print load balancer names and URLs for the environment."""
    config = obj["config"]

    with handle_command_errors("lbs"):
        state = load_state(config.state_dir)
        if state.iaas != IAAS.AWS:
            raise BootloaderError(
                f"lbs is only supported for aws environments, got {state.iaas!r}"
            )

        command = AWSLBs(TerraformCLI(binary=config.terraform_binary))
        command.execute(state, json_output=json_output)
