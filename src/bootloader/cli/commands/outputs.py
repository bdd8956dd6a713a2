"""CLI command that prints the infrastructure outputs a director is built from."""

from __future__ import annotations

import json

import click

from bootloader.aws.cloudformation import CloudFormationStackManager
from bootloader.cli.commands.errors import handle_command_errors
from bootloader.config.loader import BootloaderConfig
from bootloader.lib.errors import InvalidIAASError
from bootloader.models.state import IAAS, State
from bootloader.storage.state import load_state
from bootloader.terraform.cli import TerraformCLI
from bootloader.terraform.output_provider import TerraformOutputProvider


@click.command()
@click.pass_obj
def outputs(obj: dict[str, BootloaderConfig]) -> None:
    """Print the infrastructure outputs for the environment as JSON."""
    config = obj["config"]

    with handle_command_errors("outputs"):
        state = load_state(config.state_dir)
        click.echo(json.dumps(_read_outputs(state, config), indent=2, sort_keys=True))


def _read_outputs(state: State, config: BootloaderConfig) -> dict[str, str]:
    if state.iaas == IAAS.GCP:
        provider = TerraformOutputProvider(TerraformCLI(config.terraform_binary))
        terraform_outputs = provider.get(state.tf_state, state.lb.type)
        return terraform_outputs.model_dump(exclude_defaults=True)

    if state.iaas == IAAS.AWS:
        aws = state.aws
        if not aws.region and config.aws_region:
            aws = aws.model_copy(update={"region": config.aws_region})
        stack = CloudFormationStackManager(aws).describe(state.stack.name)
        return dict(stack.outputs)

    raise InvalidIAASError()
