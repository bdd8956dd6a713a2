"""Director lifecycle manager.

The manager turns a persisted state plus infrastructure outputs into the
inputs the executor needs, drives interpolate and create-env in sequence, and
folds the results into a new state. Collaborator exceptions propagate
unchanged; the input state is never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from bootloader.bosh.inputs import build_interpolate_input, director_address
from bootloader.lib.errors import InvalidIAASError
from bootloader.lib.logging_config import get_logger
from bootloader.models.bosh import CreateEnvInput, DeleteEnvInput
from bootloader.models.state import BOSH, IAAS, State

if TYPE_CHECKING:
    from bootloader.aws.cloudformation import StackManager
    from bootloader.bosh.executor import BOSHExecutor
    from bootloader.models.outputs import Stack, TerraformOutputs
    from bootloader.terraform.output_provider import TerraformOutputProvider

logger = get_logger(__name__)

DIRECTOR_USERNAME = "admin"


class Manager:
    """Create and delete directors for AWS and GCP environments."""

    def __init__(
        self,
        executor: BOSHExecutor,
        terraform_output_provider: TerraformOutputProvider,
        stack_manager: StackManager,
    ) -> None:
        """Initialize the manager with its collaborators.

        Args:
            executor: Executor that interpolates, creates and deletes directors
            terraform_output_provider: Output source for GCP environments
            stack_manager: Output source for AWS environments
        """
        self._executor = executor
        self._terraform_output_provider = terraform_output_provider
        self._stack_manager = stack_manager

    def create(self, state: State) -> State:
        """Create or update the director for an environment.

        Args:
            state: Current persisted state

        Returns:
            A copy of ``state`` with its director sub-record replaced

        Raises:
            InvalidIAASError: If ``state.iaas`` is not aws or gcp
        """
        if state.iaas not in (IAAS.AWS, IAAS.GCP):
            raise InvalidIAASError()

        outputs = self._infrastructure_outputs(state)

        interpolate_input = build_interpolate_input(state, outputs)
        logger.debug(
            "Interpolating manifest for %s on %s",
            interpolate_input.director_name,
            state.iaas,
        )
        interpolate_output = self._executor.interpolate(interpolate_input)

        variables = interpolate_output.variables
        variables_yaml = _dump_variables(variables)

        logger.debug("Running create-env for %s", interpolate_input.director_name)
        create_env_output = self._executor.create_env(
            CreateEnvInput(
                manifest=interpolate_output.manifest,
                state=state.bosh.state,
                variables=variables_yaml,
            )
        )

        director_ssl = variables.get("director_ssl")
        if not isinstance(director_ssl, dict):
            director_ssl = {}
        admin_password = _variable_string(variables.get("admin_password"))

        bosh = BOSH.model_validate(
            {
                **state.bosh.model_dump(),
                "state": create_env_output.state,
                "variables": variables_yaml,
                "manifest": interpolate_output.manifest,
                "director_name": interpolate_input.director_name,
                "director_address": director_address(outputs),
                "director_username": DIRECTOR_USERNAME if admin_password else "",
                "director_password": admin_password,
                "director_ssl_ca": _variable_string(director_ssl.get("ca")),
                "director_ssl_certificate": _variable_string(
                    director_ssl.get("certificate")
                ),
                "director_ssl_private_key": _variable_string(
                    director_ssl.get("private_key")
                ),
            }
        )
        logger.debug("Director %s created", interpolate_input.director_name)
        return state.model_copy(update={"bosh": bosh})

    def delete(self, state: State) -> None:
        """Delete the director recorded in ``state``.

        Only the stored manifest, director state and variables are used. The
        caller is responsible for clearing the persisted record afterwards.
        """
        logger.debug("Running delete-env for %s", state.bosh.director_name)
        self._executor.delete_env(
            DeleteEnvInput(
                manifest=state.bosh.manifest,
                state=state.bosh.state,
                variables=state.bosh.variables,
            )
        )

    def _infrastructure_outputs(self, state: State) -> TerraformOutputs | Stack:
        if state.iaas == IAAS.GCP:
            logger.debug("Reading terraform outputs for lb type %r", state.lb.type)
            return self._terraform_output_provider.get(state.tf_state, state.lb.type)

        logger.debug("Describing stack %s", state.stack.name)
        return self._stack_manager.describe(state.stack.name)


def _dump_variables(variables: dict[str, Any]) -> str:
    """Serialize the decoded variables store back to YAML."""
    if not variables:
        return ""
    return yaml.safe_dump(variables, default_flow_style=False)


def _variable_string(value: Any) -> str:
    """Return a variables store entry as a string, with ``None`` as empty."""
    if value is None:
        return ""
    return str(value)
