"""Map raw terraform outputs to the values a GCP director needs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bootloader.lib.errors import TerraformError
from bootloader.lib.logging_config import get_logger
from bootloader.models.outputs import TerraformOutputs

logger = get_logger(__name__)

# TerraformOutputs field -> terraform output name
REQUIRED_OUTPUTS = {
    "network_name": "network_name",
    "subnetwork_name": "subnetwork_name",
    "bosh_tag": "bosh_open_tag_name",
    "internal_tag": "internal_tag_name",
    "external_ip": "external_ip",
    "director_address": "director_address",
}

LB_OUTPUTS = {
    "cf": {
        "router_backend_service": "router_backend_service",
        "ssh_proxy_target_pool": "ssh_proxy_target_pool",
        "tcp_router_target_pool": "tcp_router_target_pool",
        "ws_target_pool": "ws_target_pool",
    },
    "concourse": {
        "concourse_target_pool": "concourse_target_pool",
    },
}


class TerraformManager(ABC):
    """Abstract source of raw terraform outputs."""

    @abstractmethod
    def get_outputs(self, tf_state: str) -> dict[str, Any]:
        """Return the outputs recorded in a terraform state.

        Args:
            tf_state: Serialized terraform state

        Returns:
            Mapping of output name to output value.

        Raises:
            TerraformError: If the outputs cannot be read.
        """


class TerraformOutputProvider:
    """Read director outputs from a terraform state."""

    def __init__(self, terraform_manager: TerraformManager) -> None:
        """Initialize the provider with a raw output source."""
        self._terraform_manager = terraform_manager

    def get(self, tf_state: str, lb_type: str) -> TerraformOutputs:
        """Return the outputs required to deploy a GCP director.

        Args:
            tf_state: Serialized terraform state of the environment
            lb_type: Load balancer type; selects which LB outputs are read

        Returns:
            TerraformOutputs populated from the state

        Raises:
            TerraformError: If the state is missing a required output.
        """
        raw = self._terraform_manager.get_outputs(tf_state)

        values: dict[str, str] = {}
        for field_name, output_name in REQUIRED_OUTPUTS.items():
            if output_name not in raw:
                raise TerraformError(f"missing terraform output: {output_name}")
            values[field_name] = _output_string(raw[output_name])

        for field_name, output_name in LB_OUTPUTS.get(lb_type, {}).items():
            if output_name in raw:
                values[field_name] = _output_string(raw[output_name])
            else:
                logger.debug("Terraform output %s not present", output_name)

        return TerraformOutputs(**values)


def _output_string(value: Any) -> str:
    """Render an output value as a string. Null outputs become empty."""
    if value is None:
        return ""
    return str(value)
