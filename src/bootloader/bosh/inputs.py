"""Assemble interpolation descriptors from a state and infrastructure outputs."""

from __future__ import annotations

from bootloader.lib.errors import InvalidIAASError
from bootloader.models.bosh import (
    AWSInterpolateInput,
    GCPInterpolateInput,
    InterpolateInput,
)
from bootloader.models.outputs import Stack, TerraformOutputs
from bootloader.models.state import IAAS, State

# CloudFormation output keys of the bbl AWS template
BOSH_SUBNET_AZ = "BOSHSubnetAZ"
BOSH_USER_ACCESS_KEY = "BOSHUserAccessKey"
BOSH_USER_SECRET_ACCESS_KEY = "BOSHUserSecretAccessKey"
BOSH_SECURITY_GROUP = "BOSHSecurityGroup"
BOSH_SUBNET = "BOSHSubnet"
BOSH_EIP = "BOSHEIP"
BOSH_URL = "BOSHURL"


def build_interpolate_input(
    state: State, outputs: TerraformOutputs | Stack
) -> InterpolateInput:
    """Build the interpolation descriptor for a state.

    Args:
        state: Persisted environment state
        outputs: Terraform outputs for GCP states, the described stack for AWS

    Returns:
        GCPInterpolateInput or AWSInterpolateInput depending on ``state.iaas``

    Raises:
        InvalidIAASError: If the IAAS is unsupported or the outputs do not
            match it
    """
    if state.iaas == IAAS.GCP and isinstance(outputs, TerraformOutputs):
        return _gcp_interpolate_input(state, outputs)
    if state.iaas == IAAS.AWS and isinstance(outputs, Stack):
        return _aws_interpolate_input(state, outputs)
    raise InvalidIAASError()


def director_address(outputs: TerraformOutputs | Stack) -> str:
    """Return the director URL exposed by the infrastructure outputs."""
    if isinstance(outputs, TerraformOutputs):
        return outputs.director_address
    return outputs.outputs.get(BOSH_URL, "")


def _gcp_interpolate_input(
    state: State, outputs: TerraformOutputs
) -> GCPInterpolateInput:
    return GCPInterpolateInput(
        director_name=state.director_name,
        zone=state.gcp.zone,
        network=outputs.network_name,
        subnetwork=outputs.subnetwork_name,
        tags=[outputs.bosh_tag, outputs.internal_tag],
        project_id=state.gcp.project_id,
        external_ip=outputs.external_ip,
        credentials_json=state.gcp.service_account_key,
        private_key=state.key_pair.private_key,
        bosh_state=state.bosh.state,
        variables=state.bosh.variables,
    )


def _aws_interpolate_input(state: State, stack: Stack) -> AWSInterpolateInput:
    stack_outputs = stack.outputs
    return AWSInterpolateInput(
        director_name=state.director_name,
        az=stack_outputs.get(BOSH_SUBNET_AZ, ""),
        access_key_id=stack_outputs.get(BOSH_USER_ACCESS_KEY, ""),
        secret_access_key=stack_outputs.get(BOSH_USER_SECRET_ACCESS_KEY, ""),
        region=state.aws.region,
        default_key_name=state.key_pair.name,
        default_security_groups=[stack_outputs.get(BOSH_SECURITY_GROUP, "")],
        subnet_id=stack_outputs.get(BOSH_SUBNET, ""),
        external_ip=stack_outputs.get(BOSH_EIP, ""),
        private_key=state.key_pair.private_key,
        bosh_state=state.bosh.state,
        variables=state.bosh.variables,
    )
