"""Infrastructure output models.

These describe what the infrastructure output sources return. They are read
fresh on every create and are never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field


class TerraformOutputs(BaseModel):
    """Outputs of the terraform templates that back a GCP environment.

    Attributes:
        network_name: Name of the network the director is placed in
        subnetwork_name: Name of the subnetwork the director is placed in
        bosh_tag: Firewall tag that opens the director to the operator
        internal_tag: Firewall tag for internal traffic
        external_ip: Static external IP reserved for the director
        director_address: URL of the director API
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    network_name: str = ""
    subnetwork_name: str = ""
    bosh_tag: str = ""
    internal_tag: str = ""
    external_ip: str = ""
    director_address: str = ""

    # Load balancer outputs, present depending on the LB type
    router_backend_service: str = ""
    ssh_proxy_target_pool: str = ""
    tcp_router_target_pool: str = ""
    ws_target_pool: str = ""
    concourse_target_pool: str = ""


class Stack(BaseModel):
    """A described CloudFormation stack."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="", description="Stack name")
    status: str = Field(default="", description="Stack status")
    outputs: dict[str, str] = Field(
        default_factory=dict, description="Stack outputs keyed by OutputKey"
    )
