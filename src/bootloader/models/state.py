"""Pydantic models for the persisted environment state.

A ``State`` describes one deployed environment: which IAAS it lives on, the
infrastructure identifiers needed to reach it, and the director sub-record
that holds the rendered manifest, variables and the opaque director state.

Models are frozen. Callers derive updated states with ``model_copy(update=...)``
so an in-flight operation can never leave a half-updated record behind.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STATE_VERSION = 3


class IAAS(str, Enum):
    """Supported infrastructure kinds."""

    AWS = "aws"
    GCP = "gcp"


class _StateModel(BaseModel):
    """Shared configuration for state models.

    Fields are stored on disk in camelCase and may be populated by either
    their Python name or their alias.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class AWS(_StateModel):
    """AWS account settings for an environment."""

    access_key_id: str = Field(default="", description="AWS access key ID")
    secret_access_key: str = Field(
        default="", repr=False, description="AWS secret access key"
    )
    region: str = Field(default="", description="AWS region")


class GCP(_StateModel):
    """GCP project settings for an environment."""

    service_account_key: str = Field(
        default="", repr=False, description="Service account key JSON"
    )
    project_id: str = Field(default="", description="GCP project ID")
    zone: str = Field(default="", description="GCP zone")
    region: str = Field(default="", description="GCP region")


class KeyPair(_StateModel):
    """SSH key pair used by the director VM."""

    name: str = Field(default="", description="Key pair name")
    private_key: str = Field(default="", repr=False, description="PEM private key")
    public_key: str = Field(default="", description="OpenSSH public key")


class Stack(_StateModel):
    """CloudFormation stack backing an AWS environment."""

    name: str = Field(default="", description="Stack name")
    lb_type: str = Field(default="", description="Load balancer type of the stack")
    certificate_name: str = Field(default="", description="LB certificate name")
    bbl_version: str = Field(default="", description="Version that last updated it")


class LB(_StateModel):
    """Load balancer settings requested for an environment."""

    type: str = Field(default="", description="Load balancer type (cf, concourse)")
    cert: str = Field(default="", description="LB certificate")
    key: str = Field(default="", repr=False, description="LB certificate key")
    domain: str = Field(default="", description="System domain")


class BOSH(_StateModel):
    """Director sub-record.

    ``state`` is the opaque blob returned by the executor after create-env and
    is round-tripped without interpretation.
    """

    director_name: str = Field(default="", description="Director name")
    director_username: str = Field(default="", description="Director admin user")
    director_password: str = Field(
        default="", repr=False, description="Director admin password"
    )
    director_address: str = Field(default="", description="Director URL")
    director_ssl_ca: str = Field(default="", description="Director SSL CA")
    director_ssl_certificate: str = Field(
        default="", description="Director SSL certificate"
    )
    director_ssl_private_key: str = Field(
        default="", repr=False, description="Director SSL private key"
    )
    state: dict[str, Any] = Field(
        default_factory=dict, description="Opaque director state"
    )
    variables: str = Field(default="", repr=False, description="Variables YAML")
    manifest: str = Field(default="", description="Rendered director manifest")


class State(_StateModel):
    """Persisted record for one environment."""

    version: int = Field(default=STATE_VERSION, description="State file version")
    iaas: str = Field(default="", description="Infrastructure kind (aws, gcp)")
    env_id: str = Field(default="", alias="envID", description="Environment ID")
    aws: AWS = Field(default_factory=AWS)
    gcp: GCP = Field(default_factory=GCP)
    key_pair: KeyPair = Field(default_factory=KeyPair)
    stack: Stack = Field(default_factory=Stack)
    lb: LB = Field(default_factory=LB)
    tf_state: str = Field(default="", description="Opaque terraform state")
    bosh: BOSH = Field(default_factory=BOSH)

    @property
    def director_name(self) -> str:
        """Director name derived from the environment ID."""
        return f"bosh-{self.env_id}"
