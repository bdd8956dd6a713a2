"""Models exchanged with the director executor.

The interpolation descriptor is a tagged union over the IAAS. Each variant
only carries the fields its IAAS needs, so a serialized GCP descriptor never
contains AWS keys and vice versa.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _InterpolateInputBase(BaseModel):
    """Fields shared by every interpolation descriptor."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    director_name: str = Field(..., description="Director name")
    private_key: str = Field(default="", repr=False, description="Director SSH key")
    bosh_state: dict[str, Any] = Field(
        default_factory=dict, description="Last known director state"
    )
    variables: str = Field(
        default="", repr=False, description="Last known variables YAML"
    )


class GCPInterpolateInput(_InterpolateInputBase):
    """Interpolation descriptor for GCP environments."""

    iaas: Literal["gcp"] = "gcp"
    zone: str = ""
    network: str = ""
    subnetwork: str = ""
    tags: list[str] = Field(default_factory=list)
    project_id: str = ""
    external_ip: str = ""
    credentials_json: str = Field(default="", repr=False)


class AWSInterpolateInput(_InterpolateInputBase):
    """Interpolation descriptor for AWS environments."""

    iaas: Literal["aws"] = "aws"
    az: str = ""
    access_key_id: str = ""
    secret_access_key: str = Field(default="", repr=False)
    region: str = ""
    default_key_name: str = ""
    default_security_groups: list[str] = Field(default_factory=list)
    subnet_id: str = ""
    external_ip: str = ""


InterpolateInput = Annotated[
    Union[GCPInterpolateInput, AWSInterpolateInput],
    Field(discriminator="iaas"),
]


class InterpolateOutput(BaseModel):
    """Result of rendering the director manifest."""

    manifest: str = Field(..., description="Rendered director manifest")
    variables: dict[str, Any] = Field(
        default_factory=dict, description="Decoded variables store"
    )


class CreateEnvInput(BaseModel):
    """Arguments for creating or updating a director."""

    manifest: str
    state: dict[str, Any] = Field(default_factory=dict)
    variables: str = Field(default="", repr=False)


class CreateEnvOutput(BaseModel):
    """Result of a successful create-env."""

    state: dict[str, Any] = Field(default_factory=dict)


class DeleteEnvInput(BaseModel):
    """Arguments for deleting a director."""

    manifest: str = ""
    state: dict[str, Any] = Field(default_factory=dict)
    variables: str = Field(default="", repr=False)
