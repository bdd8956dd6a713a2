"""Base interface for director executors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bootloader.models.bosh import (
    CreateEnvInput,
    CreateEnvOutput,
    DeleteEnvInput,
    InterpolateInput,
    InterpolateOutput,
)


class BOSHExecutor(ABC):
    """Abstract base class for tools that create and delete directors."""

    @abstractmethod
    def interpolate(self, interpolate_input: InterpolateInput) -> InterpolateOutput:
        """Render the director manifest and variables for an environment.

        Args:
            interpolate_input: IAAS-specific descriptor, including the last
                known director state and variables YAML.

        Returns:
            InterpolateOutput with the rendered manifest and decoded variables.
        """

    @abstractmethod
    def create_env(self, create_env_input: CreateEnvInput) -> CreateEnvOutput:
        """Create or update a director from a rendered manifest.

        Args:
            create_env_input: Manifest, prior director state and variables YAML.

        Returns:
            CreateEnvOutput holding the new director state.
        """

    @abstractmethod
    def delete_env(self, delete_env_input: DeleteEnvInput) -> None:
        """Delete a director.

        Args:
            delete_env_input: Manifest, director state and variables YAML
                previously stored for the environment.
        """
