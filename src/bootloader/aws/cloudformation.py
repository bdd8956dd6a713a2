"""CloudFormation stack lookups for AWS environments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from bootloader.lib.errors import (
    CloudSDKNotInstalledError,
    StackError,
    StackNotFoundError,
)
from bootloader.lib.logging_config import get_logger
from bootloader.models.outputs import Stack

if TYPE_CHECKING:
    from bootloader.models.state import AWS

logger = get_logger(__name__)


class StackManager(ABC):
    """Abstract source of described CloudFormation stacks."""

    @abstractmethod
    def describe(self, stack_name: str) -> Stack:
        """Describe a stack and return its outputs.

        Args:
            stack_name: Name of the CloudFormation stack

        Returns:
            Stack with outputs keyed by OutputKey.

        Raises:
            StackNotFoundError: If the stack does not exist.
            StackError: If the stack cannot be described.
        """


class CloudFormationStackManager(StackManager):
    """Describe stacks through the boto3 CloudFormation client."""

    def __init__(self, aws: AWS, client: Any | None = None) -> None:
        """Initialize the stack manager.

        Args:
            aws: AWS settings from the environment state
            client: Optional preconfigured CloudFormation client

        Raises:
            CloudSDKNotInstalledError: If boto3 is not installed
        """
        try:
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError as exc:
            raise CloudSDKNotInstalledError(provider="aws", sdk_name="boto3") from exc

        self._client_errors: tuple[type[Exception], ...] = (ClientError, BotoCoreError)
        self._client = client if client is not None else _create_client(aws)

    def describe(self, stack_name: str) -> Stack:
        """Describe a CloudFormation stack."""
        logger.debug("Describing CloudFormation stack %s", stack_name)
        try:
            response = self._client.describe_stacks(StackName=stack_name)
        except self._client_errors as exc:
            if "does not exist" in str(exc):
                raise StackNotFoundError(stack_name) from exc
            raise StackError(f"failed to describe stack {stack_name}: {exc}") from exc

        stacks = response.get("Stacks") or []
        if not stacks:
            raise StackNotFoundError(stack_name)

        data = stacks[0]
        outputs = {
            output["OutputKey"]: output.get("OutputValue", "")
            for output in data.get("Outputs") or []
        }
        return Stack(
            name=data.get("StackName", stack_name),
            status=data.get("StackStatus", ""),
            outputs=outputs,
        )


def _create_client(aws: AWS) -> Any:
    import boto3

    kwargs: dict[str, str] = {}
    if aws.region:
        kwargs["region_name"] = aws.region
    if aws.access_key_id and aws.secret_access_key:
        kwargs["aws_access_key_id"] = aws.access_key_id
        kwargs["aws_secret_access_key"] = aws.secret_access_key
    return boto3.client("cloudformation", **kwargs)
