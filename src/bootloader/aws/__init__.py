"""AWS output sources for bootloader environments."""

from __future__ import annotations

from bootloader.aws.cloudformation import CloudFormationStackManager, StackManager

__all__ = ["CloudFormationStackManager", "StackManager"]
