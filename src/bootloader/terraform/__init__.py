"""Terraform output sources for bootloader environments."""

from __future__ import annotations

from bootloader.terraform.cli import TerraformCLI
from bootloader.terraform.output_provider import (
    TerraformManager,
    TerraformOutputProvider,
)

__all__ = ["TerraformCLI", "TerraformManager", "TerraformOutputProvider"]
