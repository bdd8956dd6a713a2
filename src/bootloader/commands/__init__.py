"""Environment reporting commands."""

from bootloader.commands.aws_lbs import AWSLBs

__all__ = ["AWSLBs"]
