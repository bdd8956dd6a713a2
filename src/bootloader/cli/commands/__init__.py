"""CLI commands for bootloader."""
