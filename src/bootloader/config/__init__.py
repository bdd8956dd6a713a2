"""Configuration loading for bootloader."""

from bootloader.config.loader import BootloaderConfig, load_config

__all__ = ["BootloaderConfig", "load_config"]
