"""Configuration loader for bootloader.

Settings are resolved with the following precedence (highest first):

1. Environment variables (``BBL_*``)
2. YAML configuration file (``bbl.yml`` by default)
3. Built-in defaults
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from bootloader.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_FILE
from bootloader.lib.errors import ConfigError

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "state_dir": "BBL_STATE_DIR",
    "terraform_binary": "BBL_TERRAFORM_BINARY",
    "aws_region": "BBL_AWS_REGION",
    "debug": "BBL_DEBUG",
}


class BootloaderConfig(BaseModel):
    """Resolved bootloader settings."""

    model_config = ConfigDict(extra="forbid")

    state_dir: Path = Field(
        default=Path(str(DEFAULT_CONFIG["state_dir"])),
        description="Directory holding bbl-state.json",
    )
    terraform_binary: str = Field(
        default=str(DEFAULT_CONFIG["terraform_binary"]),
        description="Terraform executable",
    )
    aws_region: str = Field(default="", description="Fallback AWS region")
    debug: bool = Field(default=False, description="Enable debug logging")


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value in correct type
    """
    if field_name == "debug":
        return value.lower() in ("true", "1", "yes", "on")
    return value


def _env_overrides(env_vars: os._Environ[str] | dict[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name in env_vars:
            overrides[field_name] = _parse_env_value(
                field_name, env_vars[env_var_name]
            )
    return overrides


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML configuration file into a dictionary.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping
    """
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(str(path), f"Failed to read config file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(str(path), f"Invalid YAML: {exc}") from exc

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(str(path), "Config file must contain a YAML mapping")
    return content


def load_config(
    path: Path | None = None,
    env_vars: os._Environ[str] | dict[str, str] | None = None,
) -> BootloaderConfig:
    """Load bootloader settings.

    Args:
        path: Explicit config file. When omitted, ``bbl.yml`` in the current
            directory is used if it exists.
        env_vars: Environment mapping, defaults to ``os.environ``

    Returns:
        Validated BootloaderConfig

    Raises:
        ConfigError: If the config file is missing, malformed or invalid
    """
    if env_vars is None:
        env_vars = os.environ

    values: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise ConfigError(str(path), "Config file does not exist")
        values.update(_read_yaml(path))
    elif Path(DEFAULT_CONFIG_FILE).exists():
        logger.debug("Loading config from %s", DEFAULT_CONFIG_FILE)
        values.update(_read_yaml(Path(DEFAULT_CONFIG_FILE)))

    values.update(_env_overrides(env_vars))

    try:
        return BootloaderConfig(**values)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "config"
        raise ConfigError(field, first["msg"]) from exc
