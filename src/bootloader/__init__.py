"""bootloader - create and delete BOSH directors on AWS and GCP.

bootloader reads a persisted environment state, gathers the infrastructure
outputs of its backing terraform state or CloudFormation stack, and drives a
director executor through interpolate, create-env and delete-env.
"""

from bootloader.lib.errors import BootloaderError, ConfigError, InvalidIAASError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BootloaderError",
    "ConfigError",
    "InvalidIAASError",
]
