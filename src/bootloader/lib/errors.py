"""Custom exception hierarchy for bootloader configuration and operations."""


class BootloaderError(Exception):
    """Base exception for all bootloader errors.

    All bootloader-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI layer.
    """

    pass


class ConfigError(BootloaderError):
    """Exception raised for configuration errors.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class InvalidIAASError(BootloaderError):
    """Exception raised when a state does not declare a supported IAAS."""

    def __init__(self, message: str = "A valid IAAS was not provided") -> None:
        """Create an IAAS validation error."""
        self.message = message
        super().__init__(message)


class StateError(BootloaderError):
    """Exception raised when the state file cannot be read or written.

    Attributes:
        path: Path to the state file
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize StateError with path and message."""
        self.path = path
        self.message = message
        super().__init__(message)


class TerraformError(BootloaderError):
    """Exception raised when terraform outputs cannot be retrieved."""

    def __init__(self, message: str) -> None:
        """Create a terraform error."""
        self.message = message
        super().__init__(message)


class StackError(BootloaderError):
    """Exception raised when a CloudFormation stack cannot be described."""

    def __init__(self, message: str) -> None:
        """Create a stack error."""
        self.message = message
        super().__init__(message)


class StackNotFoundError(StackError):
    """Exception raised when a CloudFormation stack does not exist.

    Attributes:
        stack_name: Name of the stack that was looked up
    """

    def __init__(self, stack_name: str) -> None:
        """Initialize StackNotFoundError with the missing stack name."""
        self.stack_name = stack_name
        super().__init__(f"stack not found: {stack_name}")


class CloudSDKNotInstalledError(BootloaderError):
    """Error raised when an optional cloud SDK is not importable.

    Attributes:
        provider: Cloud provider name (aws, gcp)
        sdk_name: Distribution name of the missing SDK
    """

    def __init__(self, provider: str, sdk_name: str) -> None:
        """Initialize CloudSDKNotInstalledError with install guidance.

        Args:
            provider: Cloud provider that requires the SDK
            sdk_name: Name of the package to install
        """
        self.provider = provider
        self.sdk_name = sdk_name
        self.message = (
            f"The {provider} SDK is not installed.\n"
            f"Install it with: pip install {sdk_name}"
        )
        super().__init__(self.message)


class NoLBsFoundError(BootloaderError):
    """Exception raised when an environment has no load balancers to report."""

    def __init__(self) -> None:
        """Create a no-LBs error."""
        self.message = "no lbs found"
        super().__init__(self.message)
