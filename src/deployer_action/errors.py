"""Error types raised by deployer-action."""


class DeployerActionError(Exception):
    """Base class for every failure reported by the action."""

    pass


class ConfigurationError(DeployerActionError):
    """Raised when an input is missing or malformed."""

    pass


class BootstrapError(DeployerActionError):
    """Raised when SSH agent or credential setup fails."""

    pass


class BinaryNotFoundError(DeployerActionError):
    """Raised when no Deployer binary can be located."""

    pass


class DownloadError(DeployerActionError):
    """Raised when the Deployer release cannot be resolved or fetched."""

    pass


class ExecutionError(DeployerActionError):
    """Raised when the Deployer command fails."""

    pass
