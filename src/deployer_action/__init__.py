"""deployer-action - SSH bootstrap and Deployer runner for CI jobs.

This package prepares an SSH agent inside an ephemeral CI runner and
runs Deployer (deployer.phar), downloading a release when the project
does not ship one.
"""

from deployer_action.core.inputs import ActionInputs
from deployer_action.core.types import (
    BinaryLocatorRequest,
    DeployerArguments,
    ManifestEntry,
    SshBootstrapConfig,
)
from deployer_action.deployer.locator import locate_binary
from deployer_action.deployer.runner import build_command, run_deployer
from deployer_action.errors import (
    BinaryNotFoundError,
    BootstrapError,
    ConfigurationError,
    DeployerActionError,
    DownloadError,
    ExecutionError,
)
from deployer_action.ssh.agent import SSHBootstrapper, setup_ssh

__version__ = "0.1.0"

__all__ = [
    # Inputs and types
    "ActionInputs",
    "BinaryLocatorRequest",
    "DeployerArguments",
    "ManifestEntry",
    "SshBootstrapConfig",
    # SSH
    "SSHBootstrapper",
    "setup_ssh",
    # Deployer
    "build_command",
    "locate_binary",
    "run_deployer",
    # Errors
    "BinaryNotFoundError",
    "BootstrapError",
    "ConfigurationError",
    "DeployerActionError",
    "DownloadError",
    "ExecutionError",
]


def main() -> None:
    """CLI entry point."""
    import sys

    from deployer_action.cli import main as cli_main

    sys.exit(cli_main())
