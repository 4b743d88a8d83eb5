"""Core layer for deployer-action."""

from deployer_action.core.inputs import ActionInputs
from deployer_action.core.types import (
    BinaryLocatorRequest,
    DeployerArguments,
    ManifestEntry,
    SshBootstrapConfig,
)

__all__ = [
    "ActionInputs",
    "BinaryLocatorRequest",
    "DeployerArguments",
    "ManifestEntry",
    "SshBootstrapConfig",
]
