"""Deployer binary resolution and execution."""

from deployer_action.deployer.locator import locate_binary
from deployer_action.deployer.manifest import ManifestClient
from deployer_action.deployer.runner import build_command, run_deployer

__all__ = [
    "ManifestClient",
    "build_command",
    "locate_binary",
    "run_deployer",
]
