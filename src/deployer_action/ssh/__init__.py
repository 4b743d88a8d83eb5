"""SSH credential bootstrap for deployer-action."""

from deployer_action.ssh.agent import SSHBootstrapper, setup_ssh
from deployer_action.ssh.keys import describe_private_key, normalize_private_key

__all__ = [
    "SSHBootstrapper",
    "describe_private_key",
    "normalize_private_key",
    "setup_ssh",
]
