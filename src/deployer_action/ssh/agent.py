"""SSH agent and credential bootstrap."""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from deployer_action.core.actions import export_variable
from deployer_action.core.constants import (
    SSH_AUTH_SOCK,
    SSH_AUTH_SOCK_VAR,
    STRICT_HOST_KEY_CHECKING_OFF,
)
from deployer_action.core.types import SshBootstrapConfig
from deployer_action.errors import BootstrapError
from deployer_action.process import CommandResult, run_command
from deployer_action.ssh.keys import describe_private_key, normalize_private_key

logger = logging.getLogger(__name__)

PRIVATE_FILE_MODE = 0o600


def _write_private_file(path: Path, content: str, append: bool) -> None:
    """Write a file readable and writable by the owner only."""
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(path, flags, PRIVATE_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)
    # os.open only applies the mode to new files
    os.chmod(path, PRIVATE_FILE_MODE)


class SSHBootstrapper:
    """Prepares an SSH agent and client configuration for the job."""

    def __init__(
        self,
        home: Path,
        executor: Callable[..., CommandResult] = run_command,
        exporter: Callable[[str, str], None] = export_variable,
    ) -> None:
        """Initialize the bootstrapper.

        Args:
            home: Home directory holding ``.ssh``.
            executor: Runs external commands.
            exporter: Exports environment variables to later steps.
        """
        self._home = home
        self._executor = executor
        self._exporter = exporter

    @property
    def ssh_dir(self) -> Path:
        """Get the SSH state directory."""
        return self._home / ".ssh"

    def bootstrap(self, config: SshBootstrapConfig) -> None:
        """Run every setup step in order.

        Args:
            config: SSH bootstrap configuration.

        Raises:
            BootstrapError: If any step fails.
        """
        if config.skip:
            logger.info("Skipping SSH setup.")
            return

        self.ensure_ssh_dir()
        self.start_agent()
        if config.private_key:
            self.add_private_key(config.private_key)
        self.configure_host_keys(config.known_hosts)
        if config.ssh_config:
            self.write_config(config.ssh_config)

    def ensure_ssh_dir(self) -> None:
        """Create the SSH directory if missing."""
        try:
            self.ssh_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BootstrapError(f"Cannot create {self.ssh_dir}: {e}") from e

    def start_agent(self) -> None:
        """Start ssh-agent on the fixed socket and export its location."""
        result = self._executor(["ssh-agent", "-a", SSH_AUTH_SOCK])
        if not result.ok:
            raise BootstrapError(
                f"Failed to start ssh-agent on {SSH_AUTH_SOCK}: "
                f"{result.stderr.strip() or f'exit code {result.returncode}'}"
            )
        try:
            self._exporter(SSH_AUTH_SOCK_VAR, SSH_AUTH_SOCK)
        except (OSError, ValueError) as e:
            raise BootstrapError(f"Cannot export {SSH_AUTH_SOCK_VAR}: {e}") from e

    def add_private_key(self, private_key: str) -> None:
        """Load a private key into the agent through stdin."""
        private_key = normalize_private_key(private_key)

        info = describe_private_key(private_key)
        if info:
            logger.info(f"Adding {info.key_type} key {info.fingerprint} to ssh-agent.")
        else:
            logger.info("Adding private key to ssh-agent.")

        result = self._executor(["ssh-add", "-"], input_data=private_key)
        if not result.ok:
            raise BootstrapError(
                "Failed to add private key to ssh-agent: "
                f"{result.stderr.strip() or f'exit code {result.returncode}'}"
            )

    def configure_host_keys(self, known_hosts: str) -> None:
        """Trust the given host keys, or disable strict checking without them."""
        try:
            if known_hosts:
                _write_private_file(self.ssh_dir / "known_hosts", known_hosts, append=True)
            else:
                _write_private_file(
                    self.ssh_dir / "config", STRICT_HOST_KEY_CHECKING_OFF, append=True
                )
        except OSError as e:
            raise BootstrapError(f"Cannot write host key configuration: {e}") from e

    def write_config(self, ssh_config: str) -> None:
        """Replace the SSH client config."""
        try:
            _write_private_file(self.ssh_dir / "config", ssh_config, append=False)
        except OSError as e:
            raise BootstrapError(f"Cannot write {self.ssh_dir / 'config'}: {e}") from e


def setup_ssh(
    config: SshBootstrapConfig,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Bootstrap SSH credentials for the current job.

    Args:
        config: SSH bootstrap configuration.
        home: Home directory. Read from ``HOME`` if None.
        environ: Environment to read ``HOME`` from. Defaults to ``os.environ``.

    Raises:
        BootstrapError: If setup fails or no home directory is known.
    """
    if config.skip:
        logger.info("Skipping SSH setup.")
        return

    if home is None:
        environ = os.environ if environ is None else environ
        home_value = environ.get("HOME", "")
        if not home_value:
            raise BootstrapError("HOME is not set; cannot locate the .ssh directory")
        home = Path(home_value)

    SSHBootstrapper(home).bootstrap(config)
