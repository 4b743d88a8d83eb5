"""Constants shared across deployer-action."""

from enum import Enum


class Inputs(str, Enum):
    """Names of the action inputs."""

    DEPLOYER_VERSION = "deployer-version"
    DEPLOYER_BINARY = "deployer-binary"
    DEPLOYER_COMMAND = "dep"
    DEPLOYER_OPTIONS = "options"
    DEPLOYER_VERBOSITY = "verbosity"
    DEPLOYER_ANSI_OUTPUT = "ansi"
    SSH_SKIP_SETUP = "skip-ssh-setup"
    SSH_CONFIG = "ssh-config"
    SSH_KNOWN_HOSTS = "known-hosts"
    SSH_PRIVATE_KEY = "private-key"
    SUB_DIRECTORY = "sub-directory"


DEFAULT_INPUTS: dict[str, str] = {
    Inputs.DEPLOYER_OPTIONS.value: "{}",
    Inputs.DEPLOYER_VERBOSITY.value: "-v",
    Inputs.DEPLOYER_ANSI_OUTPUT.value: "true",
    Inputs.SSH_SKIP_SETUP.value: "false",
}

SSH_AUTH_SOCK = "/tmp/ssh-auth.sock"
SSH_AUTH_SOCK_VAR = "SSH_AUTH_SOCK"
STRICT_HOST_KEY_CHECKING_OFF = "StrictHostKeyChecking no\n"

MANIFEST_URL = "https://deployer.org/manifest.json"
DEPLOYER_PACKAGE = "deployer/deployer"
DEPLOYER_PHAR = "deployer.phar"
COMPOSER_LOCK = "composer.lock"
COMPOSER_LOCK_SECTIONS = ("packages", "packages-dev")

# Checked in order; the first existing file wins.
LOCAL_BINARIES = (
    "vendor/bin/deployer.phar",
    "vendor/bin/dep",
    "deployer.phar",
)

PHP_INTERPRETER = "php"
