"""Action input handling for deployer-action."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from deployer_action.core.constants import DEFAULT_INPUTS, Inputs
from deployer_action.core.types import (
    BinaryLocatorRequest,
    DeployerArguments,
    SshBootstrapConfig,
)
from deployer_action.errors import ConfigurationError

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def input_env_name(name: str) -> str:
    """Get the environment variable name holding an input.

    Args:
        name: Input name, e.g. ``deployer-version``.

    Returns:
        Variable name, e.g. ``INPUT_DEPLOYER-VERSION``.
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


class ActionInputs:
    """Read-only view over the action inputs."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        defaults: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize action inputs.

        Args:
            environ: Environment holding ``INPUT_*`` variables. Uses
                ``os.environ`` if None.
            defaults: Fallback values for unset inputs.
        """
        self._environ = os.environ if environ is None else environ
        self._defaults = DEFAULT_INPUTS if defaults is None else defaults

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "ActionInputs":
        """Create inputs from a mapping of input name to value.

        Args:
            data: Input values keyed by input name.

        Returns:
            ActionInputs instance.
        """
        return cls({input_env_name(k): v for k, v in data.items()})

    def get(self, name: str, required: bool = False) -> str:
        """Get a trimmed input value.

        Args:
            name: Input name.
            required: Raise if the value is empty.

        Returns:
            Input value, or its default, or an empty string.

        Raises:
            ConfigurationError: If a required input is empty.
        """
        if isinstance(name, Inputs):
            name = name.value
        env_name = input_env_name(name)
        if env_name in self._environ:
            value = self._environ[env_name].strip()
        else:
            value = self._defaults.get(name, "")
        if required and value == "":
            raise ConfigurationError(f"Input required and not supplied: {name}")
        return value

    def get_bool(self, name: str) -> bool:
        """Get a boolean input.

        Args:
            name: Input name.

        Returns:
            Parsed boolean.

        Raises:
            ConfigurationError: If the value is not a recognised boolean.
        """
        value = self.get(name) or self._defaults.get(name, "")
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise ConfigurationError(
            f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )

    def get_options(self) -> dict[str, str]:
        """Get the Deployer ``-o`` options.

        Returns:
            Option names mapped to string values, in input order.

        Raises:
            ConfigurationError: If the input is not a JSON object.
        """
        raw = self.get(Inputs.DEPLOYER_OPTIONS) or "{}"
        try:
            data: Any = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in options: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Invalid JSON in options: expected an object")

        return {
            str(key): value if isinstance(value, str) else json.dumps(value)
            for key, value in data.items()
        }

    def working_directory(self, base: Path | None = None) -> Path:
        """Get the directory Deployer runs in.

        Args:
            base: Directory ``sub-directory`` is relative to. Defaults to cwd.

        Returns:
            Absolute working directory.
        """
        base = base or Path.cwd()
        sub_directory = self.get(Inputs.SUB_DIRECTORY)
        return (base / sub_directory).resolve() if sub_directory else base.resolve()

    def to_ssh_config(self) -> SshBootstrapConfig:
        """Convert inputs to SshBootstrapConfig."""
        return SshBootstrapConfig(
            private_key=self.get(Inputs.SSH_PRIVATE_KEY),
            known_hosts=self.get(Inputs.SSH_KNOWN_HOSTS),
            ssh_config=self.get(Inputs.SSH_CONFIG),
            skip=self.get_bool(Inputs.SSH_SKIP_SETUP),
        )

    def to_locator_request(self, base: Path | None = None) -> BinaryLocatorRequest:
        """Convert inputs to BinaryLocatorRequest."""
        return BinaryLocatorRequest(
            binary_path=self.get(Inputs.DEPLOYER_BINARY),
            version=self.get(Inputs.DEPLOYER_VERSION),
            working_directory=self.working_directory(base),
        )

    def to_deployer_arguments(self) -> DeployerArguments:
        """Convert inputs to DeployerArguments."""
        return DeployerArguments(
            command=self.get(Inputs.DEPLOYER_COMMAND, required=True).split(),
            ansi_output=self.get_bool(Inputs.DEPLOYER_ANSI_OUTPUT),
            verbosity=self.get(Inputs.DEPLOYER_VERBOSITY),
            options=self.get_options(),
        )

    @property
    def data(self) -> dict[str, str]:
        """Get all set inputs keyed by input name."""
        return {
            name.value: self.get(name)
            for name in Inputs
            if self._environ.get(input_env_name(name.value), "").strip()
        }
