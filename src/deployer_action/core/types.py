"""Type definitions for deployer-action."""

from pathlib import Path

from pydantic import BaseModel, Field


class SshBootstrapConfig(BaseModel):
    """SSH credential bootstrap configuration.

    Empty strings mean the value was not supplied.
    """

    private_key: str = ""
    known_hosts: str = ""
    ssh_config: str = ""
    skip: bool = False

    model_config = {"extra": "forbid", "frozen": True}


class BinaryLocatorRequest(BaseModel):
    """Where and how to look for the Deployer binary."""

    binary_path: str = ""
    version: str = ""
    working_directory: Path

    model_config = {"extra": "forbid", "frozen": True}


class ManifestEntry(BaseModel):
    """A release record from the Deployer manifest."""

    version: str
    url: str
    name: str | None = None
    sha1: str | None = None

    model_config = {"extra": "ignore", "frozen": True}


class DeployerArguments(BaseModel):
    """Arguments passed to the Deployer command line."""

    command: list[str]
    ansi_output: bool = True
    verbosity: str = "-v"
    # Insertion order is the order the -o flags are emitted in.
    options: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}
