"""Tests for deployer_action.core.types module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from deployer_action.core.types import (
    BinaryLocatorRequest,
    DeployerArguments,
    ManifestEntry,
    SshBootstrapConfig,
)


class TestSshBootstrapConfig:
    """Tests for SshBootstrapConfig model."""

    def test_defaults(self) -> None:
        """Test that every value defaults to absent."""
        config = SshBootstrapConfig()
        assert config.private_key == ""
        assert config.known_hosts == ""
        assert config.ssh_config == ""
        assert config.skip is False

    def test_frozen(self) -> None:
        """Test that the config is immutable."""
        config = SshBootstrapConfig()
        with pytest.raises(ValidationError):
            config.skip = True  # type: ignore[misc]

    def test_extra_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            SshBootstrapConfig(unknown="x")  # type: ignore[call-arg]


class TestBinaryLocatorRequest:
    """Tests for BinaryLocatorRequest model."""

    def test_create(self) -> None:
        """Test creating a request."""
        request = BinaryLocatorRequest(working_directory=Path("/app"))
        assert request.binary_path == ""
        assert request.version == ""
        assert request.working_directory == Path("/app")


class TestManifestEntry:
    """Tests for ManifestEntry model."""

    def test_ignores_extra_fields(self) -> None:
        """Test parsing a full manifest record."""
        entry = ManifestEntry.model_validate(
            {
                "name": "deployer.phar",
                "sha1": "abc",
                "url": "https://deployer.org/releases/v7.3.1/deployer.phar",
                "version": "7.3.1",
                "size": 123,
            }
        )
        assert entry.version == "7.3.1"
        assert entry.url.endswith("deployer.phar")


class TestDeployerArguments:
    """Tests for DeployerArguments model."""

    def test_defaults(self) -> None:
        """Test default flags."""
        args = DeployerArguments(command=["deploy"])
        assert args.ansi_output is True
        assert args.verbosity == "-v"
        assert args.options == {}
