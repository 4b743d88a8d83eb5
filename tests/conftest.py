"""Pytest fixtures and configuration."""

import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from deployer_action.core.inputs import ActionInputs
from deployer_action.process import CommandResult


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def mock_subprocess() -> Generator[MagicMock, None, None]:
    """Mock subprocess.run with a successful, silent result."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def executor() -> MagicMock:
    """Create a command executor that always succeeds."""

    def _run(args: list[str], **kwargs: object) -> CommandResult:
        return CommandResult(args=list(args), returncode=0, stderr="")

    return MagicMock(side_effect=_run)


@pytest.fixture
def failing_executor() -> MagicMock:
    """Create a command executor that always fails."""

    def _run(args: list[str], **kwargs: object) -> CommandResult:
        return CommandResult(args=list(args), returncode=1, stderr="boom\n")

    return MagicMock(side_effect=_run)


@pytest.fixture
def make_inputs() -> Callable[..., ActionInputs]:
    """Build ActionInputs from keyword-style input names."""

    def _make(**values: str) -> ActionInputs:
        return ActionInputs.from_dict({k.replace("_", "-"): v for k, v in values.items()})

    return _make
