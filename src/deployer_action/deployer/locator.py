"""Deployer binary resolution."""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from deployer_action.core.constants import (
    COMPOSER_LOCK,
    COMPOSER_LOCK_SECTIONS,
    DEPLOYER_PACKAGE,
    DEPLOYER_PHAR,
    LOCAL_BINARIES,
)
from deployer_action.core.types import BinaryLocatorRequest
from deployer_action.deployer.manifest import ManifestClient
from deployer_action.errors import BinaryNotFoundError, ConfigurationError, DownloadError
from deployer_action.process import CommandResult, run_command

logger = logging.getLogger(__name__)


def strip_version_prefix(version: str) -> str:
    """Drop one leading ``v`` from a version string."""
    return version[1:] if version.startswith("v") else version


def find_local_binary(working_directory: Path) -> Path | None:
    """Find a Deployer binary in the conventional project locations.

    Args:
        working_directory: Project directory.

    Returns:
        First existing candidate, or None.
    """
    for candidate in LOCAL_BINARIES:
        path = working_directory / candidate
        if path.exists():
            return path
    return None


def find_version_in_composer_lock(lock: dict[str, Any]) -> str | None:
    """Find the locked Deployer version.

    ``packages`` is searched before ``packages-dev``.

    Args:
        lock: Parsed composer.lock.

    Returns:
        Version string, or None if Deployer is not locked.
    """
    for section in COMPOSER_LOCK_SECTIONS:
        packages = lock.get(section)
        if not isinstance(packages, list):
            continue
        for package in packages:
            if isinstance(package, dict) and package.get("name") == DEPLOYER_PACKAGE:
                version = package.get("version")
                if version:
                    return str(version)
    return None


def read_composer_lock_version(working_directory: Path) -> str | None:
    """Read the Deployer version from ``composer.lock`` if present.

    Raises:
        ConfigurationError: If the lockfile is not valid JSON.
    """
    lock_path = working_directory / COMPOSER_LOCK
    if not lock_path.exists():
        return None

    try:
        lock = json.loads(lock_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read {lock_path}: {e}") from e

    if not isinstance(lock, dict):
        return None
    return find_version_in_composer_lock(lock)


def locate_binary(
    request: BinaryLocatorRequest,
    manifest: ManifestClient | None = None,
    executor: Callable[..., CommandResult] = run_command,
) -> Path:
    """Locate or download the Deployer binary.

    Tries, in order: the explicit binary path, the conventional local
    paths, then a release download for the requested or locked version.

    Args:
        request: Locator request.
        manifest: Manifest client. Only built when a download is needed.
        executor: Runs external commands.

    Returns:
        Path to the binary.

    Raises:
        BinaryNotFoundError: If no binary or version can be found.
        DownloadError: If the release cannot be fetched.
    """
    cwd = request.working_directory

    if request.binary_path:
        binary = cwd / request.binary_path
        if binary.exists():
            return binary
        raise BinaryNotFoundError(f'Deployer binary "{request.binary_path}" does not exist.')

    local_binary = find_local_binary(cwd)
    if local_binary:
        logger.info(f'Using "{local_binary}".')
        return local_binary

    version = request.version or read_composer_lock_version(cwd)
    if not version:
        raise BinaryNotFoundError(
            "Deployer binary not found. Please specify deployer-binary or deployer-version."
        )

    manifest = manifest or ManifestClient()
    url = manifest.find_url(strip_version_prefix(version))
    phar_path = manifest.download(url, cwd / DEPLOYER_PHAR)

    result = executor(["chmod", "+x", str(phar_path)], fail_on_stderr=True)
    if not result.ok:
        raise DownloadError(
            f"Cannot make {phar_path} executable: "
            f"{result.stderr.strip() or f'exit code {result.returncode}'}"
        )

    return phar_path
