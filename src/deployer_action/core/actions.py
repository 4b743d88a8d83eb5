"""GitHub Actions runtime commands.

Only the two commands the action needs are implemented:
exporting an environment variable to later steps and failing the job.
"""

import logging
import os
import sys
import uuid
from collections.abc import MutableMapping
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

GITHUB_ENV_VAR = "GITHUB_ENV"


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def export_variable(
    name: str,
    value: str,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Export an environment variable to this process and later workflow steps.

    Args:
        name: Variable name.
        value: Variable value.
        environ: Environment to update. Defaults to ``os.environ``.
    """
    environ = os.environ if environ is None else environ
    environ[name] = value

    env_file = environ.get(GITHUB_ENV_VAR, "")
    if not env_file:
        logger.debug(f"{GITHUB_ENV_VAR} not set; {name} exported to this process only")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: value for {name} contains the delimiter")

    with open(Path(env_file), "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Report a job failure as an ``::error::`` workflow command.

    Args:
        message: Human-readable failure message.
        stream: Output stream. Defaults to stdout.
    """
    stream = stream or sys.stdout
    print(f"::error::{escape_data(message)}", file=stream)
