"""Deployer command construction and execution."""

import logging
from collections.abc import Callable
from pathlib import Path

from deployer_action.core.constants import PHP_INTERPRETER
from deployer_action.core.types import DeployerArguments
from deployer_action.errors import ExecutionError
from deployer_action.process import CommandResult, run_command

logger = logging.getLogger(__name__)


def prepare_arguments(args: DeployerArguments) -> list[str]:
    """Build the arguments that follow the binary path.

    Args:
        args: Deployer arguments.

    Returns:
        Command tokens, fixed flags, verbosity and ``-o`` options.
    """
    options: list[str] = []
    for key, value in args.options.items():
        options.extend(["-o", f"{key}=>{value}"])

    return [
        *args.command,
        "--no-interaction",
        "--ansi" if args.ansi_output else "--no-ansi",
        args.verbosity,
        *options,
    ]


def build_command(binary: Path | str, args: DeployerArguments) -> list[str]:
    """Build the full Deployer command line, binary first."""
    return [str(binary), *prepare_arguments(args)]


def run_deployer(
    binary: Path | str,
    args: DeployerArguments,
    cwd: Path,
    executor: Callable[..., CommandResult] = run_command,
) -> None:
    """Run Deployer through the PHP interpreter.

    Args:
        binary: Deployer binary.
        args: Deployer arguments.
        cwd: Working directory.
        executor: Runs external commands.

    Raises:
        ExecutionError: If Deployer exits non-zero or writes to stderr.
    """
    command = build_command(binary, args)
    logger.info(f"Running: dep {' '.join(command[1:])}")

    result = executor([PHP_INTERPRETER, *command], cwd=cwd, fail_on_stderr=True)
    if not result.ok:
        raise ExecutionError(f"Failed: dep {' '.join(command)}")
