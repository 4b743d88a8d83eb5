"""Subprocess execution for deployer-action."""

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of an external command."""

    args: list[str]
    returncode: int
    stderr: str
    fail_on_stderr: bool = False

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        if self.returncode != 0:
            return False
        return not (self.fail_on_stderr and self.stderr)

    @property
    def command_line(self) -> str:
        """Get the command as a single display string."""
        return " ".join(self.args)


def run_command(
    args: list[str],
    cwd: Path | None = None,
    input_data: str | None = None,
    fail_on_stderr: bool = False,
) -> CommandResult:
    """Run an external command and wait for it.

    Stdout is inherited, so the command's output appears in the job log
    as it is produced. Stderr is collected for the failure check and
    echoed once the command exits.

    Args:
        args: Program and arguments.
        cwd: Working directory.
        input_data: Text written to the command's stdin.
        fail_on_stderr: Treat any stderr output as failure.

    Returns:
        CommandResult. Never raises for a failing command.
    """
    logger.debug(f"Running: {' '.join(args)}" + (f" (cwd={cwd})" if cwd else ""))
    sys.stdout.flush()
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            input=input_data,
            stderr=subprocess.PIPE,
            text=True,
        )
    except OSError as e:
        return CommandResult(args, 127, str(e), fail_on_stderr)

    stderr = result.stderr or ""
    if stderr:
        sys.stderr.write(stderr)

    return CommandResult(
        args=args,
        returncode=result.returncode,
        stderr=stderr,
        fail_on_stderr=fail_on_stderr,
    )
