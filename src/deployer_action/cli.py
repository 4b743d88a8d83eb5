"""CLI entry point for deployer-action.

This module provides command-line interface for:
- Bootstrapping SSH credentials in the CI runner
- Locating or downloading Deployer and running a command with it
"""

import argparse
import logging
import sys

from deployer_action.core.actions import set_failed
from deployer_action.core.inputs import ActionInputs
from deployer_action.deployer.locator import locate_binary
from deployer_action.deployer.runner import run_deployer
from deployer_action.errors import ConfigurationError, DeployerActionError
from deployer_action.ssh.agent import setup_ssh


def cmd_run(inputs: ActionInputs) -> None:
    """Bootstrap SSH, then run Deployer.

    Args:
        inputs: Action inputs.
    """
    # All inputs are parsed before any side effect.
    ssh_config = inputs.to_ssh_config()
    request = inputs.to_locator_request()
    arguments = inputs.to_deployer_arguments()

    setup_ssh(ssh_config)

    binary = locate_binary(request)
    run_deployer(binary, arguments, request.working_directory)


def cmd_ssh(inputs: ActionInputs) -> None:
    """Only bootstrap SSH credentials.

    Args:
        inputs: Action inputs.
    """
    setup_ssh(inputs.to_ssh_config())


def cmd_dep(inputs: ActionInputs) -> None:
    """Only locate and run Deployer.

    Args:
        inputs: Action inputs.
    """
    request = inputs.to_locator_request()
    arguments = inputs.to_deployer_arguments()

    binary = locate_binary(request)
    run_deployer(binary, arguments, request.working_directory)


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="deployer-action",
        description="Set up SSH and run Deployer in a CI job. "
        "Inputs are read from INPUT_* environment variables.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.set_defaults(func=cmd_run)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Set up SSH and run Deployer (default)")
    run_parser.set_defaults(func=cmd_run)

    ssh_parser = subparsers.add_parser("ssh", help="Only set up SSH")
    ssh_parser.set_defaults(func=cmd_ssh)

    dep_parser = subparsers.add_parser("dep", help="Only locate and run Deployer")
    dep_parser.set_defaults(func=cmd_dep)

    return parser


def main(argv: list[str] | None = None, inputs: ActionInputs | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Command-line arguments. Uses sys.argv if None.
        inputs: Action inputs. Read from the environment if None.

    Returns:
        Exit code: 0 on success, 2 on configuration errors, 1 otherwise.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    inputs = inputs or ActionInputs()
    try:
        args.func(inputs)
    except ConfigurationError as e:
        set_failed(f"Configuration error: {e}")
        return 2
    except DeployerActionError as e:
        set_failed(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
