"""Devplan CLI entry points.

This module exposes commands for resolving per-process device plans.
It maps argparse commands onto resolver calls and turns configuration
errors into a non-zero exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.plan_command import add_plan_command, run_plan_command
from cli.resolve_command import add_resolve_command, run_resolve_command
from core.config import DevplanConfig
from core.errors import DevplanError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="devplan",
        description="Resolve compute devices for distributed training processes",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_resolve_command(subparsers)
    add_plan_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Devplan CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = DevplanConfig.from_env()
        if args.command == "resolve":
            return run_resolve_command(config, args)
        if args.command == "plan":
            return run_plan_command(config, args)
    except DevplanError as error:
        _LOGGER.error(
            "device_resolution_failed",
            command=args.command,
            error_type=type(error).__name__,
            message=str(error),
        )
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2
