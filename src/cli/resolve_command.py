"""CLI command resolving devices for the calling process."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from cli.device_arguments import add_device_arguments, read_device_options
from core.config import DevplanConfig
from core.device_options import build_resolution_input
from serve.device_report import build_stream_reporter
from serve.device_resolver import resolve_devices


def add_resolve_command(subparsers: Any) -> None:
    """Register resolve subcommand."""
    parser = subparsers.add_parser(
        "resolve",
        help="Print the devices owned by this process, one per line",
    )
    add_device_arguments(parser)
    parser.add_argument("--rank", type=int, help="Override this process's rank")


def run_resolve_command(config: DevplanConfig, args: argparse.Namespace) -> int:
    """Resolve and print local devices in ordinal order."""
    options = read_device_options(args)
    rank = config.rank if args.rank is None else args.rank
    world_size = config.world_size if args.world_size is None else args.world_size
    resolution_input = build_resolution_input(options, rank=rank, world_size=world_size)
    report = args.report
    if report is None:
        report = config.should_report_devices(world_size)
    observer = build_stream_reporter(sys.stderr) if report else None
    for device in resolve_devices(resolution_input, observer=observer):
        print(device)
    return 0
