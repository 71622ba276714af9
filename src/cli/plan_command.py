"""CLI command previewing the device plan of a whole process group."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from cli.device_arguments import add_device_arguments, read_device_options
from core.config import DevplanConfig
from core.device_options import build_resolution_input
from serve.device_report import build_stream_reporter
from serve.group_plan import resolve_group_plan


def add_plan_command(subparsers: Any) -> None:
    """Register plan subcommand."""
    parser = subparsers.add_parser(
        "plan",
        help="Print the devices every rank would own",
    )
    add_device_arguments(parser)


def run_plan_command(config: DevplanConfig, args: argparse.Namespace) -> int:
    """Print one row per rank with its devices."""
    options = read_device_options(args)
    world_size = config.world_size if args.world_size is None else args.world_size
    resolution_input = build_resolution_input(options, rank=0, world_size=world_size)
    plan = resolve_group_plan(resolution_input)
    report = args.report
    if report is None:
        report = config.should_report_devices(world_size)
    reporter = build_stream_reporter(sys.stderr) if report else None
    for rank in range(plan.world_size):
        devices = plan.devices_for(rank)
        print(f"rank={rank} devices={','.join(str(device) for device in devices)}")
        if reporter is not None:
            for device in devices:
                reporter(rank, plan.world_size, device)
    return 0
