"""Shared device-setting arguments for CLI commands.

This module registers the cpu-threads, num-devices, and devices flags and
merges them over an optional YAML device config file.
"""

from __future__ import annotations

import argparse

from core.device_config_file import load_device_config
from core.device_options import DeviceOptions


def add_device_arguments(parser: argparse.ArgumentParser) -> None:
    """Register device-setting flags on one subcommand parser."""
    parser.add_argument("--config-file", help="YAML file with cpu-threads/num-devices/devices")
    parser.add_argument("--cpu-threads", type=int, help="Use N CPU threads instead of GPUs")
    parser.add_argument("--num-devices", type=int, help="GPUs per process")
    parser.add_argument(
        "--devices",
        nargs="+",
        help="GPU indices, shared by all processes or concatenated per process",
    )
    parser.add_argument("--world-size", type=int, help="Override the process-group size")
    report_group = parser.add_mutually_exclusive_group()
    report_group.add_argument(
        "--report",
        dest="report",
        action="store_true",
        default=None,
        help="Print per-device diagnostic lines to stderr",
    )
    report_group.add_argument(
        "--no-report",
        dest="report",
        action="store_false",
        help="Suppress per-device diagnostic lines",
    )


def read_device_options(args: argparse.Namespace) -> DeviceOptions:
    """Merge command-line device flags over the optional config file."""
    base_options = DeviceOptions()
    if args.config_file:
        base_options = load_device_config(args.config_file)
    return base_options.merged_with(
        cpu_threads=args.cpu_threads,
        num_devices=args.num_devices,
        devices=args.devices,
    )
