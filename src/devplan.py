"""Public SDK surface for Devplan.

This module provides a stable import path for training launchers.
It re-exports the resolver entry points, typed models, and errors.
"""

from __future__ import annotations

from core.config import DevplanConfig
from core.device_config_file import load_device_config
from core.device_options import DeviceOptions, build_resolution_input
from core.errors import (
    DeviceCountMismatchError,
    DevplanConfigError,
    DevplanError,
    DevplanTopologyError,
    MalformedDeviceIndexError,
    NotAMultipleError,
    TopologyShapeMismatchError,
)
from core.types import DeviceId, DeviceKind, DeviceTopology, GroupDevicePlan, ResolutionInput
from serve.device_report import build_stream_reporter, format_device_report, log_device_report
from serve.device_resolver import resolve_devices, resolve_devices_from_options
from serve.device_spec_parser import parse_device_indices
from serve.group_plan import resolve_group_plan
from serve.topology_validator import validate_topology

__all__ = [
    "DeviceCountMismatchError",
    "DeviceId",
    "DeviceKind",
    "DeviceOptions",
    "DeviceTopology",
    "DevplanConfig",
    "DevplanConfigError",
    "DevplanError",
    "DevplanTopologyError",
    "GroupDevicePlan",
    "MalformedDeviceIndexError",
    "NotAMultipleError",
    "ResolutionInput",
    "TopologyShapeMismatchError",
    "build_resolution_input",
    "build_stream_reporter",
    "format_device_report",
    "load_device_config",
    "log_device_report",
    "parse_device_indices",
    "resolve_devices",
    "resolve_devices_from_options",
    "resolve_group_plan",
    "validate_topology",
]
