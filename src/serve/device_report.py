"""Diagnostic reporting for resolved devices.

This module provides observers for ``resolve_devices``. They emit one
``[rank R out of N]: KIND[index]`` line per device and never change the
resolution result.
"""

from __future__ import annotations

from typing import TextIO

from core.logging_config import get_logger
from core.types import DeviceId, DeviceObserver

_LOGGER = get_logger(__name__)


def format_device_report(rank: int, world_size: int, device: DeviceId) -> str:
    """Render one diagnostic line for a resolved device."""
    return f"[rank {rank} out of {world_size}]: {device}"


def log_device_report(rank: int, world_size: int, device: DeviceId) -> None:
    """Log one structured event for a resolved device."""
    _LOGGER.info(
        "device_resolved",
        rank=rank,
        world_size=world_size,
        kind=device.kind,
        index=device.index,
        report=format_device_report(rank, world_size, device),
    )


def build_stream_reporter(stream: TextIO) -> DeviceObserver:
    """Return an observer that writes diagnostic lines to a text stream."""

    def _report(rank: int, world_size: int, device: DeviceId) -> None:
        stream.write(format_device_report(rank, world_size, device) + "\n")

    return _report
