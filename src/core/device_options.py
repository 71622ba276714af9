"""Textual device settings and their merge rules.

This module holds the three raw device entries (cpu-threads, num-devices,
devices) before parsing, merges file values with command-line overrides,
and builds the immutable resolver input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.constants import DEFAULT_CPU_THREADS
from core.types import ResolutionInput
from serve.device_mode import select_device_mode
from serve.device_spec_parser import DeviceSpec, parse_device_indices


@dataclass(frozen=True)
class DeviceOptions:
    """Raw device settings as read from configuration.

    Attributes:
        cpu_threads: CPU thread count, 0 selects GPU mode.
        num_devices: Optional per-process GPU count.
        devices: Unparsed device index tokens.
    """

    cpu_threads: int = DEFAULT_CPU_THREADS
    num_devices: int | None = None
    devices: DeviceSpec | None = None

    def merged_with(
        self,
        cpu_threads: int | None = None,
        num_devices: int | None = None,
        devices: Sequence[str] | None = None,
    ) -> "DeviceOptions":
        """Return options where every explicitly given override wins."""
        return DeviceOptions(
            cpu_threads=self.cpu_threads if cpu_threads is None else cpu_threads,
            num_devices=self.num_devices if num_devices is None else num_devices,
            devices=self.devices if devices is None else devices,
        )


def build_resolution_input(
    options: DeviceOptions,
    rank: int,
    world_size: int,
) -> ResolutionInput:
    """Parse device options into a resolver input for one process.

    The devices spec is only parsed in GPU mode.

    Raises:
        MalformedDeviceIndexError: If a device token is invalid.
        DevplanConfigError: If counts, rank, or world size are out of range.
    """
    device_indices: tuple[int, ...] = ()
    if select_device_mode(options.cpu_threads) == "gpu":
        device_indices = parse_device_indices(options.devices)
    return ResolutionInput(
        cpu_threads=options.cpu_threads,
        num_devices=options.num_devices,
        device_indices=device_indices,
        rank=rank,
        world_size=world_size,
    )
