"""Per-process device resolution.

This module assembles mode selection, index parsing, topology validation,
and rank slicing into one pure function. The result order fixes the local
device ordinals used by backend initialization.
"""

from __future__ import annotations

from core.device_options import DeviceOptions, build_resolution_input
from core.types import DeviceId, DeviceObserver, ResolutionInput
from serve.device_mode import select_device_mode
from serve.device_spec_parser import DeviceSpec
from serve.rank_slicer import slice_rank_devices
from serve.topology_validator import validate_topology


def resolve_devices(
    resolution_input: ResolutionInput,
    observer: DeviceObserver | None = None,
) -> tuple[DeviceId, ...]:
    """Resolve the ordered devices owned by the calling process.

    Args:
        resolution_input: Validated device settings plus rank and world size.
        observer: Optional callback invoked once per resolved device.

    Returns:
        Ordered device ids; position is the local device ordinal.

    Raises:
        DevplanTopologyError: If GPU settings contradict each other.
    """
    if select_device_mode(resolution_input.cpu_threads) == "cpu":
        devices = tuple(
            DeviceId(index=index, kind="cpu") for index in range(resolution_input.cpu_threads)
        )
    else:
        topology = validate_topology(
            resolution_input.num_devices,
            resolution_input.device_indices,
            resolution_input.world_size,
        )
        devices = slice_rank_devices(topology, resolution_input.rank)
    if observer is not None:
        for device in devices:
            observer(resolution_input.rank, resolution_input.world_size, device)
    return devices


def resolve_devices_from_options(
    cpu_threads: int = 0,
    num_devices: int | None = None,
    devices: DeviceSpec | None = None,
    rank: int = 0,
    world_size: int = 1,
    observer: DeviceObserver | None = None,
) -> tuple[DeviceId, ...]:
    """Parse textual device settings and resolve them in one call.

    The devices spec is not parsed in CPU mode, so stale GPU settings
    never block a CPU run.
    """
    options = DeviceOptions(cpu_threads=cpu_threads, num_devices=num_devices, devices=devices)
    resolution_input = build_resolution_input(options, rank=rank, world_size=world_size)
    return resolve_devices(resolution_input, observer=observer)
