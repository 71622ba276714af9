"""Shared typed models.

This module defines immutable data models passed between the resolver
stages, the configuration loaders, and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping

from core.constants import DEFAULT_RANK, DEFAULT_WORLD_SIZE, DEVICE_KIND_LABELS
from core.errors import DevplanConfigError

DeviceKind = Literal["cpu", "gpu"]


@dataclass(frozen=True)
class DeviceId:
    """One compute unit owned by a process.

    Attributes:
        index: CPU thread ordinal or GPU device ordinal.
        kind: Device kind the index refers to.
    """

    index: int
    kind: DeviceKind

    def __str__(self) -> str:
        return f"{DEVICE_KIND_LABELS[self.kind]}[{self.index}]"


@dataclass(frozen=True)
class ResolutionInput:
    """Immutable snapshot of everything the resolver needs for one process.

    Attributes:
        cpu_threads: CPU thread count, 0 selects GPU mode.
        num_devices: Optional per-process GPU count, None or 0 means unspecified.
        device_indices: Parsed GPU indices, possibly empty.
        rank: This process's position in the group.
        world_size: Total number of processes in the group.
    """

    cpu_threads: int = 0
    num_devices: int | None = None
    device_indices: tuple[int, ...] = ()
    rank: int = DEFAULT_RANK
    world_size: int = DEFAULT_WORLD_SIZE

    def __post_init__(self) -> None:
        if self.cpu_threads < 0:
            raise DevplanConfigError(
                f"cpu_threads must be non-negative, got {self.cpu_threads}."
            )
        if self.num_devices is not None and self.num_devices < 0:
            raise DevplanConfigError(
                f"num_devices must be non-negative when provided, got {self.num_devices}."
            )
        if any(index < 0 for index in self.device_indices):
            raise DevplanConfigError(
                f"device_indices must be non-negative, got {list(self.device_indices)}."
            )
        if self.world_size < 1:
            raise DevplanConfigError(f"world_size must be at least 1, got {self.world_size}.")
        if not 0 <= self.rank < self.world_size:
            raise DevplanConfigError(
                f"rank must be in [0, {self.world_size}) for world_size {self.world_size}, "
                f"got {self.rank}."
            )


@dataclass(frozen=True)
class DeviceTopology:
    """Validated device layout shared by every process in the group.

    Attributes:
        num_devices: Effective number of devices each process owns.
        device_indices: Full index list, synthesized when none was given.
        per_process_count: 1 for a shared list, world_size for a concatenated one.
    """

    num_devices: int
    device_indices: tuple[int, ...]
    per_process_count: int

    @property
    def is_shared(self) -> bool:
        """Return True when every process uses the full index list."""
        return self.per_process_count == 1


@dataclass(frozen=True)
class GroupDevicePlan:
    """Resolved devices for every rank of a process group."""

    world_size: int
    rank_devices: Mapping[int, tuple[DeviceId, ...]] = field(default_factory=dict)

    def devices_for(self, rank: int) -> tuple[DeviceId, ...]:
        """Return the resolved devices owned by one rank."""
        return self.rank_devices[rank]


DeviceObserver = Callable[[int, int, DeviceId], None]
