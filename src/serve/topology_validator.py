"""Device topology validation.

This module reconciles the explicit device count, the device index list,
and the process-group size into one effective per-process layout. The
index list is read either as one set shared by all processes or as one
set per process concatenated in rank order.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import (
    DeviceCountMismatchError,
    NotAMultipleError,
    TopologyShapeMismatchError,
)
from core.types import DeviceTopology


def validate_topology(
    num_devices: int | None,
    device_indices: Sequence[int],
    world_size: int,
) -> DeviceTopology:
    """Validate device settings and compute the effective layout.

    Args:
        num_devices: Requested devices per process, None or 0 when unspecified.
        device_indices: Parsed device indices, possibly empty.
        world_size: Number of processes in the group.

    Returns:
        Effective device count, full index list, and per-process list count.

    Raises:
        DeviceCountMismatchError: If a single process lists a different count.
        NotAMultipleError: If the list length is not a multiple of the count.
        TopologyShapeMismatchError: If the list is neither shared nor per-process.
    """
    indices = tuple(device_indices)
    effective_count = num_devices or 0
    if not indices:
        effective_count = effective_count or 1
        indices = tuple(range(effective_count))
    elif effective_count == 0:
        effective_count = len(indices)

    # The general checks below also reject this, but with a multi-process message.
    if world_size == 1:
        if len(indices) != effective_count:
            raise DeviceCountMismatchError(
                f"Single-process run lists {len(indices)} devices {list(indices)} "
                f"but num-devices is {effective_count}. Make both agree or drop one of them."
            )
        return DeviceTopology(
            num_devices=effective_count,
            device_indices=indices,
            per_process_count=1,
        )

    per_process_count = len(indices) // effective_count
    if effective_count * per_process_count != len(indices):
        raise NotAMultipleError(
            f"devices lists {len(indices)} entries, which is not a multiple of "
            f"num-devices {effective_count}."
        )
    if per_process_count not in (1, world_size):
        raise TopologyShapeMismatchError(
            f"devices holds {per_process_count} sets of {effective_count} for a world "
            f"size of {world_size}; list either one shared set or exactly {world_size} sets."
        )
    return DeviceTopology(
        num_devices=effective_count,
        device_indices=indices,
        per_process_count=per_process_count,
    )
