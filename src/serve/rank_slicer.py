"""Per-rank device slicing."""

from __future__ import annotations

from core.types import DeviceId, DeviceTopology


def slice_rank_devices(topology: DeviceTopology, rank: int) -> tuple[DeviceId, ...]:
    """Return the GPU devices owned by one rank.

    Shared layouts give every rank the full list. Concatenated layouts give
    rank ``r`` the ``num_devices`` entries starting at ``r * num_devices``.
    """
    indices = topology.device_indices
    if not topology.is_shared:
        start = rank * topology.num_devices
        indices = indices[start : start + topology.num_devices]
    return tuple(DeviceId(index=index, kind="gpu") for index in indices)
