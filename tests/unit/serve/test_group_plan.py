"""Unit tests for whole-group device plans."""

from __future__ import annotations

import pytest

from core.errors import TopologyShapeMismatchError
from core.types import DeviceId, ResolutionInput
from serve.group_plan import resolve_group_plan


def test_resolve_group_plan_partitions_concatenated_list() -> None:
    """Concatenated lists should be split across ranks without overlap."""
    plan = resolve_group_plan(
        ResolutionInput(num_devices=2, device_indices=(0, 1, 2, 3, 4, 5), world_size=3)
    )

    assert [tuple(device.index for device in plan.devices_for(rank)) for rank in range(3)] == [
        (0, 1),
        (2, 3),
        (4, 5),
    ]


def test_resolve_group_plan_repeats_shared_list() -> None:
    """Shared lists should be identical on every rank."""
    plan = resolve_group_plan(ResolutionInput(device_indices=(4, 5), rank=1, world_size=2))

    expected = (DeviceId(4, "gpu"), DeviceId(5, "gpu"))
    assert plan.world_size == 2 and plan.devices_for(0) == plan.devices_for(1) == expected


def test_resolve_group_plan_propagates_topology_errors() -> None:
    """Invalid shared settings should fail the whole plan."""
    with pytest.raises(TopologyShapeMismatchError):
        resolve_group_plan(
            ResolutionInput(num_devices=1, device_indices=(0, 1), world_size=3)
        )
