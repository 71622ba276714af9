"""Whole-group device plan preview.

Launchers can resolve every rank up front from the shared settings and
catch layout mistakes before any process starts.
"""

from __future__ import annotations

from dataclasses import replace

from core.logging_config import get_logger
from core.types import GroupDevicePlan, ResolutionInput
from serve.device_resolver import resolve_devices

_LOGGER = get_logger(__name__)


def resolve_group_plan(resolution_input: ResolutionInput) -> GroupDevicePlan:
    """Resolve devices for every rank in ``resolution_input.world_size``.

    The input's own rank is ignored; each rank is resolved from a copy.

    Raises:
        DevplanTopologyError: If the shared settings are invalid.
    """
    rank_devices = {
        rank: resolve_devices(replace(resolution_input, rank=rank))
        for rank in range(resolution_input.world_size)
    }
    _LOGGER.info(
        "group_plan_resolved",
        world_size=resolution_input.world_size,
        devices_per_rank=len(rank_devices[0]),
    )
    return GroupDevicePlan(world_size=resolution_input.world_size, rank_devices=rank_devices)
