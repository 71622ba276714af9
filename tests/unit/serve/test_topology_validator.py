"""Unit tests for device topology validation."""

from __future__ import annotations

import pytest

from core.errors import (
    DeviceCountMismatchError,
    NotAMultipleError,
    TopologyShapeMismatchError,
)
from serve.topology_validator import validate_topology


def test_validate_topology_defaults_to_device_zero() -> None:
    """No count and no list should synthesize a single device 0."""
    topology = validate_topology(None, (), world_size=1)

    assert (
        topology.num_devices == 1
        and topology.device_indices == (0,)
        and topology.per_process_count == 1
    )


def test_validate_topology_synthesizes_indices_from_count() -> None:
    """An explicit count with no list should enumerate 0..count-1."""
    topology = validate_topology(4, (), world_size=3)

    assert topology.device_indices == (0, 1, 2, 3) and topology.is_shared


def test_validate_topology_treats_zero_count_as_unspecified() -> None:
    """A zero count should fall back to the list length."""
    topology = validate_topology(0, (4, 5, 6, 7), world_size=1)

    assert topology.num_devices == 4 and topology.device_indices == (4, 5, 6, 7)


def test_validate_topology_single_process_count_mismatch_raises() -> None:
    """Single-process runs must list exactly num-devices entries."""
    with pytest.raises(DeviceCountMismatchError) as error_info:
        validate_topology(2, (0, 1, 2), world_size=1)

    assert "Single-process" in str(error_info.value)


def test_validate_topology_single_process_count_larger_than_list_raises() -> None:
    """A count larger than the list should be a plain count mismatch."""
    with pytest.raises(DeviceCountMismatchError):
        validate_topology(4, (0, 1), world_size=1)


def test_validate_topology_single_process_rejects_concatenated_shape() -> None:
    """A one-process run never reads the list as concatenated sets."""
    with pytest.raises(DeviceCountMismatchError):
        validate_topology(1, (0, 1), world_size=1)


def test_validate_topology_accepts_concatenated_sets() -> None:
    """One set per process should give a per-process count of world size."""
    topology = validate_topology(4, tuple(range(8)), world_size=2)

    assert topology.num_devices == 4 and topology.per_process_count == 2


def test_validate_topology_accepts_shared_set_for_many_processes() -> None:
    """A list matching the count should be shared by all processes."""
    topology = validate_topology(None, (4, 5, 6, 7), world_size=8)

    assert topology.is_shared and topology.num_devices == 4


def test_validate_topology_rejects_non_multiple_length() -> None:
    """List length must be a multiple of the device count."""
    with pytest.raises(NotAMultipleError) as error_info:
        validate_topology(4, tuple(range(6)), world_size=4)

    assert "6" in str(error_info.value) and "4" in str(error_info.value)


def test_validate_topology_rejects_partial_per_process_sets() -> None:
    """Two sets of two for three processes is neither shared nor per-process."""
    with pytest.raises(TopologyShapeMismatchError):
        validate_topology(2, (0, 1, 2, 3), world_size=3)
