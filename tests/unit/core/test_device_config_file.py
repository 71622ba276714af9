"""Unit tests for YAML device config loading."""

from __future__ import annotations

import pytest

from core.device_config_file import load_device_config
from core.device_options import DeviceOptions
from core.errors import DevplanConfigError
from tests.fixture_paths import fixture_path


def test_load_device_config_reads_list_devices() -> None:
    """Dashed keys and YAML lists should load as raw options."""
    options = load_device_config(str(fixture_path("device_config/concatenated.yaml")))

    assert options == DeviceOptions(
        cpu_threads=0, num_devices=4, devices=(0, 1, 2, 3, 4, 5, 6, 7)
    )


def test_load_device_config_accepts_underscore_keys_and_string_devices() -> None:
    """Underscore aliases and whitespace-separated strings should load."""
    options = load_device_config(str(fixture_path("device_config/string_devices.yaml")))

    assert options.num_devices == 1 and options.devices == "0 2 4 5"


def test_load_device_config_reads_cpu_threads() -> None:
    """CPU thread counts should load alongside ignored GPU settings."""
    options = load_device_config(str(fixture_path("device_config/cpu_threads.yaml")))

    assert options.cpu_threads == 8 and options.num_devices is None


def test_load_device_config_wraps_single_integer_device() -> None:
    """A scalar devices value should name exactly one device."""
    options = load_device_config(str(fixture_path("device_config/single_device.yaml")))

    assert options.devices == (2,)


@pytest.mark.parametrize(
    "file_name",
    [
        "unknown_key.yaml",
        "invalid_count.yaml",
        "not_a_mapping.yaml",
        "duplicate_alias.yaml",
        "empty.yaml",
        "broken_syntax.yaml",
        "invalid_utf8.yaml",
        "missing.yaml",
    ],
)
def test_load_device_config_rejects_invalid_files(file_name: str) -> None:
    """Invalid, empty, or missing files should raise config errors."""
    with pytest.raises(DevplanConfigError):
        load_device_config(str(fixture_path(f"device_config/{file_name}")))
