"""YAML device configuration loading.

This module loads the shared device settings file that every process in
a job reads. It validates keys and primitive types strictly so that a
typo fails loudly instead of silently falling back to device 0.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import CPU_THREADS_KEY, DEVICES_KEY, NUM_DEVICES_KEY
from core.device_options import DeviceOptions
from core.errors import DevplanConfigError
from core.logging_config import get_logger
from serve.device_spec_parser import DeviceSpec

_LOGGER = get_logger(__name__)


def load_device_config(config_path: str) -> DeviceOptions:
    """Load and validate a YAML device configuration file.

    Args:
        config_path: File path to the YAML settings.

    Returns:
        Raw device options; device tokens are parsed later.

    Raises:
        DevplanConfigError: If the file is missing, malformed, or fails schema checks.
    """
    config_file = Path(config_path).expanduser().resolve()
    payload = _load_yaml_payload(config_file)
    mapping = _normalize_keys(payload, config_file)
    options = DeviceOptions(
        cpu_threads=_optional_non_negative_int(mapping, CPU_THREADS_KEY) or 0,
        num_devices=_optional_non_negative_int(mapping, NUM_DEVICES_KEY),
        devices=_optional_devices(mapping),
    )
    for key in sorted(mapping):
        _LOGGER.info("device_config_loaded", path=str(config_file), key=key, value=mapping[key])
    return options


def _load_yaml_payload(config_file: Path) -> object:
    if not config_file.exists():
        raise DevplanConfigError(
            f"Device config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise DevplanConfigError(
            f"Failed to read device config at {config_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except UnicodeDecodeError as error:
        raise DevplanConfigError(
            f"Device config at {config_file} is not valid UTF-8: {error}. "
            "Save the file as UTF-8 text and retry."
        ) from error
    except yaml.YAMLError as error:
        raise DevplanConfigError(
            f"Failed to parse YAML device config at {config_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise DevplanConfigError(
            f"Device config at {config_file} is empty. "
            f"Define at least one of {CPU_THREADS_KEY}, {NUM_DEVICES_KEY}, {DEVICES_KEY}."
        )
    return payload


def _normalize_keys(payload: object, config_file: Path) -> Mapping[str, object]:
    if not isinstance(payload, Mapping):
        raise DevplanConfigError(
            f"Invalid device config at {config_file}: expected object mapping, "
            f"got {type(payload).__name__}."
        )
    allowed_keys = {CPU_THREADS_KEY, NUM_DEVICES_KEY, DEVICES_KEY}
    normalized: dict[str, object] = {}
    for key, value in payload.items():
        if not isinstance(key, str):
            raise DevplanConfigError(
                f"Invalid device config at {config_file}: expected string keys, "
                f"got {type(key).__name__}."
            )
        canonical_key = key.replace("_", "-")
        if canonical_key not in allowed_keys:
            raise DevplanConfigError(
                f"Device config at {config_file} contains unknown field '{key}'. "
                f"Use {CPU_THREADS_KEY}, {NUM_DEVICES_KEY}, or {DEVICES_KEY}."
            )
        if canonical_key in normalized:
            raise DevplanConfigError(
                f"Device config at {config_file} sets '{canonical_key}' more than once."
            )
        normalized[canonical_key] = value
    return normalized


def _optional_non_negative_int(mapping: Mapping[str, object], field_name: str) -> int | None:
    value = mapping.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DevplanConfigError(f"Device config field '{field_name}' must be an integer.")
    if value < 0:
        raise DevplanConfigError(
            f"Device config field '{field_name}' must be non-negative, got {value}."
        )
    return value


def _optional_devices(mapping: Mapping[str, object]) -> DeviceSpec | None:
    value = mapping.get(DEVICES_KEY)
    if value is None:
        return None
    if isinstance(value, bool):
        raise DevplanConfigError(
            f"Device config field '{DEVICES_KEY}' must be a list or a whitespace-separated string."
        )
    # A single YAML scalar such as "devices: 2" names one device.
    if isinstance(value, int):
        return (value,)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return tuple(value)
    raise DevplanConfigError(
        f"Device config field '{DEVICES_KEY}' must be a list or a whitespace-separated string."
    )
