"""Runtime configuration model for Devplan.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import time
from typing import Literal, Mapping

from core.constants import (
    DEFAULT_RANDOM_SEED,
    DEFAULT_RANK,
    DEFAULT_REPORT_DEVICES,
    DEFAULT_WORLD_SIZE,
    PROCESS_GROUP_ENV_VARS,
    RANDOM_SEED_ENV_VAR,
    REPORT_DEVICES_ENV_VAR,
)
from core.errors import DevplanConfigError

ReportDevicesMode = Literal["auto", "always", "never"]
_REPORT_DEVICES_VALUES: dict[str, ReportDevicesMode] = {
    "auto": "auto",
    "1": "always",
    "true": "always",
    "yes": "always",
    "always": "always",
    "0": "never",
    "false": "never",
    "no": "never",
    "never": "never",
}


@dataclass(frozen=True)
class DevplanConfig:
    """Validated runtime configuration.

    Attributes:
        rank: This process's rank, from DEVPLAN_RANK or the launcher.
        world_size: Process-group size, from DEVPLAN_WORLD_SIZE or the launcher.
        random_seed: Seed threaded into initialization; never zero.
        report_devices: Whether to emit per-device diagnostic lines.
    """

    rank: int
    world_size: int
    random_seed: int
    report_devices: ReportDevicesMode

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DevplanConfig":
        """Build config from process environment variables.

        Args:
            environ: Optional mapping used instead of ``os.environ``.

        Returns:
            A validated config object.

        Raises:
            DevplanConfigError: If environment values are invalid.
        """
        env = os.environ if environ is None else environ
        rank, world_size = _read_process_group(env)
        random_seed = _parse_random_seed(env.get(RANDOM_SEED_ENV_VAR, DEFAULT_RANDOM_SEED))
        report_devices = _parse_report_devices(
            env.get(REPORT_DEVICES_ENV_VAR, DEFAULT_REPORT_DEVICES)
        )
        return cls(
            rank=rank,
            world_size=world_size,
            random_seed=random_seed,
            report_devices=report_devices,
        )

    def should_report_devices(self, world_size: int | None = None) -> bool:
        """Return True when diagnostic lines should be emitted."""
        if self.report_devices == "auto":
            effective_world_size = self.world_size if world_size is None else world_size
            return effective_world_size > 1
        return self.report_devices == "always"


def _read_process_group(env: Mapping[str, str]) -> tuple[int, int]:
    """Read rank and world size from the first launcher that set either one.

    Both numbers always come from the same variable pair. Whether the rank
    fits the world size is checked once command-line overrides are applied.

    Raises:
        DevplanConfigError: If a value is not a non-negative integer.
    """
    for rank_name, world_size_name in PROCESS_GROUP_ENV_VARS:
        raw_rank = _present_value(env, rank_name)
        raw_world_size = _present_value(env, world_size_name)
        if raw_rank is None and raw_world_size is None:
            continue
        rank = DEFAULT_RANK
        if raw_rank is not None:
            rank = _parse_non_negative_int(rank_name, raw_rank)
        world_size = DEFAULT_WORLD_SIZE
        if raw_world_size is not None:
            world_size = _parse_non_negative_int(world_size_name, raw_world_size)
        return rank, world_size
    return DEFAULT_RANK, DEFAULT_WORLD_SIZE


def _present_value(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(name)
    if value is None or not value.strip():
        return None
    return value


def _parse_non_negative_int(name: str, raw_value: str) -> int:
    """Parse a non-negative integer environment value.

    Raises:
        DevplanConfigError: If value is not a non-negative integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise DevplanConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'."
        ) from error
    if value < 0:
        raise DevplanConfigError(f"Invalid {name} value: expected >= 0, got {value}.")
    return value


def _parse_random_seed(raw_value: str) -> int:
    """Parse the random seed environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed integer seed, or a time-derived seed when the value is 0.

    Raises:
        DevplanConfigError: If value cannot be parsed into int.
    """
    try:
        seed = int(raw_value)
    except ValueError as error:
        raise DevplanConfigError(
            f"Invalid {RANDOM_SEED_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {RANDOM_SEED_ENV_VAR} to a numeric value, or 0 for a time-based seed."
        ) from error
    if seed == 0:
        return int(time.time())
    return seed


def _parse_report_devices(raw_value: str) -> ReportDevicesMode:
    normalized = raw_value.strip().lower()
    if normalized in _REPORT_DEVICES_VALUES:
        return _REPORT_DEVICES_VALUES[normalized]
    raise DevplanConfigError(
        f"Invalid {REPORT_DEVICES_ENV_VAR} value '{raw_value}'. "
        "Use auto, true, or false."
    )
