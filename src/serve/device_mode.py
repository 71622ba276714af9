"""Device mode selection.

A positive CPU thread count always wins; GPU settings are ignored then.
"""

from __future__ import annotations

from core.types import DeviceKind


def select_device_mode(cpu_threads: int) -> DeviceKind:
    """Return "cpu" when CPU threads are requested, otherwise "gpu"."""
    if cpu_threads > 0:
        return "cpu"
    return "gpu"
