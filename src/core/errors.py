"""Devplan exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each resolution step raises a specific error type for debuggability.
"""

from __future__ import annotations


class DevplanError(Exception):
    """Base exception for all Devplan failures."""


class DevplanConfigError(DevplanError):
    """Raised for invalid runtime, environment, or file configuration."""


class DevplanTopologyError(DevplanConfigError):
    """Raised when device settings cannot form a valid per-process plan."""


class MalformedDeviceIndexError(DevplanTopologyError):
    """Raised when a device-list token is not a non-negative integer."""


class DeviceCountMismatchError(DevplanTopologyError):
    """Raised when a single process lists a different number of devices than requested."""


class NotAMultipleError(DevplanTopologyError):
    """Raised when the device list length is not a multiple of the device count."""


class TopologyShapeMismatchError(DevplanTopologyError):
    """Raised when the device list is neither one shared set nor one set per process."""
