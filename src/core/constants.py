"""Core constants used across Devplan modules.

This module centralizes configuration keys and defaults.
Keeping values here avoids magic literals in resolution logic.
"""

from __future__ import annotations

DEFAULT_CPU_THREADS = 0
DEFAULT_NUM_DEVICES = 1
DEFAULT_RANK = 0
DEFAULT_WORLD_SIZE = 1
DEFAULT_RANDOM_SEED = "0"
DEFAULT_REPORT_DEVICES = "auto"

CPU_THREADS_KEY = "cpu-threads"
NUM_DEVICES_KEY = "num-devices"
DEVICES_KEY = "devices"
SUPPORTED_DEVICE_CONFIG_KEYS = (CPU_THREADS_KEY, NUM_DEVICES_KEY, DEVICES_KEY)

RANK_ENV_VAR = "DEVPLAN_RANK"
WORLD_SIZE_ENV_VAR = "DEVPLAN_WORLD_SIZE"
RANDOM_SEED_ENV_VAR = "DEVPLAN_RANDOM_SEED"
REPORT_DEVICES_ENV_VAR = "DEVPLAN_REPORT_DEVICES"

# (rank, world size) variable pairs, checked in order; the first pair with
# any value set supplies both numbers.
PROCESS_GROUP_ENV_VARS = (
    (RANK_ENV_VAR, WORLD_SIZE_ENV_VAR),
    ("RANK", "WORLD_SIZE"),
    ("OMPI_COMM_WORLD_RANK", "OMPI_COMM_WORLD_SIZE"),
    ("PMI_RANK", "PMI_SIZE"),
)

DEVICE_KIND_LABELS = {"cpu": "CPU", "gpu": "GPU"}
