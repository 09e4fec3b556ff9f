"""
flakeid.env - Environment variable configuration.

This module centralizes all environment variable reading with sensible defaults.
"""

import os

from .errors import ConfigurationError


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


# Snowflake ID parameters
# Machine ID for distributed ID generation (0-1023, 10 bits)
FLAKEID_MACHINE_ID = _int_env("FLAKEID_MACHINE_ID", 0)

# Custom epoch in milliseconds: January 1, 2024 00:00:00 UTC
FLAKEID_EPOCH = _int_env("FLAKEID_EPOCH", 1704067200000)

# Display wrapping for formatted IDs
FLAKEID_PREFIX = os.getenv("FLAKEID_PREFIX", "")
FLAKEID_SUFFIX = os.getenv("FLAKEID_SUFFIX", "")

FLAKEID_LOG_LEVEL = os.getenv("FLAKEID_LOG_LEVEL", "WARNING").upper()
