"""
flakeid - Time-ordered 64-bit Snowflake IDs.

Each ID packs a millisecond timestamp, a machine ID and a per-millisecond
sequence number, so independent processes with distinct machine IDs can
mint IDs without coordinating.
"""

__version__ = "0.1.0"

from .clock import Clock, ManualClock, SystemClock
from .errors import ClockRegressionError, ConfigurationError
from .formatting import format_id, parse_id
from .snowflake import (
    DEFAULT_EPOCH,
    MAX_MACHINE_ID,
    MAX_SEQUENCE,
    SnowflakeGenerator,
    SnowflakeParts,
    decode_snowflake_id,
    get_snowflake_id,
    get_snowflake_ids,
)
