"""
flakeid.snowflake - Snowflake ID generator.

This module provides a Snowflake ID generator that creates unique,
time-ordered IDs suitable for distributed systems.

Snowflake ID format (64 bits) - based on Twitter's Snowflake algorithm:
Reference: https://en.wikipedia.org/wiki/Snowflake_ID

Bit layout (from MSB to LSB):
- Bit 63: Sign bit (always 0 for positive integers)
- Bits 62-22: Timestamp in milliseconds since custom epoch (41 bits)
- Bits 21-12: Machine/worker ID (10 bits, supports up to 1024 machines)
- Bits 11-0: Sequence number (12 bits, up to 4096 IDs per millisecond per machine)

This provides:
- ~69 years of timestamps from the epoch
- 1024 unique machine IDs (0-1023)
- 4096 IDs per millisecond per machine
- Time-ordered, globally unique identifiers

Timestamps past the 41-bit range (about 69.7 years after the epoch) spill
into the sign bit. The generator does not guard against that; pick an epoch
close to the deployment date.
"""

import logging
import threading
from typing import NamedTuple, Optional

from . import env
from .clock import Clock, SystemClock
from .errors import ClockRegressionError, ConfigurationError

logger = logging.getLogger(__name__)

# Default epoch: January 1, 2024 00:00:00 UTC, in milliseconds
DEFAULT_EPOCH = 1704067200000

# Bit allocation (Wikipedia Snowflake ID standard)
TIMESTAMP_BITS = 41   # Bits 62-22 - bit 63 is sign bit (always 0)
MACHINE_ID_BITS = 10  # Bits 21-12: supports 1024 machines
SEQUENCE_BITS = 12    # Bits 11-0: supports 4096 IDs per millisecond

# Maximum values
MAX_MACHINE_ID = (1 << MACHINE_ID_BITS) - 1  # 1023
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1      # 4095

# Bit shifts for constructing the 64-bit ID
TIMESTAMP_SHIFT = MACHINE_ID_BITS + SEQUENCE_BITS  # 22 (bits 62-22 for timestamp)
MACHINE_ID_SHIFT = SEQUENCE_BITS                   # 12 (bits 21-12 for machine ID)


class SnowflakeParts(NamedTuple):
    """Decoded fields of a Snowflake ID."""

    timestamp: int  # absolute milliseconds since the Unix epoch
    machine_id: int
    sequence: int


def decode_parts(id_val: int, epoch: int) -> SnowflakeParts:
    """
    Split an ID into its fields.

    Any integer decodes; bits that were never produced by a generator just
    come back as meaningless but well-formed fields.
    """
    return SnowflakeParts(
        timestamp=(id_val >> TIMESTAMP_SHIFT) + epoch,
        machine_id=(id_val >> MACHINE_ID_SHIFT) & MAX_MACHINE_ID,
        sequence=id_val & MAX_SEQUENCE,
    )


class SnowflakeGenerator:
    """
    Thread-safe Snowflake ID generator.

    Generates unique 64-bit IDs that are time-ordered and suitable
    for distributed systems. One instance per machine ID; instances share
    no state.
    """

    def __init__(
        self,
        machine_id: int,
        epoch: int = DEFAULT_EPOCH,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the Snowflake ID generator.

        Args:
            machine_id: Unique machine/worker ID (0-1023)
            epoch: Absolute time zero for the timestamp field, in milliseconds
            clock: Millisecond clock; defaults to the system wall clock

        Raises:
            ConfigurationError: If machine_id is out of valid range
        """
        if isinstance(machine_id, bool) or not isinstance(machine_id, int):
            raise ConfigurationError(
                f"Machine ID must be an integer, got {machine_id!r}"
            )
        if not 0 <= machine_id <= MAX_MACHINE_ID:
            raise ConfigurationError(
                f"Machine ID must be between 0 and {MAX_MACHINE_ID}, got {machine_id}"
            )

        self.machine_id = machine_id
        self.epoch = epoch
        self.clock = clock if clock is not None else SystemClock()
        self.sequence = 0
        self.last_timestamp = -1
        self.lock = threading.Lock()

        logger.debug("Created %r", self)

    def _current_timestamp(self) -> int:
        """Get current timestamp in milliseconds since epoch."""
        return self.clock.now() - self.epoch

    def _wait_next_millis(self, last_timestamp: int) -> int:
        """Spin until the clock moves past last_timestamp."""
        timestamp = self._current_timestamp()
        while timestamp <= last_timestamp:
            timestamp = self._current_timestamp()
        return timestamp

    def _next_id(self) -> int:
        # Caller must hold self.lock
        timestamp = self._current_timestamp()

        if timestamp < self.last_timestamp:
            logger.error(
                "Clock moved backwards: last issued at %d, clock reads %d (machine %d)",
                self.last_timestamp,
                timestamp,
                self.machine_id,
            )
            raise ClockRegressionError(self.last_timestamp, timestamp)

        # Same millisecond - increment sequence
        if timestamp == self.last_timestamp:
            self.sequence = (self.sequence + 1) & MAX_SEQUENCE
            # Sequence overflow - wait for next millisecond
            if self.sequence == 0:
                logger.debug(
                    "Sequence exhausted at %d, waiting for next millisecond",
                    self.last_timestamp,
                )
                timestamp = self._wait_next_millis(self.last_timestamp)
        else:
            # New millisecond - reset sequence
            self.sequence = 0

        self.last_timestamp = timestamp

        return (
            (timestamp << TIMESTAMP_SHIFT)
            | (self.machine_id << MACHINE_ID_SHIFT)
            | self.sequence
        )

    def generate(self) -> int:
        """
        Generate a new Snowflake ID.

        Returns:
            int: Unique 64-bit Snowflake ID

        Raises:
            ClockRegressionError: If clock moves backwards
        """
        with self.lock:
            return self._next_id()

    def generate_bulk(self, count: int) -> list[int]:
        """
        Generate multiple sequential Snowflake IDs efficiently.

        This method generates a bulk of sequential IDs in a single lock acquisition,
        which is more efficient than calling generate() multiple times.

        Args:
            count: Number of IDs to generate

        Returns:
            list[int]: List of unique 64-bit Snowflake IDs in ascending order

        Raises:
            ValueError: If count is less than 1
            ClockRegressionError: If clock moves backwards
        """
        if count < 1:
            raise ValueError(f"Count must be at least 1, got {count}")

        with self.lock:
            return [self._next_id() for _ in range(count)]

    def get(self, size: int) -> list[int]:
        """
        Get a bulk of Snowflake IDs.

        For sizes larger than MAX_SEQUENCE (4095), splits the request into
        several bulk generations so other callers can interleave.

        Args:
            size: Number of IDs to generate (must be >= 0)

        Returns:
            list[int]: List of unique 64-bit Snowflake IDs

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            raise ValueError(f"Size must be >= 0, got {size}")

        ids = []
        remaining = size
        while remaining > 0:
            chunk_size = min(remaining, MAX_SEQUENCE)
            ids.extend(self.generate_bulk(chunk_size))
            remaining -= chunk_size

        return ids

    def decode(self, id_val: int) -> SnowflakeParts:
        """
        Decode an ID produced by this generator's configuration.

        Returns:
            SnowflakeParts: (timestamp, machine_id, sequence) with the
            timestamp as absolute milliseconds since the Unix epoch
        """
        return decode_parts(id_val, self.epoch)

    def __repr__(self) -> str:
        return (
            f"SnowflakeGenerator(TIMESTAMP_BITS={TIMESTAMP_BITS}, "
            f"MACHINE_ID_BITS={MACHINE_ID_BITS}, SEQUENCE_BITS={SEQUENCE_BITS}, "
            f"epoch={self.epoch}, machine_id={self.machine_id})"
        )


# Default generator, built from flakeid.env on first use
_generator: Optional[SnowflakeGenerator] = None
_generator_lock = threading.Lock()


def get_default_generator() -> SnowflakeGenerator:
    """
    Get the process-wide generator configured from the environment.

    Raises:
        ConfigurationError: If FLAKEID_MACHINE_ID is out of range
    """
    global _generator
    with _generator_lock:
        if _generator is None:
            _generator = SnowflakeGenerator(
                machine_id=env.FLAKEID_MACHINE_ID, epoch=env.FLAKEID_EPOCH
            )
        return _generator


def reset_default_generator() -> None:
    """Drop the default generator so the next call rebuilds it from env."""
    global _generator
    with _generator_lock:
        _generator = None


def get_snowflake_id() -> int:
    """
    Get a single Snowflake ID.

    Returns:
        int: Unique 64-bit Snowflake ID
    """
    return get_default_generator().generate()


def get_snowflake_ids(size: int) -> list[int]:
    """
    Get a bulk of Snowflake IDs.

    For sizes larger than MAX_SEQUENCE (4095), automatically splits the request
    into multiple sequential bulk generations. This allows generating any number
    of IDs while maintaining uniqueness and time-ordering.

    Args:
        size: Number of IDs to generate (must be >= 0)

    Returns:
        list[int]: List of unique 64-bit Snowflake IDs in ascending order

    Raises:
        ValueError: If size is negative

    Examples:
        >>> ids = get_snowflake_ids(10000)  # Generates 10k IDs across multiple chunks
        >>> len(ids)
        10000
        >>> ids == sorted(ids)  # Always time-ordered
        True
    """
    return get_default_generator().get(size)


def decode_snowflake_id(id_val: int, epoch: Optional[int] = None) -> SnowflakeParts:
    """
    Decode a Snowflake ID into its component parts.

    Args:
        id_val: 64-bit Snowflake ID to decode
        epoch: Epoch the ID was generated against; defaults to FLAKEID_EPOCH

    Returns:
        SnowflakeParts: (timestamp, machine_id, sequence)
            - timestamp: Absolute milliseconds since the Unix epoch (bits 62-22 + epoch)
            - machine_id: Machine/worker ID (bits 21-12)
            - sequence: Sequence number (bits 11-0)

    Example:
        >>> id_val = get_snowflake_id()
        >>> timestamp, machine_id, sequence = decode_snowflake_id(id_val)
    """
    return decode_parts(id_val, env.FLAKEID_EPOCH if epoch is None else epoch)
