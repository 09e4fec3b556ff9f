"""
flakeid.clock - Millisecond wall-clock sources for the generator.

The generator only ever calls ``now()``; anything with that method can be
used as a clock.
"""

import threading
import time
from typing import Iterable, Protocol


class Clock(Protocol):
    """Source of the current time in milliseconds since the Unix epoch."""

    def now(self) -> int: ...


class SystemClock:
    """Clock backed by ``time.time()``."""

    def now(self) -> int:
        return int(time.time() * 1000)

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """
    Deterministic clock that replays scripted readings.

    Each call to ``now()`` consumes the next scripted reading. Once the
    script is exhausted the clock keeps returning the current value, which
    can still be moved with ``set()`` or ``advance()``.

    Example:
        clock = ManualClock(1000)
        clock.now()       # 1000
        clock.advance(5)
        clock.now()       # 1005
    """

    def __init__(self, start: int = 0, readings: Iterable[int] = ()):
        self._current = start
        self._readings = list(readings)
        self._lock = threading.Lock()
        self.calls = 0

    def now(self) -> int:
        with self._lock:
            self.calls += 1
            if self._readings:
                self._current = self._readings.pop(0)
            return self._current

    def set(self, value: int) -> None:
        """Jump to an absolute reading, forwards or backwards."""
        with self._lock:
            self._current = value

    def advance(self, millis: int = 1) -> None:
        with self._lock:
            self._current += millis

    def script(self, readings: Iterable[int]) -> None:
        """Queue readings to be returned by the next ``now()`` calls."""
        with self._lock:
            self._readings.extend(readings)

    def __repr__(self) -> str:
        return f"ManualClock(current={self._current}, pending={len(self._readings)})"
