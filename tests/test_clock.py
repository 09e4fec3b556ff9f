"""
Tests for clock sources.
"""

import time

from flakeid.clock import ManualClock, SystemClock


def test_system_clock_reads_wall_time_in_millis():
    """SystemClock.now() tracks time.time() in milliseconds."""
    before = int(time.time() * 1000)
    reading = SystemClock().now()
    after = int(time.time() * 1000)

    assert before <= reading <= after


def test_manual_clock_holds_value_until_moved():
    clock = ManualClock(500)

    assert clock.now() == 500
    assert clock.now() == 500

    clock.advance(3)
    assert clock.now() == 503

    clock.set(100)
    assert clock.now() == 100


def test_manual_clock_replays_script_then_holds_last_reading():
    """Scripted readings are consumed in order, then the last one sticks."""
    clock = ManualClock(0, readings=[10, 10, 11])

    assert [clock.now() for _ in range(5)] == [10, 10, 11, 11, 11]
    assert clock.calls == 5


def test_manual_clock_script_appends():
    clock = ManualClock(7)
    clock.script([8, 9])

    assert clock.now() == 8
    assert clock.now() == 9
    assert clock.now() == 9
