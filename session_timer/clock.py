from __future__ import annotations

import time
from typing import Protocol

Timestamp = int


class Clock(Protocol):
    """Time source injected into a :class:`~session_timer.session.Session`.

    Sessions read time only through this interface, so tests can swap in a
    stub that returns fixed values.
    """

    def start(self) -> Timestamp:
        """Return the timestamp that opens a session."""

    def stop(self) -> Timestamp:
        """Return the timestamp that closes a session."""


class RealClock:
    """Production clock backed by ``time.time()``, truncated to whole seconds."""

    def start(self) -> Timestamp:
        return self.stop()

    def stop(self) -> Timestamp:
        return int(time.time())


class TenMinuteClock:
    """Stub clock whose sessions always last ten minutes."""

    def start(self) -> Timestamp:
        return 0

    def stop(self) -> Timestamp:
        return 60 * 10


class FixedClock:
    """Stub clock whose sessions always last ``length`` seconds."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must be >= 0")
        self._length = int(length)

    @property
    def length(self) -> int:
        return self._length

    def start(self) -> Timestamp:
        return 0

    def stop(self) -> Timestamp:
        return self._length


class FakeClock:
    """Controllable clock for deterministic testing.

    Both reads return the current value, which only moves when
    :meth:`advance` is called.
    """

    def __init__(self, now: int = 0) -> None:
        self._now = int(now)

    def start(self) -> Timestamp:
        return self._now

    def stop(self) -> Timestamp:
        return self._now

    def advance(self, seconds: int) -> None:
        if seconds < 0:
            raise ValueError("Cannot advance clock backwards")
        self._now += int(seconds)
