from __future__ import annotations

from .clock import Clock, RealClock, Timestamp


class UnstoppedSessionError(RuntimeError):
    """Raised when elapsed time is requested before the session was stopped."""


class Session:
    """Elapsed-time measurement between construction and :meth:`stop`.

    - The start timestamp is read from the clock at construction.
    - Time is entirely via the injected Clock; a RealClock is used when none
      is supplied.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else RealClock()
        self._start_time: Timestamp = self._clock.start()
        self._stop_time: Timestamp | None = None

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def start_time(self) -> Timestamp:
        return self._start_time

    @property
    def stop_time(self) -> Timestamp | None:
        return self._stop_time

    @property
    def stopped(self) -> bool:
        return self._stop_time is not None

    def stop(self) -> None:
        """Record the stop timestamp. A later call overwrites it with a fresh read."""
        self._stop_time = self._clock.stop()

    def seconds(self) -> int:
        """Elapsed seconds of the stopped session.

        Not clamped: a clock that runs backwards yields a negative value.
        """
        if self._stop_time is None:
            raise UnstoppedSessionError("Session has not been stopped")
        return self._stop_time - self._start_time
