"""Session timing with an injectable clock.

A :class:`Session` measures whole seconds between construction and
:meth:`Session.stop` through a :class:`Clock`. Stub clocks make sessions
deterministic in tests; :func:`display_time` renders a duration as
``HH:MM:SS``.
"""

from .clock import Clock, FakeClock, FixedClock, RealClock, TenMinuteClock, Timestamp
from .report import display_time, session_report
from .session import Session, UnstoppedSessionError

__all__ = [
    "Clock",
    "FakeClock",
    "FixedClock",
    "RealClock",
    "Session",
    "TenMinuteClock",
    "Timestamp",
    "UnstoppedSessionError",
    "display_time",
    "session_report",
]
