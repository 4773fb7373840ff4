from __future__ import annotations

from .session import Session


def display_time(total_seconds: int) -> str:
    """Format a non-negative count of seconds as ``HH:MM:SS``.

    Each field is zero-padded to two digits. The hour field widens past 99
    hours instead of wrapping, e.g. ``display_time(360000) == "100:00:00"``.
    """

    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
        raise TypeError("total_seconds must be an int")
    if total_seconds < 0:
        raise ValueError("total_seconds must be >= 0")

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def session_report(session: Session) -> str:
    """Render the duration of a stopped session."""

    return display_time(session.seconds())
