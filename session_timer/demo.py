"""Demonstration scenarios for clock injection.

Three sessions are measured and rendered through :func:`display_time`:

* a real-clock session spanning a blocking delay,
* a session driven by :class:`TenMinuteClock`,
* a session driven by a :class:`FixedClock` of configurable length.

Each scenario compares the rendered duration with the expected string.
The first scenario's clock and the delay function are injectable so the
scenarios can run without waiting.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .clock import Clock, FixedClock, TenMinuteClock
from .report import display_time, session_report
from .session import Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DemoConfig:
    real_delay_s: int = 2
    stub_length_s: int = 60 * 10

    def __post_init__(self) -> None:
        if self.real_delay_s < 0:
            raise ValueError("real_delay_s must be >= 0")
        if self.stub_length_s < 0:
            raise ValueError("stub_length_s must be >= 0")


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    name: str
    expected: str
    actual: str

    @property
    def ok(self) -> bool:
        return self.expected == self.actual


def run_scenarios(
    config: DemoConfig | None = None,
    *,
    clock: Clock | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[ScenarioResult]:
    """Measure and render each scenario. ``clock`` defaults to a RealClock."""

    cfg = config or DemoConfig()
    results: list[ScenarioResult] = []

    s = Session(clock)
    sleep(cfg.real_delay_s)
    s.stop()
    results.append(
        ScenarioResult(
            name=f"{cfg.real_delay_s}-second session",
            expected=display_time(cfg.real_delay_s),
            actual=session_report(s),
        )
    )

    ten_minutes = TenMinuteClock()
    s = Session(ten_minutes)
    s.stop()
    results.append(
        ScenarioResult(name="10-minute session", expected="00:10:00", actual=session_report(s))
    )

    fixed = FixedClock(cfg.stub_length_s)
    s = Session(fixed)
    s.stop()
    results.append(
        ScenarioResult(
            name=f"{cfg.stub_length_s}-second fixed session",
            expected=display_time(cfg.stub_length_s),
            actual=session_report(s),
        )
    )
    return results


def run(
    config: DemoConfig | None = None,
    *,
    clock: Clock | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run every scenario. Returns 0 when all match, 1 otherwise."""

    failures = 0
    for result in run_scenarios(config, clock=clock, sleep=sleep):
        if result.ok:
            logger.info("%s: %s", result.name, result.actual)
        else:
            failures += 1
            logger.error("%s: expected %s, got %s", result.name, result.expected, result.actual)
    return 0 if failures == 0 else 1
