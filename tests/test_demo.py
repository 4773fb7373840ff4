"""Tests for the demonstration scenarios.

A ``FakeClock`` stands in for the real clock and the blocking delay advances
it, so nothing waits in real time.
"""

from __future__ import annotations

import logging

import pytest

from session_timer.clock import FakeClock
from session_timer.demo import DemoConfig, ScenarioResult, run, run_scenarios


def test_scenarios_pass_without_waiting() -> None:
    clock = FakeClock()
    delays: list[float] = []

    def fake_sleep(seconds: float) -> None:
        delays.append(seconds)
        clock.advance(int(seconds))

    results = run_scenarios(DemoConfig(), clock=clock, sleep=fake_sleep)

    assert delays == [2]
    assert [r.actual for r in results] == ["00:00:02", "00:10:00", "00:10:00"]
    assert all(r.ok for r in results)


def test_fixed_scenario_uses_configured_length() -> None:
    clock = FakeClock()
    results = run_scenarios(
        DemoConfig(real_delay_s=0, stub_length_s=3725),
        clock=clock,
        sleep=lambda _s: None,
    )
    assert results[-1].expected == "01:02:05"
    assert results[-1].actual == "01:02:05"


def test_run_returns_zero_and_logs_each_scenario(caplog: pytest.LogCaptureFixture) -> None:
    clock = FakeClock()
    with caplog.at_level(logging.INFO, logger="session_timer.demo"):
        code = run(DemoConfig(), clock=clock, sleep=lambda s: clock.advance(int(s)))
    assert code == 0
    assert len([r for r in caplog.records if r.levelno == logging.INFO]) == 3


def test_run_returns_one_when_clock_does_not_move(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="session_timer.demo"):
        code = run(DemoConfig(real_delay_s=5), clock=FakeClock(), sleep=lambda _s: None)
    assert code == 1
    assert any("expected 00:00:05, got 00:00:00" in r.getMessage() for r in caplog.records)


def test_scenario_result_ok() -> None:
    assert ScenarioResult(name="x", expected="00:00:01", actual="00:00:01").ok
    assert not ScenarioResult(name="x", expected="00:00:01", actual="00:00:02").ok


@pytest.mark.parametrize(
    "kwargs",
    [{"real_delay_s": -1}, {"stub_length_s": -5}],
)
def test_config_validation(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        DemoConfig(**kwargs)
