from __future__ import annotations

import logging
import math
import random
from decimal import Decimal
from fractions import Fraction

import pytest

from gameloop.api.frame import TICK, Render, Tick
from gameloop.runtime import game_loop as game_loop_module
from gameloop.runtime.errors import GameLoopConfigError, InvalidFrameSkipError, InvalidRateError
from gameloop.runtime.game_loop import GameLoop
from gameloop.runtime.metrics import LoopMetrics
from gameloop.runtime.time import ManualClock


def _tick_count(actions: tuple) -> int:
    return sum(1 for action in actions if isinstance(action, Tick))


def test_game_loop_derives_tick_duration_from_rate() -> None:
    loop = GameLoop(20, 5)
    assert loop.tick_duration == pytest.approx(0.05)
    assert loop.ticks_per_second == 20.0
    assert loop.max_frame_skip == 5
    assert loop.accumulator == 0.0
    assert loop.last_poll_time is None
    assert not loop.is_running


def test_game_loop_accepts_fractional_rate() -> None:
    loop = GameLoop(59.94, 1)
    assert loop.tick_duration == pytest.approx(1.0 / 59.94)
    assert loop.tick_duration > 0.0


@pytest.mark.parametrize(
    "rate",
    [0, -1, -0.5, math.inf, math.nan, "20", None, True, 1j, Decimal("NaN"), Decimal("-5")],
)
def test_game_loop_rejects_invalid_rate(rate) -> None:
    with pytest.raises(InvalidRateError):
        GameLoop(rate, 5)


@pytest.mark.parametrize("frame_skip", [0, -3, 2.5, "5", None, True])
def test_game_loop_rejects_invalid_frame_skip(frame_skip) -> None:
    with pytest.raises(InvalidFrameSkipError):
        GameLoop(20, frame_skip)


def test_config_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        GameLoop(0, 5)
    with pytest.raises(GameLoopConfigError) as excinfo:
        GameLoop(20, 0)
    assert excinfo.value.max_frame_skip == 0
    assert "max_frame_skip" in str(excinfo.value)


def test_first_poll_renders_without_ticks() -> None:
    loop = GameLoop(20, 5)
    assert loop.poll(12.5) == (Render(0.0),)
    assert loop.is_running
    assert loop.last_poll_time == 12.5
    assert loop.accumulator == 0.0


def test_poll_sequence_emits_ticks_and_interpolation() -> None:
    loop = GameLoop(20, 5)

    first = loop.poll(0.0)
    second = loop.poll(0.05)
    third = loop.poll(0.12)

    assert first == (Render(0.0),)
    assert second == (TICK, Render(0.0))
    assert third[:-1] == (TICK,)
    assert isinstance(third[-1], Render)
    assert third[-1].interpolation == pytest.approx(0.4)
    assert loop.accumulator == pytest.approx(0.02)


def test_poll_reports_partial_tick_as_interpolation() -> None:
    loop = GameLoop(4, 5)
    loop.poll(0.0)
    assert loop.poll(0.375) == (TICK, Render(0.5))
    assert loop.poll(0.5) == (TICK, Render(0.0))


def test_poll_caps_ticks_and_discards_surplus_after_stall() -> None:
    loop = GameLoop(20, 5)
    loop.poll(3.0)

    actions = loop.poll(4.0)

    assert actions[:-1] == (TICK,) * 5
    assert isinstance(actions[-1], Render)
    assert 0.0 <= actions[-1].interpolation < 1.0
    assert 0.0 <= loop.accumulator < loop.tick_duration
    # The next regular frame does not keep catching up.
    assert _tick_count(loop.poll(4.05)) <= 1


def test_poll_discard_keeps_sub_tick_remainder() -> None:
    metrics = LoopMetrics()
    loop = GameLoop(4, 3, metrics=metrics)
    loop.poll(0.0)

    actions = loop.poll(10.125)

    assert actions == (TICK, TICK, TICK, Render(0.5))
    assert loop.accumulator == 0.125
    snapshot = metrics.snapshot()
    assert snapshot.overload_count == 1
    assert snapshot.dropped_seconds_total == pytest.approx(9.25)


def test_poll_treats_backwards_time_as_zero_elapsed() -> None:
    loop = GameLoop(4, 5)
    loop.poll(0.0)
    assert loop.poll(1.0) == (TICK, TICK, TICK, TICK, Render(0.0))

    assert loop.poll(0.5) == (Render(0.0),)
    assert loop.last_poll_time == 0.5
    assert loop.poll(0.75) == (TICK, Render(0.0))


def test_poll_ignores_non_finite_timestamps() -> None:
    loop = GameLoop(4, 5)
    assert loop.poll(math.nan) == (Render(0.0),)
    assert not loop.is_running

    loop.poll(1.0)
    assert loop.poll(math.inf) == (Render(0.0),)
    assert loop.last_poll_time == 1.0
    assert loop.poll(1.25) == (TICK, Render(0.0))


def test_poll_invariants_hold_for_irregular_polling() -> None:
    rng = random.Random(1234)
    loop = GameLoop(30, 4)
    now = 0.0
    loop.poll(now)
    for _ in range(500):
        now += rng.choice([0.0, 0.001, 0.016, 0.033, 0.2, 1.5]) * rng.random()
        actions = loop.poll(now)
        renders = [action for action in actions if isinstance(action, Render)]
        assert len(renders) == 1
        assert actions[-1] is renders[0]
        assert 0.0 <= renders[0].interpolation < 1.0
        assert _tick_count(actions) <= loop.max_frame_skip
        assert len(actions) <= loop.max_frame_skip + 1
        assert 0.0 <= loop.accumulator < loop.tick_duration


def test_identical_inputs_produce_identical_actions() -> None:
    rng = random.Random(99)
    timestamps = [0.0]
    for _ in range(200):
        timestamps.append(timestamps[-1] + rng.random() * 0.3)

    left = GameLoop(20, 5)
    right = GameLoop(20, 5)

    assert [left.poll(now) for now in timestamps] == [right.poll(now) for now in timestamps]


def test_returned_actions_are_reiterable() -> None:
    loop = GameLoop(4, 5)
    loop.poll(0.0)
    actions = loop.poll(0.5)
    assert list(actions) == list(actions)


def test_actions_reads_injected_clock() -> None:
    clock = ManualClock(2.0)
    loop = GameLoop(4, 5, clock=clock)

    assert list(loop.actions()) == [Render(0.0)]
    clock.advance(0.5)
    assert list(loop.actions()) == [TICK, TICK, Render(0.0)]
    assert loop.clock is clock


def test_game_loop_logs_configuration_on_init(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="gameloop.scheduler")
    GameLoop(20, 5)
    assert any("game_loop_initialized" in message for message in caplog.messages)
    assert any("tick_ms=50.000" in message for message in caplog.messages)


def test_game_loop_logs_dropped_time(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="gameloop.scheduler")
    loop = GameLoop(4, 1)
    loop.poll(0.0)
    loop.poll(2.0)
    assert any("frame_skip_cap_reached ticks=1" in message for message in caplog.messages)


def test_poll_ignores_malformed_timestamps() -> None:
    loop = GameLoop(4, 5)
    loop.poll(0.0)
    assert loop.poll(None) == (Render(0.0),)  # type: ignore[arg-type]
    assert loop.poll("later") == (Render(0.0),)  # type: ignore[arg-type]
    assert loop.last_poll_time == 0.0
    assert loop.poll(0.25) == (TICK, Render(0.0))


@pytest.mark.parametrize(
    ("rate", "expected"),
    [(Decimal("20"), 0.05), (Fraction(1, 2), 2.0), (59.94, 1.0 / 59.94)],
)
def test_game_loop_accepts_numbers_convertible_to_float(rate, expected) -> None:
    loop = GameLoop(rate, 5)
    assert isinstance(loop.ticks_per_second, float)
    assert loop.tick_duration == pytest.approx(expected)


def test_poll_on_every_tick_boundary_ticks_once_per_poll() -> None:
    loop = GameLoop(60, 5)
    loop.poll(0.0)
    tick_counts = {_tick_count(loop.poll(i / 60)) for i in range(1, 600)}
    assert tick_counts == {1}
    assert 0.0 <= loop.accumulator < loop.tick_duration


@pytest.mark.parametrize("rate", [1, 3, 7, 20, 60, 144, 999, 1999])
def test_poll_just_under_one_tick_keeps_interpolation_below_one(rate) -> None:
    loop = GameLoop(rate, 5)
    loop.poll(0.0)
    actions = loop.poll(math.nextafter(loop.tick_duration, 0.0))
    assert isinstance(actions[-1], Render)
    assert 0.0 <= actions[-1].interpolation < 1.0
    assert 0.0 <= loop.accumulator < loop.tick_duration


def test_poll_skips_debug_formatting_when_disabled(monkeypatch) -> None:
    class _QuietLogger:
        def __init__(self) -> None:
            self.debug_calls = 0

        def isEnabledFor(self, level: int) -> bool:
            _ = level
            return False

        def debug(self, *args, **kwargs) -> None:
            _ = (args, kwargs)
            self.debug_calls += 1

    quiet = _QuietLogger()
    monkeypatch.setattr(game_loop_module, "_LOG", quiet)

    loop = GameLoop(4, 1)
    loop.poll(math.nan)
    loop.poll(0.0)
    loop.poll(2.0)
    loop.poll(math.inf)

    assert quiet.debug_calls == 0
