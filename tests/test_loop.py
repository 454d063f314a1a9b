"""Tests for loop lifecycle, tick counting, and pacing."""
import logging
from datetime import timedelta
from unittest.mock import patch

from tick_stopwatch import Loop, Stopwatch


# --- Initialization ---

def test_loop_init_defaults():
    loop = Loop()
    assert loop.tps == 60
    assert loop.clock.tick_number == 0


def test_loop_init_custom_tps():
    assert Loop(tps=20).clock.tps == 20


# --- stopwatch factory ---

def test_stopwatch_uses_loop_tps():
    sw = Loop(tps=60).stopwatch(timedelta(milliseconds=500))
    assert isinstance(sw, Stopwatch)
    assert sw.max_ticks == 30
    assert sw.active is False


def test_stopwatch_budget_follows_tps():
    assert Loop(tps=20).stopwatch(1000).max_ticks == 20
    assert Loop(tps=144).stopwatch(1000).max_ticks == 144


# --- Systems ---

def test_systems_run_in_order():
    loop = Loop()
    order = []
    loop.add_system(lambda ctx: order.append("first"))
    loop.add_system(lambda ctx: order.append("second"))
    loop.step()
    assert order == ["first", "second"]


def test_step_advances_one_tick():
    loop = Loop()
    ticks = []
    loop.add_system(lambda ctx: ticks.append(ctx.tick_number))
    loop.step()
    loop.step()
    assert ticks == [1, 2]
    assert loop.clock.tick_number == 2


def test_step_does_not_call_hooks():
    loop = Loop()
    calls = []
    loop.on_start(lambda ctx: calls.append("start"))
    loop.on_stop(lambda ctx: calls.append("stop"))
    loop.step()
    assert calls == []


# --- run() ---

def test_run_n_ticks():
    loop = Loop()
    ticks = []
    loop.add_system(lambda ctx: ticks.append(ctx.tick_number))
    loop.run(5)
    assert ticks == [1, 2, 3, 4, 5]


def test_run_calls_hooks_around_ticks():
    loop = Loop()
    events = []
    loop.on_start(lambda ctx: events.append(("start", ctx.tick_number)))
    loop.add_system(lambda ctx: events.append(("tick", ctx.tick_number)))
    loop.on_stop(lambda ctx: events.append(("stop", ctx.tick_number)))
    loop.run(2)
    assert events == [("start", 0), ("tick", 1), ("tick", 2), ("stop", 2)]


def test_request_stop_ends_run_and_skips_later_systems():
    loop = Loop()
    later = []

    def stopper(ctx):
        if ctx.tick_number == 3:
            ctx.request_stop()

    loop.add_system(stopper)
    loop.add_system(lambda ctx: later.append(ctx.tick_number))
    loop.run(10)
    assert loop.clock.tick_number == 3
    assert later == [1, 2]


def test_run_can_resume_after_stop():
    loop = Loop()

    def stop_once(ctx):
        if ctx.tick_number == 2:
            ctx.request_stop()

    loop.add_system(stop_once)
    loop.run(10)
    assert loop.clock.tick_number == 2
    loop.run(3)
    assert loop.clock.tick_number == 5


def test_run_logs_lifecycle(caplog):
    loop = Loop(tps=30)
    with caplog.at_level(logging.DEBUG, logger="tick_stopwatch.loop"):
        loop.run(2)
    assert "run: 2 ticks at 30 tps" in caplog.text
    assert "run finished at tick 2" in caplog.text


# --- run_forever() ---

def test_run_forever_until_stop_requested():
    loop = Loop(tps=1000)
    calls = []

    def system(ctx):
        calls.append(ctx.tick_number)
        if ctx.tick_number == 4:
            ctx.request_stop()

    loop.add_system(system)
    with patch("tick_stopwatch.loop.time.sleep"):
        loop.run_forever()
    assert calls == [1, 2, 3, 4]


def test_run_forever_paces_with_sleep():
    loop = Loop(tps=10)

    def system(ctx):
        if ctx.tick_number == 3:
            ctx.request_stop()

    loop.add_system(system)
    with patch("tick_stopwatch.loop.time.sleep") as sleep:
        loop.run_forever()
    # no sleep after the tick that requested the stop
    assert sleep.call_count == 2
    for call in sleep.call_args_list:
        assert 0 < call.args[0] <= 0.1


def test_run_forever_calls_hooks():
    loop = Loop(tps=1000)
    events = []
    loop.on_start(lambda ctx: events.append("start"))
    loop.add_system(lambda ctx: ctx.request_stop())
    loop.on_stop(lambda ctx: events.append("stop"))
    with patch("tick_stopwatch.loop.time.sleep"):
        loop.run_forever()
    assert events == ["start", "stop"]


def test_stopwatch_budget_matches_clock():
    loop = Loop(tps=30)
    assert loop.stopwatch(timedelta(seconds=2)).max_ticks == loop.clock.ticks_for(2000) == 60
