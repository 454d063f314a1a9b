"""Loop - fixed-timestep driver, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from tick_stopwatch.clock import Clock
from tick_stopwatch.config import LoopConfig
from tick_stopwatch.stopwatch import Stopwatch
from tick_stopwatch.types import Duration, System, TickContext

logger = logging.getLogger(__name__)


class Loop:
    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

    @classmethod
    def from_config(cls, config: LoopConfig) -> "Loop":
        config.validate()
        return cls(tps=config.tps)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def tps(self) -> int:
        return self._clock.tps

    def stopwatch(self, duration: Duration) -> Stopwatch:
        """Create a stopped stopwatch sized for this loop's tick rate."""
        return Stopwatch(max_ticks=self._clock.ticks_for(duration))

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        if not self._stop_requested:
            logger.debug("stop requested at tick %d", self._clock.tick_number)
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        logger.debug("run: %d ticks at %d tps", n, self._clock.tps)
        self._fire(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)
        logger.debug("run finished at tick %d", self._clock.tick_number)

    def run_forever(self) -> None:
        self._stop_requested = False
        logger.debug("run_forever at %d tps", self._clock.tps)
        self._fire(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
        logger.debug("run_forever finished at tick %d", self._clock.tick_number)
