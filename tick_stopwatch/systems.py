"""System factory that drives stopwatches from the loop."""
from __future__ import annotations

import logging
from typing import Callable, Collection, Optional

from tick_stopwatch.stopwatch import Stopwatch
from tick_stopwatch.types import System, TickContext

logger = logging.getLogger(__name__)


def make_stopwatch_system(
    stopwatches: Collection[Stopwatch],
    on_done: Optional[Callable[[TickContext, Stopwatch], None]] = None,
) -> System:
    """Return a system that updates each stopwatch once per tick.

    ``stopwatches`` is re-read on every tick, so a list the caller appends to
    is picked up live. One-shot iterators are rejected with ``TypeError``.
    ``on_done`` fires on the tick a stopwatch goes from unfinished to
    finished; already-finished stopwatches never fire.
    """
    if iter(stopwatches) is stopwatches:
        raise TypeError("stopwatches must be a collection, not an iterator")

    def stopwatch_system(ctx: TickContext) -> None:
        for sw in list(stopwatches):
            was_done = sw.is_done()
            sw.update()
            if not was_done and sw.is_done():
                logger.debug(
                    "stopwatch finished at tick %d (%d ticks)",
                    ctx.tick_number, sw.max_ticks,
                )
                if on_done is not None:
                    on_done(ctx, sw)

    return stopwatch_system
