"""tick-stopwatch - Tick-counted countdown timers for fixed-rate game loops."""

from tick_stopwatch.clock import Clock
from tick_stopwatch.config import LoopConfig
from tick_stopwatch.loop import Loop
from tick_stopwatch.stopwatch import Stopwatch
from tick_stopwatch.systems import make_stopwatch_system
from tick_stopwatch.types import Duration, System, TickContext, ticks_for, to_milliseconds

__all__ = [
    "Stopwatch",
    "Loop",
    "LoopConfig",
    "Clock",
    "TickContext",
    "System",
    "Duration",
    "make_stopwatch_system",
    "ticks_for",
    "to_milliseconds",
]
