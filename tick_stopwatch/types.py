"""Shared type aliases and the per-tick context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Union

Duration = Union[timedelta, int]
"""A wall-clock span: a ``timedelta`` or a whole number of milliseconds."""

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[[TickContext], None]


def to_milliseconds(duration: Duration) -> int:
    """Convert a duration to whole milliseconds, dropping any sub-millisecond part."""
    if isinstance(duration, timedelta):
        return duration // _ONE_MS
    if isinstance(duration, int) and not isinstance(duration, bool):
        return duration
    raise TypeError(
        f"duration must be a timedelta or int milliseconds, got {type(duration).__name__}"
    )


def ticks_for(duration: Duration, tps: int) -> int:
    """Number of whole ticks that fit in ``duration`` at ``tps`` ticks per second.

    A fractional ``tps`` is truncated to whole ticks per second first.
    """
    return to_milliseconds(duration) * int(tps) // 1000
