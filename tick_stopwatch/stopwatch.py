"""Stopwatch - a tick-counted countdown for fixed-rate loops."""
from __future__ import annotations

from dataclasses import dataclass

from tick_stopwatch.types import Duration, ticks_for


@dataclass
class Stopwatch:
    """Counts ticks toward ``max_ticks`` while active.

    The counter saturates at ``max_ticks``. ``active`` and completion are
    independent: a finished stopwatch stays active until stopped, it just
    stops counting.
    """

    max_ticks: int
    current_ticks: int = 0
    active: bool = False

    @classmethod
    def from_duration(cls, duration: Duration, tps: int) -> Stopwatch:
        """Build a stopwatch whose budget is ``duration`` at ``tps`` ticks per second.

        Fractional ticks are truncated, so 10ms at 60 TPS gives a zero budget
        and the stopwatch is done immediately.
        """
        return cls(max_ticks=ticks_for(duration, tps))

    def start(self) -> None:
        """Begin counting, or resume a stopped stopwatch."""
        self.active = True

    def stop(self) -> None:
        """Pause counting. Progress is kept."""
        self.active = False

    def update(self) -> None:
        """Advance by one tick. Call once per frame."""
        if self.active and self.current_ticks < self.max_ticks:
            self.current_ticks += 1

    advance = update

    def reset(self) -> None:
        """Clear progress. Does not start or stop the stopwatch."""
        self.current_ticks = 0

    def is_done(self) -> bool:
        return self.max_ticks <= self.current_ticks

    def is_running(self) -> bool:
        return self.active and not self.is_done()

    @property
    def remaining_ticks(self) -> int:
        return max(self.max_ticks - self.current_ticks, 0)

    @property
    def progress(self) -> float:
        if self.max_ticks <= 0:
            return 1.0
        return max(0.0, min(self.current_ticks / self.max_ticks, 1.0))
