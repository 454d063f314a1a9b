"""Loop configuration and logging setup."""
from __future__ import annotations

import logging
import logging.config
from dataclasses import dataclass


def _apply_logging(debug: bool) -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)-8s %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": logging.DEBUG if debug else logging.INFO,
        },
    })


@dataclass(frozen=True)
class LoopConfig:
    """Immutable settings for a Loop.

    Attributes:
        tps: Ticks per second. Stopwatch budgets are derived from it.
        debug: Log at DEBUG instead of INFO once ``apply_logging`` runs.
    """

    tps: int = 60
    debug: bool = False

    def validate(self) -> None:
        if self.tps <= 0:
            raise ValueError("tps must be positive")

    def apply_logging(self) -> None:
        """Configure logging based on this config. Call once at startup."""
        _apply_logging(self.debug)
