"""
Stopwatch module for the Minesweeper engine.

Tracks elapsed game time as one of three states: idle, running from a
captured instant, or stopped at a captured duration.
"""
import logging
import time
from datetime import timedelta
from enum import Enum, auto
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class StopwatchState(Enum):
    """Possible states of the stopwatch."""

    IDLE = auto()
    RUNNING = auto()
    STOPPED = auto()


class Stopwatch:
    """
    Tri-state elapsed-time tracker.

    The clock is any zero-argument callable returning seconds from a
    monotonic source; it defaults to time.monotonic.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._state = StopwatchState.IDLE
        self._started_at: Optional[float] = None
        self._captured: Optional[timedelta] = None

    @property
    def state(self) -> StopwatchState:
        return self._state

    def start(self) -> bool:
        """Start timing. Only valid while idle."""
        if self._state != StopwatchState.IDLE:
            return False
        self._started_at = self._clock()
        self._state = StopwatchState.RUNNING
        return True

    def stop(self) -> bool:
        """Freeze the elapsed time. Only valid while running."""
        if self._state != StopwatchState.RUNNING:
            return False
        self._captured = self._since_start()
        self._started_at = None
        self._state = StopwatchState.STOPPED
        logger.debug("Stopwatch stopped at %s", self._captured)
        return True

    def reset(self) -> None:
        """Return to idle from any state."""
        self._state = StopwatchState.IDLE
        self._started_at = None
        self._captured = None

    def elapsed(self) -> Optional[timedelta]:
        """None while idle, live while running, frozen once stopped."""
        if self._state == StopwatchState.RUNNING:
            return self._since_start()
        if self._state == StopwatchState.STOPPED:
            return self._captured
        return None

    def _since_start(self) -> timedelta:
        return timedelta(seconds=self._clock() - self._started_at)
