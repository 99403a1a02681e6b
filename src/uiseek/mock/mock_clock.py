"""MockClock - virtual monotonic clock for deterministic polling.

Sleeping on a MockClock returns immediately and advances virtual time, so a
poller with a 1000 ms timeout runs its full sequence of attempts instantly
and always makes the same number of them.
"""

import logging

logger = logging.getLogger(__name__)


class MockClock:
    """Virtual clock exposing ``monotonic`` and ``sleep``.

    Time is kept in whole microseconds so that repeated sleeps add up
    exactly (ten sleeps of 0.1 s reach 1.0 s, not 0.9999999999999999).

    Example:
        clock = MockClock()
        poller = DefaultPoller(100, clock=clock.monotonic, sleep=clock.sleep)
        clock.sleep(5.0)  # returns instantly
        assert clock.monotonic() == 5.0

    Attributes:
        sleeps: Every duration passed to ``sleep``, in order
    """

    def __init__(self, start: float = 0.0) -> None:
        self._micros = round(start * 1_000_000)
        self.sleeps: list[float] = []

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._micros / 1_000_000

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        """Advance virtual time by ``seconds`` without blocking."""
        if seconds < 0:
            raise ValueError(f"sleep length must be non-negative, got {seconds}")
        self.sleeps.append(seconds)
        self.advance(seconds)
        logger.debug(f"MockClock.sleep: {seconds}s (now={self.now})")

    def advance(self, seconds: float) -> None:
        """Move virtual time forward without recording a sleep."""
        micros = round(seconds * 1_000_000)
        if seconds > 0 and micros == 0:
            # Any positive sleep must move time, or a poll loop could spin
            micros = 1
        self._micros += micros

    @property
    def elapsed(self) -> float:
        return sum(self.sleeps)
