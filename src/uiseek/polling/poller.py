"""Poller - observe-and-retry loop against fresh tree snapshots.

The poller never scrolls or mutates anything. It fetches the current tree
through the driver, evaluates a condition, and waits a short interval until
the condition holds or the timeout elapses.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..config import get_settings
from ..logging import get_logger
from ..model.element import UiElement
from ..poll_exceptions import TimeoutException, UnsatisfiedConditionException
from .condition_checker import ConditionChecker

if TYPE_CHECKING:
    from ..driver import UiDriver
    from ..finders import Finder

logger = get_logger(__name__)

PollingListener = Callable[["UiDriver", "Finder"], None]
"""Called after every unsuccessful attempt that will be retried."""

TimeoutListener = Callable[["UiDriver", "Finder"], None]
"""Called once when a poll times out, before TimeoutException is raised."""


class Poller(ABC):
    """Interface for polling a finder until a condition holds."""

    @abstractmethod
    def poll_for(
        self,
        driver: UiDriver,
        finder: Finder,
        checker: ConditionChecker,
        timeout_millis: int,
    ) -> UiElement | None:
        """Poll until ``checker`` is satisfied for ``finder``.

        Args:
            driver: Driver supplying fresh snapshots
            finder: Finder to evaluate
            checker: Success condition, e.g. EXISTS or GONE
            timeout_millis: Polling budget; 0 means a single attempt

        Returns:
            Whatever the checker produced on success

        Raises:
            TimeoutException: If the budget elapses first; carries ``finder``
        """
        ...

    @abstractmethod
    def add_polling_listener(self, listener: PollingListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        ...

    @abstractmethod
    def add_timeout_listener(self, listener: TimeoutListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        ...


class DefaultPoller(Poller):
    """Poller with a fixed interval between attempts.

    ``clock`` and ``sleep`` default to ``time.monotonic`` and ``time.sleep``
    and can be replaced by a MockClock for deterministic tests.
    """

    def __init__(
        self,
        interval_millis: int | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_millis is None:
            interval_millis = get_settings().poll_interval_millis
        if interval_millis <= 0:
            raise ValueError(f"interval_millis must be positive, got {interval_millis}")
        self.interval_millis = interval_millis
        self._clock = clock
        self._sleep = sleep
        self._polling_listeners: list[PollingListener] = []
        self._timeout_listeners: list[TimeoutListener] = []

    def poll_for(
        self,
        driver: UiDriver,
        finder: Finder,
        checker: ConditionChecker,
        timeout_millis: int,
    ) -> UiElement | None:
        if timeout_millis < 0:
            raise ValueError(f"timeout_millis must not be negative, got {timeout_millis}")

        deadline = self._clock() + timeout_millis / 1000.0
        attempts = 0

        while True:
            attempts += 1
            try:
                return checker.check(driver, finder)
            except UnsatisfiedConditionException:
                pass

            remaining = deadline - self._clock()
            if remaining <= 0:
                logger.debug(
                    "poll_timed_out",
                    finder=str(finder),
                    checker=str(checker),
                    timeout_millis=timeout_millis,
                    attempts=attempts,
                )
                for timeout_listener in list(self._timeout_listeners):
                    timeout_listener(driver, finder)
                raise TimeoutException(finder, timeout_millis, checker, attempts=attempts)

            for polling_listener in list(self._polling_listeners):
                polling_listener(driver, finder)
            self._sleep(min(self.interval_millis / 1000.0, remaining))

    def add_polling_listener(self, listener: PollingListener) -> Callable[[], None]:
        return self._add_listener(self._polling_listeners, listener)

    def add_timeout_listener(self, listener: TimeoutListener) -> Callable[[], None]:
        return self._add_listener(self._timeout_listeners, listener)

    @staticmethod
    def _add_listener(listeners: list, listener: Callable) -> Callable[[], None]:
        listeners.append(listener)

        def remove() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return remove

    def __str__(self) -> str:
        return f"DefaultPoller(interval_millis={self.interval_millis})"
