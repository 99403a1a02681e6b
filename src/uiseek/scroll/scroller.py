"""Scrollers - locate an item inside a scrollable container.

SentinelScroller looks for the item in the currently rendered content and,
while it is absent, scrolls the container one step at a time and looks
again, until the item shows up, the SentinelStrategy reports that nothing
more can be scrolled, or the step budget runs out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..config import UiseekSettings, get_settings
from ..finders import Finder, chain
from ..logging import get_logger
from ..model.element import UiElement
from ..perception_exceptions import ElementNotFoundException
from ..poll_exceptions import TimeoutException
from ..polling import EXISTS
from .direction import Axis, PhysicalDirection
from .scroll_observer import LoggingScrollObserver, ScrollObserver
from .sentinel_strategy import SentinelStrategy

if TYPE_CHECKING:
    from ..driver import UiDriver

logger = get_logger(__name__)


class Scroller(ABC):
    """Interface for bringing an item of a scrollable container into view."""

    @abstractmethod
    def scroll_to(
        self,
        driver: UiDriver,
        container_finder: Finder,
        item_finder: Finder,
        direction: PhysicalDirection | None = None,
    ) -> UiElement:
        """Scroll until ``item_finder`` resolves inside the container.

        Args:
            driver: Driver to query and scroll with
            container_finder: Finder for the scrollable container
            item_finder: Finder for the item, relative to the container
            direction: Direction to scroll; None tries every direction of the axis

        Returns:
            The found item

        Raises:
            ElementNotFoundException: If the item cannot be found; carries the
                container-relative item finder made absolute
            ContainerNotFoundException: If the container itself is missing
        """
        ...


class SentinelScroller(Scroller):
    """Scroller driven by a SentinelStrategy.

    Configuration is fixed at construction.

    Args:
        sentinel_strategy: Performs steps and detects the end of content
        max_scrolls: Maximum number of steps per direction; a safety net
            that should be large enough for any reasonable list
        per_scroll_timeout_millis: How long to poll for the item after each step
        axis: Axis whose directions are tried when none is given
        observer: Progress observer; defaults to LoggingScrollObserver

    Attributes:
        last_scroll_count: Steps taken by the most recent single-direction attempt
    """

    def __init__(
        self,
        sentinel_strategy: SentinelStrategy,
        max_scrolls: int = 100,
        per_scroll_timeout_millis: int = 1000,
        axis: Axis = Axis.VERTICAL,
        observer: ScrollObserver | None = None,
    ) -> None:
        if max_scrolls < 0:
            raise ValueError(f"max_scrolls must not be negative, got {max_scrolls}")
        if per_scroll_timeout_millis < 0:
            raise ValueError(
                f"per_scroll_timeout_millis must not be negative, got {per_scroll_timeout_millis}"
            )
        self._sentinel_strategy = sentinel_strategy
        self._max_scrolls = max_scrolls
        self._per_scroll_timeout_millis = per_scroll_timeout_millis
        self._axis = axis
        self._observer = observer or LoggingScrollObserver()
        self.last_scroll_count = 0

    @classmethod
    def from_settings(
        cls,
        sentinel_strategy: SentinelStrategy,
        settings: UiseekSettings | None = None,
        observer: ScrollObserver | None = None,
    ) -> SentinelScroller:
        """Build a scroller configured from settings."""
        settings = settings or get_settings()
        return cls(
            sentinel_strategy,
            max_scrolls=settings.max_scrolls,
            per_scroll_timeout_millis=settings.per_scroll_timeout_millis,
            axis=Axis[settings.axis],
            observer=observer,
        )

    @property
    def sentinel_strategy(self) -> SentinelStrategy:
        return self._sentinel_strategy

    @property
    def max_scrolls(self) -> int:
        return self._max_scrolls

    @property
    def per_scroll_timeout_millis(self) -> int:
        return self._per_scroll_timeout_millis

    @property
    def axis(self) -> Axis:
        return self._axis

    def scroll_to(
        self,
        driver: UiDriver,
        container_finder: Finder,
        item_finder: Finder,
        direction: PhysicalDirection | None = None,
    ) -> UiElement:
        logger.debug(
            "scroll_to",
            container=str(container_finder),
            item=str(item_finder),
            direction=direction.name if direction else None,
        )
        if direction is not None:
            return self._scroll_in_direction(driver, container_finder, item_finder, direction)

        # Each direction starts wherever the previous one left the container
        for candidate in self._axis.physical_directions:
            try:
                return self._scroll_in_direction(driver, container_finder, item_finder, candidate)
            except ElementNotFoundException:
                logger.debug("direction_failed", direction=candidate.name, item=str(item_finder))

        raise ElementNotFoundException(chain(container_finder, item_finder))

    def _scroll_in_direction(
        self,
        driver: UiDriver,
        container_finder: Finder,
        item_finder: Finder,
        direction: PhysicalDirection,
    ) -> UiElement:
        # The item finder is relative to the container; make it absolute
        absolute_finder = chain(container_finder, item_finder)
        poller = driver.get_poller()
        scrolls = 0
        self.last_scroll_count = 0

        for attempt in range(self._max_scrolls + 1):
            try:
                element = poller.poll_for(
                    driver, absolute_finder, EXISTS, self._per_scroll_timeout_millis
                )
            except TimeoutException:
                element = None

            if element is not None:
                self._observer.on_found(absolute_finder, direction, scrolls)
                return element

            if attempt < self._max_scrolls:
                more = self._sentinel_strategy.scroll(driver, container_finder, direction)
                scrolls += 1
                self.last_scroll_count = scrolls
                self._observer.on_scroll(container_finder, direction, scrolls, more)
                if not more:
                    break
        else:
            if self._max_scrolls > 0:
                self._observer.on_exhausted(
                    container_finder, direction, self._max_scrolls, self._sentinel_strategy
                )

        raise ElementNotFoundException(absolute_finder)

    def __str__(self) -> str:
        return (
            f"SentinelScroller(max_scrolls={self._max_scrolls}, "
            f"per_scroll_timeout_millis={self._per_scroll_timeout_millis}, "
            f"axis={self._axis.name}, strategy={self._sentinel_strategy})"
        )
