"""Observers notified by scrollers as a search progresses.

Scrollers report progress through an injected observer instead of logging
inline, so callers and tests can watch a search without capturing logs.
Observers are advisory: nothing they do changes the search outcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from ..finders import Finder
    from .direction import PhysicalDirection
    from .sentinel_strategy import SentinelStrategy

logger = get_logger(__name__)


class ScrollObserver:
    """Observer with no-op hooks; override the ones you need."""

    def on_scroll(
        self, container_finder: Finder, direction: PhysicalDirection, step: int, more: bool
    ) -> None:
        """Called after each scroll step.

        Args:
            container_finder: Container that was scrolled
            direction: Direction of the step
            step: 1-based number of the step within this direction's attempt
            more: What the sentinel strategy reported
        """

    def on_found(self, item_finder: Finder, direction: PhysicalDirection, scrolls: int) -> None:
        """Called when the item is found after ``scrolls`` steps."""

    def on_exhausted(
        self,
        container_finder: Finder,
        direction: PhysicalDirection,
        max_scrolls: int,
        strategy: SentinelStrategy,
    ) -> None:
        """Called when a direction used its whole step budget without finding the item.

        A well-tuned setup stops because the strategy reports the end of
        content, so reaching this hook usually means ``max_scrolls`` is too
        small or the strategy's end detection is wrong.
        """


class LoggingScrollObserver(ScrollObserver):
    """Default observer writing structured log events."""

    def on_scroll(
        self, container_finder: Finder, direction: PhysicalDirection, step: int, more: bool
    ) -> None:
        logger.debug(
            "scrolled",
            container=str(container_finder),
            direction=direction.name,
            step=step,
            more=more,
        )

    def on_found(self, item_finder: Finder, direction: PhysicalDirection, scrolls: int) -> None:
        logger.debug("item_found", item=str(item_finder), direction=direction.name, scrolls=scrolls)

    def on_exhausted(
        self,
        container_finder: Finder,
        direction: PhysicalDirection,
        max_scrolls: int,
        strategy: SentinelStrategy,
    ) -> None:
        logger.warning(
            "scroll_budget_exhausted",
            container=str(container_finder),
            direction=direction.name,
            max_scrolls=max_scrolls,
            sentinel_strategy=str(strategy),
        )
