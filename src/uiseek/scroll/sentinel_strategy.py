"""Sentinel strategies - one scroll step plus end-of-content detection.

A sentinel is a designated child of the scroll container, usually the last
visible child when moving forward and the first when moving backward. If the
sentinel looks the same after a step as it did before, the content did not
move and there is nothing more to see in that direction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, cast

from ..config import get_settings
from ..logging import get_logger
from ..matchers import Matcher
from ..model.element import ElementIdentity, UiElement
from ..perception_exceptions import (
    ContainerNotFoundException,
    ElementNotFoundException,
    SentinelNotFoundException,
)
from ..poll_exceptions import TimeoutException, UnsatisfiedConditionException
from ..polling import ConditionChecker
from .direction import STANDARD_CONVERTER, DirectionConverter, LogicalDirection, PhysicalDirection

if TYPE_CHECKING:
    from ..driver import UiDriver
    from ..finders import Finder

logger = get_logger(__name__)


class SentinelStrategy(ABC):
    """Capability to scroll a container one step and detect its end."""

    @abstractmethod
    def scroll(self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection) -> bool:
        """Scroll the container once in ``direction``.

        Container and sentinel are resolved from the current tree on every
        call.

        Args:
            driver: Driver used to read the tree and issue the step
            container_finder: Finder for the scrollable container
            direction: Physical direction of the step

        Returns:
            False if the step had no effect (end of content), True otherwise

        Raises:
            ContainerNotFoundException: If the container cannot be resolved
        """
        ...

    def __repr__(self) -> str:
        return str(self)


class SentinelGetter(ABC):
    """Picks the sentinel among a container's visible children.

    Args:
        matcher: Optional filter; only children it matches are candidates
    """

    def __init__(self, matcher: Matcher | None = None) -> None:
        self.matcher = matcher

    def get(self, container: UiElement) -> UiElement:
        """Return the sentinel of ``container``.

        Raises:
            SentinelNotFoundException: If no child qualifies
        """
        candidates = [
            child
            for child in container.visible_children()
            if self.matcher is None or self.matcher.matches(child)
        ]
        if not candidates:
            raise SentinelNotFoundException(container, self)
        return self.pick(candidates)

    @abstractmethod
    def pick(self, candidates: list[UiElement]) -> UiElement:
        ...

    def __str__(self) -> str:
        if self.matcher is None:
            return type(self).__name__
        return f"{type(self).__name__}({self.matcher})"


class FirstChildGetter(SentinelGetter):
    def pick(self, candidates: list[UiElement]) -> UiElement:
        return candidates[0]


class LastChildGetter(SentinelGetter):
    def pick(self, candidates: list[UiElement]) -> UiElement:
        return candidates[-1]


class AbstractSentinelStrategy(SentinelStrategy):
    """Base for strategies that pick the sentinel by logical direction.

    Args:
        backward_getter: Sentinel getter for backward steps
        forward_getter: Sentinel getter for forward steps
        direction_converter: Maps physical steps to logical directions
    """

    def __init__(
        self,
        backward_getter: SentinelGetter | None = None,
        forward_getter: SentinelGetter | None = None,
        direction_converter: DirectionConverter = STANDARD_CONVERTER,
    ) -> None:
        self.backward_getter = backward_getter or FirstChildGetter()
        self.forward_getter = forward_getter or LastChildGetter()
        self.direction_converter = direction_converter

    def get_container(self, driver: UiDriver, container_finder: Finder) -> UiElement:
        try:
            return driver.find(container_finder)
        except ElementNotFoundException as e:
            raise ContainerNotFoundException(container_finder) from e

    def get_sentinel(
        self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection
    ) -> UiElement:
        """Resolve the container afresh and return its sentinel for ``direction``."""
        container = self.get_container(driver, container_finder)
        if self.direction_converter.to_logical(direction) is LogicalDirection.FORWARD:
            return self.forward_getter.get(container)
        return self.backward_getter.get(container)

    def do_scroll(self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection) -> None:
        driver.scroll(self.get_container(driver, container_finder), direction)

    def _sentinel_before(
        self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection
    ) -> ElementIdentity | None:
        try:
            return ElementIdentity.of(self.get_sentinel(driver, container_finder, direction))
        except SentinelNotFoundException:
            # Nothing rendered in the container, so there is nothing to scroll through
            logger.debug("sentinel_missing", container=str(container_finder), direction=direction.name)
            return None

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(backward={self.backward_getter}, "
            f"forward={self.forward_getter}, {self.direction_converter})"
        )


class StaticSentinelStrategy(AbstractSentinelStrategy):
    """Compares the sentinel immediately before and after a step.

    Suited to lists whose content is fully available once the step settles.
    """

    def scroll(self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection) -> bool:
        before = self._sentinel_before(driver, container_finder, direction)
        if before is None:
            return False

        self.do_scroll(driver, container_finder, direction)

        try:
            after = ElementIdentity.of(self.get_sentinel(driver, container_finder, direction))
        except SentinelNotFoundException:
            return False

        return after != before


class SentinelChangedChecker(ConditionChecker):
    """Satisfied once the sentinel no longer matches a recorded identity."""

    def __init__(
        self,
        strategy: AbstractSentinelStrategy,
        direction: PhysicalDirection,
        before: ElementIdentity,
    ) -> None:
        self.strategy = strategy
        self.direction = direction
        self.before = before

    def check(self, driver: UiDriver, finder: Finder) -> UiElement | None:
        try:
            sentinel = self.strategy.get_sentinel(driver, finder, self.direction)
        except SentinelNotFoundException as e:
            raise UnsatisfiedConditionException(self, finder) from e

        if ElementIdentity.of(sentinel) == self.before:
            raise UnsatisfiedConditionException(self, finder)
        return sentinel

    def __str__(self) -> str:
        return f"SentinelChanged({self.direction.name})"


class DynamicSentinelStrategy(AbstractSentinelStrategy):
    """Waits for the sentinel to change after each step.

    Suited to lists that load or animate content after a scroll: the change
    is polled for up to ``change_timeout_millis`` before concluding that the
    end was reached.

    Attributes:
        last_sentinel: Identity of the sentinel seen after the latest step
    """

    def __init__(
        self,
        backward_getter: SentinelGetter | None = None,
        forward_getter: SentinelGetter | None = None,
        direction_converter: DirectionConverter = STANDARD_CONVERTER,
        change_timeout_millis: int | None = None,
    ) -> None:
        super().__init__(backward_getter, forward_getter, direction_converter)
        if change_timeout_millis is None:
            change_timeout_millis = get_settings().change_timeout_millis
        if change_timeout_millis < 0:
            raise ValueError(f"change_timeout_millis must not be negative, got {change_timeout_millis}")
        self.change_timeout_millis = change_timeout_millis
        self.last_sentinel: ElementIdentity | None = None

    def scroll(self, driver: UiDriver, container_finder: Finder, direction: PhysicalDirection) -> bool:
        before = self._sentinel_before(driver, container_finder, direction)
        if before is None:
            return False

        self.do_scroll(driver, container_finder, direction)

        checker = SentinelChangedChecker(self, direction, before)
        try:
            sentinel = driver.get_poller().poll_for(
                driver, container_finder, checker, self.change_timeout_millis
            )
        except TimeoutException:
            self.last_sentinel = before
            return False

        self.last_sentinel = ElementIdentity.of(cast(UiElement, sentinel))
        return True

    def __str__(self) -> str:
        return (
            f"DynamicSentinelStrategy(backward={self.backward_getter}, "
            f"forward={self.forward_getter}, change_timeout_millis={self.change_timeout_millis})"
        )
