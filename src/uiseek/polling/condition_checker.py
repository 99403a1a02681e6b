"""Condition checkers evaluated by the poller on each attempt."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..model.element import UiElement
from ..perception_exceptions import ElementNotFoundException
from ..poll_exceptions import UnsatisfiedConditionException

if TYPE_CHECKING:
    from ..driver import UiDriver
    from ..finders import Finder


class ConditionChecker(ABC):
    """Success predicate for one poll attempt."""

    @abstractmethod
    def check(self, driver: UiDriver, finder: Finder) -> UiElement | None:
        """Evaluate the condition against the current tree.

        Args:
            driver: Driver used to fetch a fresh snapshot
            finder: Finder the condition is about

        Returns:
            The element the condition produced, if any

        Raises:
            UnsatisfiedConditionException: If the condition does not hold yet
        """
        ...

    def __repr__(self) -> str:
        return str(self)


class _ExistsChecker(ConditionChecker):
    def check(self, driver: UiDriver, finder: Finder) -> UiElement | None:
        try:
            return driver.find(finder)
        except ElementNotFoundException as e:
            raise UnsatisfiedConditionException(self, finder) from e

    def __str__(self) -> str:
        return "EXISTS"


class _GoneChecker(ConditionChecker):
    def check(self, driver: UiDriver, finder: Finder) -> UiElement | None:
        try:
            driver.find(finder)
        except ElementNotFoundException:
            return None
        raise UnsatisfiedConditionException(self, finder)

    def __str__(self) -> str:
        return "GONE"


EXISTS: ConditionChecker = _ExistsChecker()
"""Satisfied as soon as the finder resolves; yields the element."""

GONE: ConditionChecker = _GoneChecker()
"""Satisfied once the finder no longer resolves; yields None."""
