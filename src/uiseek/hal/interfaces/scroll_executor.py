"""Scroll executor interface definition.

Performs the platform-level scroll gesture. Only concrete SentinelStrategy
implementations invoke it, through UiDriver.scroll.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ...model.element import UiElement

if TYPE_CHECKING:
    from ...scroll.direction import PhysicalDirection


class IScrollExecutor(ABC):
    """Interface for performing one scroll step on a container."""

    @abstractmethod
    def scroll(self, container: UiElement, direction: PhysicalDirection) -> None:
        """Scroll ``container`` one step in ``direction``.

        Args:
            container: Snapshot of the container to scroll
            direction: Physical direction of the step; DOWN reveals later items
        """
        ...
