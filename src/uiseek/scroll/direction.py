"""Scroll directions.

Physical directions name the way content moves into view: DOWN and RIGHT
reveal later items of a list, UP and LEFT reveal earlier ones. An Axis owns
the order in which its physical directions are tried when the caller does
not name one.
"""

from enum import Enum


class PhysicalDirection(Enum):
    """Direction of a single scroll step on screen."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def axis(self) -> "Axis":
        if self in (PhysicalDirection.UP, PhysicalDirection.DOWN):
            return Axis.VERTICAL
        return Axis.HORIZONTAL

    @property
    def reverse(self) -> "PhysicalDirection":
        return _REVERSE[self]


_REVERSE = {
    PhysicalDirection.UP: PhysicalDirection.DOWN,
    PhysicalDirection.DOWN: PhysicalDirection.UP,
    PhysicalDirection.LEFT: PhysicalDirection.RIGHT,
    PhysicalDirection.RIGHT: PhysicalDirection.LEFT,
}


class Axis(Enum):
    """Logical scroll dimension."""

    HORIZONTAL = (PhysicalDirection.RIGHT, PhysicalDirection.LEFT)
    VERTICAL = (PhysicalDirection.DOWN, PhysicalDirection.UP)

    @property
    def physical_directions(self) -> tuple[PhysicalDirection, ...]:
        """Directions tried, in order, when no direction is given."""
        return self.value


class LogicalDirection(Enum):
    """Direction along the list, independent of layout."""

    FORWARD = "forward"
    BACKWARD = "backward"


class DirectionConverter:
    """Maps physical directions to logical ones and back.

    Args:
        forward: Physical directions that move forward through the list
    """

    def __init__(self, forward: tuple[PhysicalDirection, ...]) -> None:
        self.forward = frozenset(forward)

    def to_logical(self, direction: PhysicalDirection) -> LogicalDirection:
        if direction in self.forward:
            return LogicalDirection.FORWARD
        return LogicalDirection.BACKWARD

    def to_physical(self, direction: LogicalDirection, axis: Axis) -> PhysicalDirection:
        for physical in axis.physical_directions:
            if self.to_logical(physical) is direction:
                return physical
        raise ValueError(f"No {direction.name} direction on {axis.name} axis")

    def __str__(self) -> str:
        names = sorted(d.name for d in self.forward)
        return f"DirectionConverter(forward={names})"


STANDARD_CONVERTER = DirectionConverter((PhysicalDirection.DOWN, PhysicalDirection.RIGHT))
"""Left-to-right, top-to-bottom layouts."""

RTL_CONVERTER = DirectionConverter((PhysicalDirection.DOWN, PhysicalDirection.LEFT))
"""Right-to-left layouts, where later items appear to the left."""
