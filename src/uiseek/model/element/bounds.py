"""Bounds - rectangular area occupied by an element on screen."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Immutable screen rectangle defined by its edges.

    Edges follow the usual screen convention: ``right`` and ``bottom`` are
    exclusive, ``top`` grows downwards.
    """

    left: int = 0
    """X coordinate of the left edge."""

    top: int = 0
    """Y coordinate of the top edge."""

    right: int = 0
    """X coordinate of the right edge."""

    bottom: int = 0
    """Y coordinate of the bottom edge."""

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> "Bounds":
        """Create bounds from a top-left corner and dimensions."""
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[int, int]:
        """Get the center point.

        Returns:
            (x, y) tuple of the center, rounded down
        """
        return (self.left + self.width // 2, self.top + self.height // 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: "Bounds") -> bool:
        """Check whether ``other`` lies entirely inside these bounds."""
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "Bounds") -> bool:
        """Check whether the two rectangles share any area."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def __str__(self) -> str:
        return f"[{self.left},{self.top}][{self.right},{self.bottom}]"
