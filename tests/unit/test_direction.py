"""Unit tests for scroll directions."""

import pytest

from uiseek.scroll import (
    RTL_CONVERTER,
    STANDARD_CONVERTER,
    Axis,
    LogicalDirection,
    PhysicalDirection,
)


class TestAxis:
    def test_vertical_order(self) -> None:
        """Vertical searches look further down before going back up."""
        assert Axis.VERTICAL.physical_directions == (PhysicalDirection.DOWN, PhysicalDirection.UP)

    def test_horizontal_order(self) -> None:
        assert Axis.HORIZONTAL.physical_directions == (
            PhysicalDirection.RIGHT,
            PhysicalDirection.LEFT,
        )

    @pytest.mark.parametrize("axis", list(Axis))
    def test_directions_belong_to_axis(self, axis: Axis) -> None:
        assert all(direction.axis is axis for direction in axis.physical_directions)


class TestPhysicalDirection:
    @pytest.mark.parametrize(
        ("direction", "reverse"),
        [
            (PhysicalDirection.UP, PhysicalDirection.DOWN),
            (PhysicalDirection.DOWN, PhysicalDirection.UP),
            (PhysicalDirection.LEFT, PhysicalDirection.RIGHT),
            (PhysicalDirection.RIGHT, PhysicalDirection.LEFT),
        ],
    )
    def test_reverse(self, direction: PhysicalDirection, reverse: PhysicalDirection) -> None:
        assert direction.reverse is reverse
        assert direction.reverse.reverse is direction


class TestDirectionConverter:
    def test_standard(self) -> None:
        assert STANDARD_CONVERTER.to_logical(PhysicalDirection.DOWN) is LogicalDirection.FORWARD
        assert STANDARD_CONVERTER.to_logical(PhysicalDirection.RIGHT) is LogicalDirection.FORWARD
        assert STANDARD_CONVERTER.to_logical(PhysicalDirection.UP) is LogicalDirection.BACKWARD
        assert STANDARD_CONVERTER.to_logical(PhysicalDirection.LEFT) is LogicalDirection.BACKWARD

    def test_rtl(self) -> None:
        """Right-to-left layouts move forward to the left."""
        assert RTL_CONVERTER.to_logical(PhysicalDirection.LEFT) is LogicalDirection.FORWARD
        assert RTL_CONVERTER.to_logical(PhysicalDirection.RIGHT) is LogicalDirection.BACKWARD

    def test_to_physical(self) -> None:
        assert (
            STANDARD_CONVERTER.to_physical(LogicalDirection.BACKWARD, Axis.VERTICAL)
            is PhysicalDirection.UP
        )
        assert (
            RTL_CONVERTER.to_physical(LogicalDirection.FORWARD, Axis.HORIZONTAL)
            is PhysicalDirection.LEFT
        )
