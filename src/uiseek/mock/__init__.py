"""Test doubles for the external collaborators of uiseek."""

from .mock_clock import MockClock
from .mock_scrollable_list import MockScrollableList

__all__ = [
    "MockClock",
    "MockScrollableList",
]
