"""Interfaces to the external collaborators uiseek drives."""

from .scroll_executor import IScrollExecutor
from .tree_provider import ITreeProvider

__all__ = [
    "ITreeProvider",
    "IScrollExecutor",
]
