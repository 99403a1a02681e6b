"""Hardware abstraction layer: tree provider and scroll executor interfaces."""

from .interfaces import IScrollExecutor, ITreeProvider

__all__ = [
    "ITreeProvider",
    "IScrollExecutor",
]
