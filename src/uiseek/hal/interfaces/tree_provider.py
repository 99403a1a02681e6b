"""UI tree provider interface definition.

A tree provider is the bridge to the platform's accessibility or rendering
layer. uiseek only ever reads from it.
"""

from abc import ABC, abstractmethod

from ...model.element import UiElement


class ITreeProvider(ABC):
    """Interface for fetching the current UI tree.

    Implementations must return a fresh, internally consistent snapshot on
    every call and serialize their own access to the underlying platform.
    Callers never hold on to a snapshot across calls.

    Example:
        >>> provider = MockScrollableList(items=["a", "b", "c"])
        >>> root = provider.get_current_snapshot()
        >>> root.child_count
    """

    @abstractmethod
    def get_current_snapshot(self) -> UiElement:
        """Capture the current UI tree.

        Returns:
            Root element of a point-in-time snapshot
        """
        ...
