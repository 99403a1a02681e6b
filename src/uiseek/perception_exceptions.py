"""Element lookup exceptions.

Raised while resolving finders against the UI tree, including the terminal
"not found" conditions surfaced by scrolling.
"""

from typing import Any

from .base_exceptions import UiseekException


class PerceptionException(UiseekException):
    """Base exception for element lookup errors."""

    error_code = "LOOKUP_FAILED"


class ElementNotFoundException(PerceptionException):
    """Raised when a finder cannot be resolved.

    Attributes:
        finder: The finder that could not be resolved
    """

    error_code = "ELEMENT_NOT_FOUND"

    def __init__(self, finder: Any, search_scope: str | None = None, **context: Any) -> None:
        message = f"Element '{finder}' not found"
        if search_scope:
            message += f" in {search_scope}"
        super().__init__(message, finder=finder, search_scope=search_scope, **context)
        self.finder = finder


class ContainerNotFoundException(PerceptionException):
    """Raised when a scrollable container cannot be resolved.

    Not a subclass of ElementNotFoundException: a missing container is not the
    same as an item missing from an existing container.
    """

    error_code = "CONTAINER_NOT_FOUND"

    def __init__(self, container_finder: Any, **context: Any) -> None:
        super().__init__(
            f"Scroll container '{container_finder}' not found",
            container=container_finder,
            **context,
        )
        self.container_finder = container_finder


class SentinelNotFoundException(PerceptionException):
    """Raised when a container has no element usable as a sentinel."""

    error_code = "SENTINEL_NOT_FOUND"

    def __init__(self, container: Any, getter: Any, **context: Any) -> None:
        super().__init__(
            f"No sentinel found by {getter} in {container}",
            container=container,
            getter=getter,
            **context,
        )
