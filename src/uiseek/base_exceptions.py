"""Root of the uiseek exception hierarchy.

Every error carries a stable ``error_code`` naming its kind and a ``context``
dict describing the query that failed. Finders, matchers and checkers in the
context are stored by their string form, so a context can be logged or
serialised without holding on to the UI tree.
"""

from typing import Any, ClassVar


def describe(value: Any) -> Any:
    """Return ``value`` in a form fit for an error context.

    Scalars pass through unchanged; query objects become their string form.
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class UiseekException(Exception):
    """Base exception for all uiseek errors.

    Subclasses override ``error_code``. Keyword arguments become ``context``.

    Attributes:
        message: Human-readable error message
        context: Details of the failed query, keyed by name
    """

    error_code: ClassVar[str] = "UISEEK_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = {key: describe(value) for key, value in context.items()}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"
