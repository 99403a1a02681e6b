"""Query construction exceptions.

Raised when a matcher or finder is built with invalid arguments. These are
contract violations detected at construction time, never at match time.
"""

from typing import Any

from .base_exceptions import UiseekException


class MatcherException(UiseekException):
    """Base exception for matcher and finder construction errors."""

    error_code = "INVALID_QUERY"


class InvalidMatcherArgumentException(MatcherException):
    """Raised when a matcher is constructed with an invalid argument."""

    error_code = "INVALID_MATCHER_ARGUMENT"

    def __init__(self, matcher_type: str, parameter: str, reason: str, **context: Any) -> None:
        super().__init__(
            f"Invalid argument '{parameter}' for {matcher_type}: {reason}",
            matcher_type=matcher_type,
            parameter=parameter,
            reason=reason,
            **context,
        )


class InvalidFinderArgumentException(MatcherException):
    """Raised when a finder is constructed with an invalid argument."""

    error_code = "INVALID_FINDER_ARGUMENT"

    def __init__(self, finder_type: str, reason: str, **context: Any) -> None:
        super().__init__(
            f"Cannot build {finder_type}: {reason}",
            finder_type=finder_type,
            reason=reason,
            **context,
        )
