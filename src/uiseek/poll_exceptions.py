"""Polling exceptions.

TimeoutException is the recoverable condition that drives the scroll loop;
UnsatisfiedConditionException is internal to a single poll attempt.
"""

from typing import Any

from .base_exceptions import UiseekException


class PollException(UiseekException):
    """Base exception for polling errors."""

    error_code = "POLL_FAILED"


class TimeoutException(PollException):
    """Raised when polling for a finder does not succeed in time.

    Attributes:
        finder: The finder that was being polled for
        timeout_millis: The polling budget that elapsed
    """

    error_code = "POLL_TIMEOUT"

    def __init__(self, finder: Any, timeout_millis: int, checker: Any = None, **context: Any) -> None:
        message = f"Timed out after {timeout_millis}ms waiting for '{finder}'"
        if checker is not None:
            message += f" to satisfy {checker}"
        super().__init__(
            message,
            finder=finder,
            timeout_millis=timeout_millis,
            checker=checker,
            **context,
        )
        self.finder = finder
        self.timeout_millis = timeout_millis


class UnsatisfiedConditionException(PollException):
    """Raised by a condition checker when its condition does not hold yet."""

    error_code = "CONDITION_UNSATISFIED"

    def __init__(self, checker: Any, finder: Any, **context: Any) -> None:
        super().__init__(f"{checker} not satisfied for '{finder}'", checker=checker, finder=finder, **context)
        self.finder = finder
