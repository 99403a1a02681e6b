"""Polling: condition checkers and the poller."""

from .condition_checker import EXISTS, GONE, ConditionChecker
from .poller import DefaultPoller, Poller, PollingListener, TimeoutListener

__all__ = [
    "ConditionChecker",
    "EXISTS",
    "GONE",
    "Poller",
    "DefaultPoller",
    "PollingListener",
    "TimeoutListener",
]
