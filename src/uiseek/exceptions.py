"""Exception hierarchy for uiseek.

This module re-exports all exceptions from domain-specific modules
for convenience.
"""

from .base_exceptions import UiseekException
from .matcher_exceptions import (
    InvalidFinderArgumentException,
    InvalidMatcherArgumentException,
    MatcherException,
)
from .perception_exceptions import (
    ContainerNotFoundException,
    ElementNotFoundException,
    PerceptionException,
    SentinelNotFoundException,
)
from .poll_exceptions import PollException, TimeoutException, UnsatisfiedConditionException

__all__ = [
    "UiseekException",
    "MatcherException",
    "InvalidMatcherArgumentException",
    "InvalidFinderArgumentException",
    "PerceptionException",
    "ElementNotFoundException",
    "ContainerNotFoundException",
    "SentinelNotFoundException",
    "PollException",
    "TimeoutException",
    "UnsatisfiedConditionException",
]
