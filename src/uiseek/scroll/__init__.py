"""Scroll-search: directions, sentinel strategies and scrollers."""

from .direction import (
    RTL_CONVERTER,
    STANDARD_CONVERTER,
    Axis,
    DirectionConverter,
    LogicalDirection,
    PhysicalDirection,
)
from .scroll_observer import LoggingScrollObserver, ScrollObserver
from .scroller import Scroller, SentinelScroller
from .sentinel_strategy import (
    AbstractSentinelStrategy,
    DynamicSentinelStrategy,
    FirstChildGetter,
    LastChildGetter,
    SentinelChangedChecker,
    SentinelGetter,
    SentinelStrategy,
    StaticSentinelStrategy,
)

__all__ = [
    "Axis",
    "PhysicalDirection",
    "LogicalDirection",
    "DirectionConverter",
    "STANDARD_CONVERTER",
    "RTL_CONVERTER",
    "ScrollObserver",
    "LoggingScrollObserver",
    "Scroller",
    "SentinelScroller",
    "SentinelStrategy",
    "AbstractSentinelStrategy",
    "StaticSentinelStrategy",
    "DynamicSentinelStrategy",
    "SentinelChangedChecker",
    "SentinelGetter",
    "FirstChildGetter",
    "LastChildGetter",
]
