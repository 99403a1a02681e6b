"""uiseek: locate elements in scrollable UI trees.

Builds logical element queries from matchers and finders, resolves them
against fresh snapshots of a live UI tree with bounded polling, and scrolls
containers step by step until an item that is not yet rendered shows up.

Usage:
    from uiseek import SentinelScroller, StaticSentinelStrategy, UiDriver, by

    driver = UiDriver(tree_provider, scroll_executor)
    scroller = SentinelScroller(StaticSentinelStrategy())
    item = scroller.scroll_to(driver, by.resource_id("list"), by.text("Settings"))
"""

from .config import UiseekSettings, get_settings, reset_settings
from .driver import UiDriver
from .exceptions import (
    ContainerNotFoundException,
    ElementNotFoundException,
    InvalidFinderArgumentException,
    InvalidMatcherArgumentException,
    TimeoutException,
    UiseekException,
)
from .finders import ChainFinder, Finder, MatchFinder, by, chain
from .hal import IScrollExecutor, ITreeProvider
from .matchers import AllOf, AnyOf, AttributeMatcher, Matcher, MatchStrategy, Not
from .model import Attribute, Bounds, ElementIdentity, UiElement
from .polling import EXISTS, GONE, ConditionChecker, DefaultPoller, Poller
from .scroll import (
    Axis,
    DynamicSentinelStrategy,
    LoggingScrollObserver,
    PhysicalDirection,
    ScrollObserver,
    Scroller,
    SentinelScroller,
    SentinelStrategy,
    StaticSentinelStrategy,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "UiseekSettings",
    "get_settings",
    "reset_settings",
    # Driver and collaborators
    "UiDriver",
    "ITreeProvider",
    "IScrollExecutor",
    # Model
    "Attribute",
    "Bounds",
    "ElementIdentity",
    "UiElement",
    # Matchers and finders
    "Matcher",
    "AllOf",
    "AnyOf",
    "Not",
    "AttributeMatcher",
    "MatchStrategy",
    "Finder",
    "MatchFinder",
    "ChainFinder",
    "by",
    "chain",
    # Polling
    "ConditionChecker",
    "EXISTS",
    "GONE",
    "Poller",
    "DefaultPoller",
    # Scrolling
    "Axis",
    "PhysicalDirection",
    "Scroller",
    "SentinelScroller",
    "SentinelStrategy",
    "StaticSentinelStrategy",
    "DynamicSentinelStrategy",
    "ScrollObserver",
    "LoggingScrollObserver",
    # Exceptions
    "UiseekException",
    "ElementNotFoundException",
    "ContainerNotFoundException",
    "TimeoutException",
    "InvalidMatcherArgumentException",
    "InvalidFinderArgumentException",
]
