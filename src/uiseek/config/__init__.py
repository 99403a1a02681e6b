"""Configuration package.

Usage:
    from uiseek.config import get_settings

    settings = get_settings()
    scroller = SentinelScroller.from_settings(strategy, settings)
"""

from .settings import TestSettings, UiseekSettings, get_settings, reset_settings

__all__ = [
    "UiseekSettings",
    "TestSettings",
    "get_settings",
    "reset_settings",
]
