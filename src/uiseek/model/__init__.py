"""Data model for uiseek."""

from .element import Attribute, Bounds, ElementIdentity, UiElement

__all__ = [
    "Attribute",
    "Bounds",
    "ElementIdentity",
    "UiElement",
]
