"""Element snapshot model."""

from .bounds import Bounds
from .ui_element import Attribute, ElementIdentity, UiElement

__all__ = [
    "Attribute",
    "Bounds",
    "ElementIdentity",
    "UiElement",
]
