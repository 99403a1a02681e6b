"""Element matchers."""

from .attribute_matcher import (
    AttributeMatcher,
    ByClassName,
    ByContentDescription,
    ByResourceId,
    ByText,
    MatchStrategy,
)
from .base import AllOf, AnyElement, AnyOf, Matcher, Not, all_of, any_of, not_
from .relation_matchers import WithAncestor, WithChild, WithDescendant, WithParent, WithSibling

__all__ = [
    "Matcher",
    "AllOf",
    "AnyOf",
    "Not",
    "AnyElement",
    "all_of",
    "any_of",
    "not_",
    "AttributeMatcher",
    "MatchStrategy",
    "ByText",
    "ByResourceId",
    "ByContentDescription",
    "ByClassName",
    "WithParent",
    "WithAncestor",
    "WithChild",
    "WithDescendant",
    "WithSibling",
]
