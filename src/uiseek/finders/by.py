"""Convenience constructors for finders.

Usage:
    from uiseek.finders import by

    container = by.resource_id("com.example:id/list")
    item = by.text("Settings")
    absolute = by.chain(container, item)
"""

from ..matcher_exceptions import InvalidFinderArgumentException
from ..matchers import (
    AllOf,
    AnyElement,
    AnyOf,
    AttributeMatcher,
    ByClassName,
    ByContentDescription,
    ByResourceId,
    ByText,
    Matcher,
    MatchStrategy,
    Not,
    WithAncestor,
    WithChild,
    WithDescendant,
    WithParent,
    WithSibling,
)
from ..model.element import Attribute
from .finder import Finder, MatchFinder, chain

__all__ = [
    "matcher",
    "any_element",
    "text",
    "text_contains",
    "text_starts_with",
    "text_regex",
    "resource_id",
    "content_description",
    "content_description_contains",
    "class_name",
    "checked",
    "selected",
    "scrollable",
    "clickable",
    "enabled",
    "focused",
    "all_of",
    "any_of",
    "not_",
    "with_parent",
    "with_ancestor",
    "with_child",
    "with_descendant",
    "with_sibling",
    "chain",
]


def _matcher_of(finder: Finder) -> Matcher:
    """Unwrap a MatchFinder so finders can be combined like matchers."""
    if isinstance(finder, MatchFinder):
        return finder.matcher
    raise InvalidFinderArgumentException(
        "MatchFinder", f"only matcher-based finders can be combined, got {finder}"
    )


def matcher(m: Matcher) -> MatchFinder:
    return MatchFinder(m)


def any_element() -> MatchFinder:
    return MatchFinder(AnyElement())


def text(value: str) -> MatchFinder:
    return MatchFinder(ByText(value))


def text_contains(value: str) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.TEXT, MatchStrategy.CONTAINS, value))


def text_starts_with(value: str) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.TEXT, MatchStrategy.STARTS_WITH, value))


def text_regex(pattern: str) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.TEXT, MatchStrategy.MATCHES, pattern))


def resource_id(value: str) -> MatchFinder:
    return MatchFinder(ByResourceId(value))


def content_description(value: str) -> MatchFinder:
    return MatchFinder(ByContentDescription(value))


def content_description_contains(value: str) -> MatchFinder:
    return MatchFinder(
        AttributeMatcher(Attribute.CONTENT_DESCRIPTION, MatchStrategy.CONTAINS, value)
    )


def class_name(value: str) -> MatchFinder:
    return MatchFinder(ByClassName(value))


def checked(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.CHECKED, MatchStrategy.EQUALS, value))


def selected(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.SELECTED, MatchStrategy.EQUALS, value))


def scrollable(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.SCROLLABLE, MatchStrategy.EQUALS, value))


def clickable(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.CLICKABLE, MatchStrategy.EQUALS, value))


def enabled(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.ENABLED, MatchStrategy.EQUALS, value))


def focused(value: bool = True) -> MatchFinder:
    return MatchFinder(AttributeMatcher(Attribute.FOCUSED, MatchStrategy.EQUALS, value))


def all_of(*finders: Finder) -> MatchFinder:
    """Element matching every given matcher-based finder."""
    return MatchFinder(AllOf(*(_matcher_of(f) for f in finders)))


def any_of(*finders: Finder) -> MatchFinder:
    return MatchFinder(AnyOf(*(_matcher_of(f) for f in finders)))


def not_(finder: Finder) -> MatchFinder:
    return MatchFinder(Not(_matcher_of(finder)))


def with_parent(finder: Finder, parent: Finder) -> MatchFinder:
    return MatchFinder(AllOf(_matcher_of(finder), WithParent(_matcher_of(parent))))


def with_ancestor(finder: Finder, ancestor: Finder) -> MatchFinder:
    return MatchFinder(AllOf(_matcher_of(finder), WithAncestor(_matcher_of(ancestor))))


def with_child(finder: Finder, child: Finder) -> MatchFinder:
    return MatchFinder(AllOf(_matcher_of(finder), WithChild(_matcher_of(child))))


def with_descendant(finder: Finder, descendant: Finder) -> MatchFinder:
    return MatchFinder(AllOf(_matcher_of(finder), WithDescendant(_matcher_of(descendant))))


def with_sibling(finder: Finder, sibling: Finder) -> MatchFinder:
    return MatchFinder(AllOf(_matcher_of(finder), WithSibling(_matcher_of(sibling))))
