"""Relation matchers.

Match an element by what surrounds it in the snapshot: its parent, an
ancestor, a child, a descendant or a sibling. They navigate only through the
snapshot they are given.
"""

from ..model.element import UiElement
from .base import Matcher, _require_matchers


class _RelationMatcher(Matcher):
    relation = "related"

    def __init__(self, matcher: Matcher) -> None:
        (self.matcher,) = _require_matchers(type(self).__name__, (matcher,))

    def __str__(self) -> str:
        return f"{self.relation}({self.matcher})"


class WithParent(_RelationMatcher):
    relation = "with_parent"

    def matches(self, element: UiElement) -> bool:
        return element.parent is not None and self.matcher.matches(element.parent)


class WithAncestor(_RelationMatcher):
    relation = "with_ancestor"

    def matches(self, element: UiElement) -> bool:
        ancestor = element.parent
        while ancestor is not None:
            if self.matcher.matches(ancestor):
                return True
            ancestor = ancestor.parent
        return False


class WithChild(_RelationMatcher):
    relation = "with_child"

    def matches(self, element: UiElement) -> bool:
        return any(self.matcher.matches(child) for child in element.children)


class WithDescendant(_RelationMatcher):
    relation = "with_descendant"

    def matches(self, element: UiElement) -> bool:
        return any(
            self.matcher.matches(descendant)
            for descendant in element.iter_descendants(include_self=False)
        )


class WithSibling(_RelationMatcher):
    """Matches when another child of the same parent satisfies the matcher."""

    relation = "with_sibling"

    def matches(self, element: UiElement) -> bool:
        if element.parent is None:
            return False
        return any(
            self.matcher.matches(sibling)
            for sibling in element.parent.children
            if sibling is not element
        )
