"""Finders - resolve a query against a UI tree snapshot.

A Finder never caches: every ``find`` call walks the tree it is handed, so the
poller can re-run the same finder against each fresh snapshot.
"""

from abc import ABC, abstractmethod

from ..matcher_exceptions import InvalidFinderArgumentException
from ..matchers import Matcher
from ..model.element import UiElement
from ..perception_exceptions import ElementNotFoundException


class Finder(ABC):
    """Query resolving to at most one element of a tree.

    Finders must be deterministic: the same snapshot always yields the same
    element (or the same failure).
    """

    @abstractmethod
    def find(self, root: UiElement) -> UiElement:
        """Resolve this finder within the subtree rooted at ``root``.

        Args:
            root: Root of the subtree to search

        Returns:
            The matching element

        Raises:
            ElementNotFoundException: If nothing in scope matches
        """
        ...

    def __repr__(self) -> str:
        return str(self)


class MatchFinder(Finder):
    """Returns the first visible element matching a matcher.

    The search is a pre-order walk that starts at ``root`` itself. Invisible
    elements are not rendered, so neither they nor their subtrees are
    searched.
    """

    def __init__(self, matcher: Matcher) -> None:
        if not isinstance(matcher, Matcher):
            raise InvalidFinderArgumentException(
                "MatchFinder", f"expected a Matcher, got {type(matcher).__name__}"
            )
        self.matcher = matcher

    def find(self, root: UiElement) -> UiElement:
        for element in root.iter_descendants(visible_only=True):
            if self.matcher.matches(element):
                return element
        raise ElementNotFoundException(self)

    def __str__(self) -> str:
        return f"By({self.matcher})"


class ChainFinder(Finder):
    """Finds ``inner`` within the subtree of the element found by ``outer``.

    If ``outer`` cannot be resolved the chain fails as a whole; it never
    falls back to searching the entire tree.
    """

    def __init__(self, outer: Finder, inner: Finder) -> None:
        for name, finder in (("outer", outer), ("inner", inner)):
            if not isinstance(finder, Finder):
                raise InvalidFinderArgumentException(
                    "ChainFinder", f"{name} must be a Finder, got {type(finder).__name__}"
                )
        self.outer = outer
        self.inner = inner

    def find(self, root: UiElement) -> UiElement:
        try:
            scope = self.outer.find(root)
        except ElementNotFoundException as e:
            raise ElementNotFoundException(self, search_scope=f"unresolved scope {self.outer}") from e

        try:
            return self.inner.find(scope)
        except ElementNotFoundException as e:
            raise ElementNotFoundException(self) from e

    def __str__(self) -> str:
        return f"Chain({self.outer}, {self.inner})"


def chain(*finders: Finder) -> Finder:
    """Chain finders left to right; each one searches under the previous result.

    Args:
        *finders: Finders from outermost to innermost

    Returns:
        The finder itself when only one is given, otherwise a ChainFinder

    Raises:
        InvalidFinderArgumentException: If no finder is given
    """
    if not finders:
        raise InvalidFinderArgumentException("ChainFinder", "at least one finder is required")

    result = finders[0]
    if not isinstance(result, Finder):
        raise InvalidFinderArgumentException(
            "ChainFinder", f"expected a Finder, got {type(result).__name__}"
        )
    for finder in finders[1:]:
        result = ChainFinder(result, finder)
    return result
