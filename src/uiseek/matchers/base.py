"""Matcher interface and boolean combinators.

A Matcher is a pure predicate over a single UiElement snapshot. Composite
matchers short-circuit and only ever look at the element they are given.
"""

from abc import ABC, abstractmethod

from ..matcher_exceptions import InvalidMatcherArgumentException
from ..model.element import UiElement


class Matcher(ABC):
    """Predicate over one element snapshot.

    Implementations must be total and free of side effects so that a finder
    can evaluate them repeatedly against fresh snapshots.

    Example:
        >>> matcher = ByText("OK") & ~ByClassName("android.widget.EditText")
        >>> matcher.matches(element)
    """

    @abstractmethod
    def matches(self, element: UiElement) -> bool:
        """Check whether ``element`` satisfies this matcher."""
        ...

    def __and__(self, other: "Matcher") -> "Matcher":
        return AllOf(self, other)

    def __or__(self, other: "Matcher") -> "Matcher":
        return AnyOf(self, other)

    def __invert__(self) -> "Matcher":
        return Not(self)

    def __repr__(self) -> str:
        return str(self)


def _require_matchers(owner: str, matchers: tuple[Matcher, ...]) -> tuple[Matcher, ...]:
    if not matchers:
        raise InvalidMatcherArgumentException(owner, "matchers", "at least one matcher is required")
    for matcher in matchers:
        if not isinstance(matcher, Matcher):
            raise InvalidMatcherArgumentException(
                owner, "matchers", f"expected a Matcher, got {type(matcher).__name__}"
            )
    return matchers


class AllOf(Matcher):
    """Matches when every wrapped matcher matches."""

    def __init__(self, *matchers: Matcher) -> None:
        self.matchers = _require_matchers("AllOf", matchers)

    def matches(self, element: UiElement) -> bool:
        return all(matcher.matches(element) for matcher in self.matchers)

    def __str__(self) -> str:
        return "AllOf(" + ", ".join(str(m) for m in self.matchers) + ")"


class AnyOf(Matcher):
    """Matches when at least one wrapped matcher matches."""

    def __init__(self, *matchers: Matcher) -> None:
        self.matchers = _require_matchers("AnyOf", matchers)

    def matches(self, element: UiElement) -> bool:
        return any(matcher.matches(element) for matcher in self.matchers)

    def __str__(self) -> str:
        return "AnyOf(" + ", ".join(str(m) for m in self.matchers) + ")"


class Not(Matcher):
    """Negates a matcher."""

    def __init__(self, matcher: Matcher) -> None:
        (self.matcher,) = _require_matchers("Not", (matcher,))

    def matches(self, element: UiElement) -> bool:
        return not self.matcher.matches(element)

    def __str__(self) -> str:
        return f"Not({self.matcher})"


class AnyElement(Matcher):
    """Matches every element."""

    def matches(self, element: UiElement) -> bool:
        return True

    def __str__(self) -> str:
        return "AnyElement"


def all_of(*matchers: Matcher) -> Matcher:
    return AllOf(*matchers)


def any_of(*matchers: Matcher) -> Matcher:
    return AnyOf(*matchers)


def not_(matcher: Matcher) -> Matcher:
    return Not(matcher)
