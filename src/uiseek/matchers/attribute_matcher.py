"""Attribute matchers.

Compare a single UiElement attribute against an expected value. All argument
checking happens in the constructor so a bad matcher never reaches the tree.
"""

import re
from enum import Enum, auto
from typing import Any, cast

from ..matcher_exceptions import InvalidMatcherArgumentException
from ..model.element import Attribute, UiElement
from .base import Matcher


class MatchStrategy(Enum):
    """How an attribute value is compared with the expected value."""

    EQUALS = auto()
    CONTAINS = auto()
    STARTS_WITH = auto()
    ENDS_WITH = auto()
    MATCHES = auto()
    """Full regular-expression match."""


_STRING_STRATEGIES = {
    MatchStrategy.CONTAINS,
    MatchStrategy.STARTS_WITH,
    MatchStrategy.ENDS_WITH,
    MatchStrategy.MATCHES,
}


class AttributeMatcher(Matcher):
    """Matches an element whose ``attribute`` satisfies ``strategy`` against ``expected``.

    Args:
        attribute: Attribute to read from the element
        strategy: Comparison to perform
        expected: Value to compare with; must not be None

    Raises:
        InvalidMatcherArgumentException: If ``expected`` is None, is not a
            string for a string strategy, or is an invalid regular expression
    """

    def __init__(
        self,
        attribute: Attribute,
        strategy: MatchStrategy,
        expected: Any,
    ) -> None:
        matcher_type = type(self).__name__
        if expected is None:
            raise InvalidMatcherArgumentException(matcher_type, "expected", "must not be None")
        if strategy in _STRING_STRATEGIES and not isinstance(expected, str):
            raise InvalidMatcherArgumentException(
                matcher_type,
                "expected",
                f"{strategy.name} requires a string, got {type(expected).__name__}",
            )

        self.attribute = attribute
        self.strategy = strategy
        self.expected = expected
        self._pattern: re.Pattern[str] | None = None

        if strategy is MatchStrategy.MATCHES:
            try:
                self._pattern = re.compile(expected)
            except re.error as e:
                raise InvalidMatcherArgumentException(
                    matcher_type, "expected", f"invalid regular expression: {e}"
                ) from e

    def matches(self, element: UiElement) -> bool:
        actual = element.get(self.attribute)

        if self.strategy is MatchStrategy.EQUALS:
            return bool(actual == self.expected)

        # Every remaining strategy needs a string to work on
        if not isinstance(actual, str):
            return False

        if self.strategy is MatchStrategy.CONTAINS:
            return self.expected in actual
        if self.strategy is MatchStrategy.STARTS_WITH:
            return actual.startswith(self.expected)
        if self.strategy is MatchStrategy.ENDS_WITH:
            return actual.endswith(self.expected)

        pattern = cast(re.Pattern[str], self._pattern)
        return pattern.fullmatch(actual) is not None

    def __str__(self) -> str:
        return f"{self.attribute.name.lower()} {self.strategy.name.lower()} {self.expected!r}"


class ByText(AttributeMatcher):
    def __init__(self, text: str) -> None:
        super().__init__(Attribute.TEXT, MatchStrategy.EQUALS, text)


class ByResourceId(AttributeMatcher):
    def __init__(self, resource_id: str) -> None:
        super().__init__(Attribute.RESOURCE_ID, MatchStrategy.EQUALS, resource_id)


class ByContentDescription(AttributeMatcher):
    """Matches an element whose content description equals the given value."""

    def __init__(self, content_description: str) -> None:
        super().__init__(Attribute.CONTENT_DESCRIPTION, MatchStrategy.EQUALS, content_description)


class ByClassName(AttributeMatcher):
    def __init__(self, class_name: str) -> None:
        super().__init__(Attribute.CLASS_NAME, MatchStrategy.EQUALS, class_name)
