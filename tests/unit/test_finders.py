"""Unit tests for finders and the ``by`` facade.

Tests cover:
- Pre-order search including the root and skipping invisible subtrees
- Chained finders scoped to the outer result
- Construction errors
"""

import pytest

from uiseek.finders import ChainFinder, MatchFinder, by, chain
from uiseek.matcher_exceptions import InvalidFinderArgumentException
from uiseek.matchers import ByResourceId, Matcher
from uiseek.model.element import UiElement
from uiseek.perception_exceptions import ElementNotFoundException


class RecordingMatcher(Matcher):
    """Never matches; records every element it is shown."""

    def __init__(self) -> None:
        self.seen: list[UiElement] = []

    def matches(self, element: UiElement) -> bool:
        self.seen.append(element)
        return False

    def __str__(self) -> str:
        return "Recording"


class TestMatchFinder:
    """Test matcher-based finding."""

    def test_finds_first_in_document_order(self, tree: UiElement) -> None:
        """The first match in pre-order wins."""
        found = by.text("Bluetooth").find(tree)

        assert found.resource_id == "label"
        assert found.parent is not None and found.parent.resource_id == "row"

    def test_root_is_searched(self, tree: UiElement) -> None:
        """The root itself may match."""
        assert by.resource_id("root").find(tree) is tree

    def test_invisible_subtrees_are_skipped(self, tree: UiElement) -> None:
        """Invisible elements and everything under them are not rendered."""
        with pytest.raises(ElementNotFoundException):
            by.text("Secret").find(tree)
        with pytest.raises(ElementNotFoundException):
            by.text("Buried").find(tree)

    def test_not_found_carries_finder(self, tree: UiElement) -> None:
        """The exception names the finder that failed."""
        finder = by.text("Airplane mode")

        with pytest.raises(ElementNotFoundException) as exc_info:
            finder.find(tree)

        assert exc_info.value.finder is finder
        assert exc_info.value.error_code == "ELEMENT_NOT_FOUND"
        assert "Airplane mode" in str(exc_info.value)

    def test_deterministic(self, make_tree) -> None:
        """Identical snapshots give identical results."""
        finder = by.resource_id("switch")
        first, second = make_tree(), make_tree()

        assert finder.find(first) is finder.find(first)
        assert finder.find(first).checked == finder.find(second).checked

    def test_rejects_non_matcher(self) -> None:
        with pytest.raises(InvalidFinderArgumentException):
            MatchFinder("label")  # type: ignore[arg-type]


class TestChainFinder:
    """Test chained finders."""

    def test_inner_searched_under_outer(self, tree: UiElement) -> None:
        """The inner finder only sees the outer result's subtree."""
        footer_text = by.text("Bluetooth")
        in_list = chain(by.resource_id("list"), footer_text)

        assert in_list.find(tree).resource_id == "label"
        assert chain(by.resource_id("footer"), footer_text).find(tree).resource_id == "footer"

    def test_inner_outside_scope_is_not_found(self, tree: UiElement) -> None:
        """An element outside the outer scope does not count."""
        finder = chain(by.resource_id("list"), by.resource_id("toolbar"))

        with pytest.raises(ElementNotFoundException) as exc_info:
            finder.find(tree)

        assert exc_info.value.finder is finder

    def test_outer_failure_does_not_fall_back(self, tree: UiElement) -> None:
        """When the outer finder fails the inner one never runs."""
        inner = RecordingMatcher()
        finder = chain(by.resource_id("missing"), MatchFinder(inner))

        with pytest.raises(ElementNotFoundException) as exc_info:
            finder.find(tree)

        assert inner.seen == []
        assert exc_info.value.finder is finder
        assert isinstance(exc_info.value.__cause__, ElementNotFoundException)

    def test_inner_only_inspects_outer_scope(self, tree: UiElement) -> None:
        """Every element the inner matcher sees lies under the outer result."""
        inner = RecordingMatcher()
        container = by.resource_id("list").find(tree)

        with pytest.raises(ElementNotFoundException):
            chain(by.resource_id("list"), MatchFinder(inner)).find(tree)

        in_scope = set(map(id, container.iter_descendants()))
        assert inner.seen
        assert all(id(element) in in_scope for element in inner.seen)

    def test_three_level_chain(self, tree: UiElement) -> None:
        """Chains fold left to right."""
        row = by.with_child(by.resource_id("row"), by.text("Wi-Fi"))
        finder = chain(by.resource_id("list"), row, by.resource_id("switch"))

        assert isinstance(finder, ChainFinder)
        assert finder.find(tree).checked

    def test_single_finder_is_returned(self) -> None:
        finder = by.text("Wi-Fi")
        assert chain(finder) is finder

    def test_empty_chain(self) -> None:
        with pytest.raises(InvalidFinderArgumentException):
            chain()

    def test_rejects_non_finder(self) -> None:
        with pytest.raises(InvalidFinderArgumentException):
            ChainFinder(by.text("a"), ByResourceId("b"))  # type: ignore[arg-type]

    def test_str(self) -> None:
        finder = chain(by.resource_id("list"), by.text("Wi-Fi"))
        assert str(finder) == "Chain(By(resource_id equals 'list'), By(text equals 'Wi-Fi'))"


class TestByFacade:
    """Test the convenience constructors."""

    def test_text_variants(self, tree: UiElement) -> None:
        assert by.text_contains("etti").find(tree).resource_id == "toolbar"
        assert by.text_starts_with("Blue").find(tree).resource_id == "label"
        assert by.text_regex(r"Wi-\w+").find(tree).text == "Wi-Fi"

    def test_content_description(self, tree: UiElement) -> None:
        assert by.content_description("Navigate up").find(tree).resource_id == "toolbar"
        assert by.content_description_contains("up").find(tree).resource_id == "toolbar"

    def test_flags(self, tree: UiElement) -> None:
        assert by.scrollable().find(tree).resource_id == "list"
        assert by.checked().find(tree).resource_id == "switch"
        assert by.class_name("android.widget.Switch").find(tree).checked

    def test_boolean_combinations(self, tree: UiElement) -> None:
        unchecked_switch = by.all_of(by.resource_id("switch"), by.not_(by.checked()))
        assert not unchecked_switch.find(tree).checked

        either = by.any_of(by.text("nope"), by.resource_id("footer"))
        assert either.find(tree).resource_id == "footer"

    def test_relations(self, tree: UiElement) -> None:
        footer = by.with_parent(by.text("Bluetooth"), by.resource_id("root"))
        assert footer.find(tree).resource_id == "footer"

        in_list = by.with_ancestor(by.text("Bluetooth"), by.resource_id("list"))
        assert in_list.find(tree).resource_id == "label"

        list_with_switch = by.with_descendant(by.any_element(), by.checked())
        assert list_with_switch.find(tree) is tree

        bluetooth_switch = by.with_sibling(by.resource_id("switch"), by.text("Bluetooth"))
        assert not bluetooth_switch.find(tree).checked

    def test_combining_chain_is_rejected(self) -> None:
        """Only matcher-based finders can be combined."""
        with pytest.raises(InvalidFinderArgumentException):
            by.not_(chain(by.text("a"), by.text("b")))
