"""Unit tests for sentinel strategies.

Tests cover:
- Detecting the end of content by comparing sentinels
- Missing containers reported apart from end of content
- Dynamic strategies waiting for lazily updated content
"""

import pytest

from uiseek.finders import by
from uiseek.matchers import ByText
from uiseek.mock import MockScrollableList
from uiseek.model.element import ElementIdentity, UiElement
from uiseek.perception_exceptions import (
    ContainerNotFoundException,
    ElementNotFoundException,
    SentinelNotFoundException,
)
from uiseek.scroll import (
    Axis,
    DynamicSentinelStrategy,
    FirstChildGetter,
    LastChildGetter,
    PhysicalDirection,
    StaticSentinelStrategy,
)

CONTAINER = by.resource_id("list")
DOWN, UP = PhysicalDirection.DOWN, PhysicalDirection.UP
LEFT, RIGHT = PhysicalDirection.LEFT, PhysicalDirection.RIGHT


class TestSentinelGetters:
    """Test sentinel selection."""

    @pytest.fixture
    def container(self) -> UiElement:
        return UiElement(
            resource_id="list",
            children=[
                UiElement(text="header"),
                UiElement(text="a"),
                UiElement(text="b"),
                UiElement(text="gone", visible=False),
            ],
        )

    def test_first_and_last_visible_child(self, container: UiElement) -> None:
        assert FirstChildGetter().get(container).text == "header"
        assert LastChildGetter().get(container).text == "b"

    def test_matcher_filters_candidates(self, container: UiElement) -> None:
        getter = FirstChildGetter(~ByText("header"))
        assert getter.get(container).text == "a"

    def test_no_candidates(self) -> None:
        with pytest.raises(SentinelNotFoundException):
            LastChildGetter().get(UiElement(resource_id="list"))


class TestStaticSentinelStrategy:
    """Test before/after sentinel comparison."""

    def test_scrolls_until_end(self, make_list, make_driver) -> None:
        """Steps report progress until the last item stops changing."""
        items = make_list(10, page_size=5)
        driver = make_driver(items)
        strategy = StaticSentinelStrategy()

        assert strategy.scroll(driver, CONTAINER, DOWN) is True
        assert items.position == 4
        assert strategy.scroll(driver, CONTAINER, DOWN) is True
        assert items.position == 5
        assert strategy.scroll(driver, CONTAINER, DOWN) is False
        assert items.scroll_count == 3

    def test_at_top_cannot_scroll_up(self, make_list, make_driver) -> None:
        items = make_list(10, page_size=5)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, UP) is False
        assert items.scroll_log == [UP]

    def test_back_up_from_bottom(self, make_list, make_driver) -> None:
        items = make_list(10, page_size=5, position=5)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, UP) is True
        assert items.position == 1

    def test_horizontal(self, make_list, make_driver) -> None:
        items = make_list(6, page_size=3, axis=Axis.HORIZONTAL)
        driver = make_driver(items)
        strategy = StaticSentinelStrategy()

        assert strategy.scroll(driver, CONTAINER, RIGHT) is True
        assert strategy.scroll(driver, CONTAINER, RIGHT) is True
        assert strategy.scroll(driver, CONTAINER, RIGHT) is False
        assert strategy.scroll(driver, CONTAINER, LEFT) is True

    def test_step_across_the_axis_has_no_effect(self, make_list, make_driver) -> None:
        items = make_list(10, page_size=5)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, RIGHT) is False
        assert items.position == 0

    def test_missing_container_is_an_error(self, make_list, make_driver) -> None:
        """A missing container is not mistaken for the end of content."""
        items = make_list(10)
        items.container_present = False
        driver = make_driver(items)

        with pytest.raises(ContainerNotFoundException) as exc_info:
            StaticSentinelStrategy().scroll(driver, CONTAINER, DOWN)

        assert not isinstance(exc_info.value, ElementNotFoundException)
        assert exc_info.value.container_finder is CONTAINER
        assert items.scroll_count == 0

    def test_empty_container(self, make_list, make_driver) -> None:
        """An empty container has nothing to scroll through."""
        items = make_list(0)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, DOWN) is False
        assert items.scroll_count == 0

    def test_fooled_by_slow_content(self, make_list, make_driver) -> None:
        """Content that updates after the step looks like the end."""
        items = make_list(10, page_size=5, settle_fetches=1)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, DOWN) is False
        assert items.position == 4

    def test_layout_rows(self, make_list, make_driver) -> None:
        """Text-less rows landing in the same slot still count as new content."""
        items = make_list(20, page_size=4, step=4, layout_rows=True, collection_info=False)
        driver = make_driver(items)
        strategy = StaticSentinelStrategy()

        results = [strategy.scroll(driver, CONTAINER, DOWN) for _ in range(5)]

        assert results == [True, True, True, True, False]
        assert items.position == 16

    def test_repeated_row_text(self, make_driver) -> None:
        """Rows with identical text are told apart by their collection index."""
        items = MockScrollableList(["row"] * 12 + ["target"], page_size=3, step=2)
        driver = make_driver(items)
        strategy = StaticSentinelStrategy()

        results = [strategy.scroll(driver, CONTAINER, DOWN) for _ in range(6)]

        assert results == [True] * 5 + [False]

    def test_identical_rows_without_collection_index(self, make_driver) -> None:
        """Without an index, identical rows in the same slot look unchanged."""
        items = MockScrollableList(["row"] * 12, page_size=3, step=2, collection_info=False)
        driver = make_driver(items)

        assert StaticSentinelStrategy().scroll(driver, CONTAINER, DOWN) is False
        assert items.position == 2


class TestDynamicSentinelStrategy:
    """Test waiting for the sentinel to change."""

    def test_waits_for_slow_content(self, make_list, make_driver, clock) -> None:
        items = make_list(10, page_size=5, settle_fetches=1)
        driver = make_driver(items)
        strategy = DynamicSentinelStrategy(change_timeout_millis=500)

        assert strategy.scroll(driver, CONTAINER, DOWN) is True
        assert strategy.last_sentinel is not None
        assert strategy.last_sentinel.text == "item 8"
        assert clock.now == pytest.approx(0.1)

    def test_end_of_content(self, make_list, make_driver, clock) -> None:
        """No change within the budget means the end was reached."""
        items = make_list(5, page_size=5)
        driver = make_driver(items)
        strategy = DynamicSentinelStrategy(change_timeout_millis=500)
        last_row = driver.find(by.text("item 4"))

        assert strategy.scroll(driver, CONTAINER, DOWN) is False
        assert strategy.last_sentinel == ElementIdentity.of(last_row)
        assert clock.now == pytest.approx(0.5)

    def test_missing_container_is_an_error(self, make_list, make_driver) -> None:
        items = make_list(10)
        items.container_present = False
        driver = make_driver(items)

        with pytest.raises(ContainerNotFoundException):
            DynamicSentinelStrategy(change_timeout_millis=500).scroll(driver, CONTAINER, DOWN)

    def test_layout_rows(self, make_list, make_driver) -> None:
        items = make_list(20, page_size=4, step=4, layout_rows=True, collection_info=False)
        driver = make_driver(items)
        strategy = DynamicSentinelStrategy(change_timeout_millis=500)

        assert strategy.last_sentinel is None
        assert strategy.scroll(driver, CONTAINER, DOWN) is True
        assert strategy.last_sentinel.text is None
        assert strategy.last_sentinel.content == (("item 7", None),)

    def test_last_sentinel_follows_direction(self, make_list, make_driver) -> None:
        """Forward steps record the last row, backward steps the first."""
        items = make_list(10, page_size=5)
        driver = make_driver(items)
        strategy = DynamicSentinelStrategy(change_timeout_millis=500)

        strategy.scroll(driver, CONTAINER, DOWN)
        after_down = strategy.last_sentinel
        strategy.scroll(driver, CONTAINER, UP)

        assert after_down.text == "item 8"
        assert after_down.collection_index == 8
        assert strategy.last_sentinel.text == "item 0"

    def test_change_timeout_from_settings(self) -> None:
        assert DynamicSentinelStrategy().change_timeout_millis == 0

    def test_negative_change_timeout(self) -> None:
        with pytest.raises(ValueError):
            DynamicSentinelStrategy(change_timeout_millis=-1)
