"""MockScrollableList - in-memory scrollable list for tests and demos.

Implements both ITreeProvider and IScrollExecutor. Each snapshot renders a
root containing a title and a scrollable container whose visible children are
the items inside the current window.
"""

import logging
from collections.abc import Sequence

from ..hal.interfaces import IScrollExecutor, ITreeProvider
from ..model.element import Bounds, UiElement
from ..scroll.direction import STANDARD_CONVERTER, Axis, LogicalDirection, PhysicalDirection

logger = logging.getLogger(__name__)

ITEM_EXTENT = 100
"""Height (or width, for horizontal lists) of one rendered item in pixels."""


class MockScrollableList(ITreeProvider, IScrollExecutor):
    """Simulated list that scrolls a window over ``items``.

    Args:
        items: Text of every item, in list order
        page_size: Number of items visible at once
        position: Index of the first visible item
        step: Items moved per scroll step; defaults to ``page_size - 1``
        axis: Layout axis; steps along the other axis do nothing
        container_id: Resource id of the scrollable container
        settle_fetches: Snapshots that still show the old window after a step,
            simulating scroll animation or lazy loading
        layout_rows: Render each item as a text-less LinearLayout row holding
            a TextView label, the way most RecyclerView adapters do
        collection_info: Report each row's index in the list as
            ``collection_index``

    Attributes:
        scroll_log: Direction of every step performed, in order
        snapshot_count: Number of snapshots served
        container_present: Set to False to render a tree without the container
    """

    def __init__(
        self,
        items: Sequence[str],
        page_size: int = 5,
        position: int = 0,
        step: int | None = None,
        axis: Axis = Axis.VERTICAL,
        container_id: str = "list",
        settle_fetches: int = 0,
        layout_rows: bool = False,
        collection_info: bool = True,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.items = list(items)
        self.page_size = page_size
        self.step = step if step is not None else max(1, page_size - 1)
        self.axis = axis
        self.container_id = container_id
        self.settle_fetches = settle_fetches
        self.layout_rows = layout_rows
        self.collection_info = collection_info
        self.position = self._clamp(position)
        self.container_present = True
        self.scroll_log: list[PhysicalDirection] = []
        self.snapshot_count = 0
        self._displayed_position = self.position
        self._fetches_until_settled = 0

    @property
    def max_position(self) -> int:
        return max(0, len(self.items) - self.page_size)

    @property
    def visible_items(self) -> list[str]:
        return self.items[self._displayed_position : self._displayed_position + self.page_size]

    def _clamp(self, position: int) -> int:
        return min(max(position, 0), self.max_position)

    def get_current_snapshot(self) -> UiElement:
        self.snapshot_count += 1
        if self._fetches_until_settled > 0:
            self._fetches_until_settled -= 1
        else:
            self._displayed_position = self.position

        children: list[UiElement] = [
            UiElement(
                text="Title",
                resource_id="title",
                class_name="android.widget.TextView",
                bounds=Bounds(0, 0, 1080, ITEM_EXTENT),
            )
        ]
        if self.container_present:
            children.append(self._render_container())

        return UiElement(
            class_name="android.widget.FrameLayout",
            resource_id="root",
            bounds=Bounds(0, 0, 1080, 1920),
            children=children,
        )

    def _render_container(self) -> UiElement:
        rows = []
        for offset, text in enumerate(self.visible_items):
            start = ITEM_EXTENT * (offset + 1)
            if self.axis is Axis.VERTICAL:
                bounds = Bounds(0, start, 1080, start + ITEM_EXTENT)
            else:
                bounds = Bounds(start, ITEM_EXTENT, start + ITEM_EXTENT, 2 * ITEM_EXTENT)
            rows.append(self._render_row(text, self._displayed_position + offset, bounds))

        extent = ITEM_EXTENT * (self.page_size + 1)
        return UiElement(
            class_name="androidx.recyclerview.widget.RecyclerView",
            resource_id=self.container_id,
            scrollable=True,
            bounds=Bounds(0, ITEM_EXTENT, extent, extent),
            children=rows,
        )

    def _render_row(self, text: str, index: int, bounds: Bounds) -> UiElement:
        collection_index = index if self.collection_info else None
        if not self.layout_rows:
            return UiElement(
                text=text,
                resource_id="item",
                class_name="android.widget.TextView",
                clickable=True,
                bounds=bounds,
                collection_index=collection_index,
            )
        label = UiElement(
            text=text,
            resource_id="label",
            class_name="android.widget.TextView",
            bounds=bounds,
        )
        return UiElement(
            resource_id="row",
            class_name="android.widget.LinearLayout",
            clickable=True,
            bounds=bounds,
            collection_index=collection_index,
            children=[label],
        )

    def scroll(self, container: UiElement, direction: PhysicalDirection) -> None:
        if container.resource_id != self.container_id:
            raise ValueError(f"{container} is not the scrollable container '{self.container_id}'")

        self.scroll_log.append(direction)
        if direction.axis is not self.axis:
            logger.debug(f"MockScrollableList: ignoring {direction.name} on {self.axis.name} list")
            return

        delta = self.step
        if STANDARD_CONVERTER.to_logical(direction) is LogicalDirection.BACKWARD:
            delta = -delta

        new_position = self._clamp(self.position + delta)
        if new_position != self.position:
            self.position = new_position
            self._fetches_until_settled = self.settle_fetches
        logger.debug(f"MockScrollableList: scrolled {direction.name} to position {self.position}")

    @property
    def scroll_count(self) -> int:
        return len(self.scroll_log)
