"""UiElement - immutable snapshot of one node in the UI tree.

Snapshots are produced by an ITreeProvider. A whole tree is built bottom-up:
children are created first and handed to their parent, which links each child
back to itself. After that the snapshot is never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .bounds import Bounds


class Attribute(Enum):
    """Queryable attributes of a UiElement.

    The value of each member is the name of the UiElement field it reads.
    """

    TEXT = "text"
    RESOURCE_ID = "resource_id"
    CONTENT_DESCRIPTION = "content_description"
    CLASS_NAME = "class_name"
    PACKAGE_NAME = "package_name"
    BOUNDS = "bounds"
    VISIBLE = "visible"
    ENABLED = "enabled"
    CLICKABLE = "clickable"
    LONG_CLICKABLE = "long_clickable"
    CHECKABLE = "checkable"
    CHECKED = "checked"
    FOCUSABLE = "focusable"
    FOCUSED = "focused"
    SCROLLABLE = "scrollable"
    SELECTED = "selected"
    PASSWORD = "password"
    COLLECTION_INDEX = "collection_index"


@dataclass(frozen=True, eq=False)
class UiElement:
    """Read-only view of one UI node at fetch time.

    Identity, not value, equality is used: two snapshots of the same on-screen
    node taken at different times are different objects. Use ElementIdentity to
    compare them.
    """

    text: str | None = None
    resource_id: str | None = None
    content_description: str | None = None
    class_name: str | None = None
    package_name: str | None = None
    bounds: Bounds = field(default_factory=Bounds)
    visible: bool = True
    enabled: bool = True
    clickable: bool = False
    long_clickable: bool = False
    checkable: bool = False
    checked: bool = False
    focusable: bool = False
    focused: bool = False
    scrollable: bool = False
    selected: bool = False
    password: bool = False
    # Row or column index the platform reports for items of a collection
    collection_index: int | None = None
    children: tuple[UiElement, ...] = ()
    parent: UiElement | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        # Tuple coercion lets providers pass lists
        object.__setattr__(self, "children", tuple(self.children))
        for child in self.children:
            if child.parent is not None:
                raise ValueError(f"{child} already belongs to {child.parent}")
            object.__setattr__(child, "parent", self)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def get_child(self, index: int) -> UiElement | None:
        """Get the child at ``index``, or None if out of range."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def visible_children(self) -> list[UiElement]:
        return [child for child in self.children if child.visible]

    def get(self, attribute: Attribute) -> Any:
        """Read an attribute by its enum name."""
        return getattr(self, attribute.value)

    def iter_descendants(self, include_self: bool = True, visible_only: bool = False) -> Iterator[UiElement]:
        """Walk the subtree in pre-order without recursion.

        Args:
            include_self: Yield this element first
            visible_only: Skip invisible elements together with their subtrees

        Yields:
            Elements in document order
        """
        stack: list[UiElement] = [self]
        while stack:
            element = stack.pop()
            if visible_only and not element.visible:
                continue
            if element is not self or include_self:
                yield element
            stack.extend(reversed(element.children))

    def __str__(self) -> str:
        parts = [self.class_name or "UiElement"]
        if self.resource_id:
            parts.append(f"id={self.resource_id}")
        if self.text:
            parts.append(f"text={self.text!r}")
        if self.content_description:
            parts.append(f"desc={self.content_description!r}")
        parts.append(str(self.bounds))
        return "{" + " ".join(parts) + "}"


@dataclass(frozen=True)
class ElementIdentity:
    """Stable identity of an element, comparable across tree fetches.

    List rows are often layouts without text of their own, and after a scroll
    step the next row sits in exactly the same bounds. Besides the element's
    own attributes, the identity holds the collection index reported by the
    platform and the text and content description of every visible
    descendant, so two different rows in the same slot compare unequal.

    Rows that render identical content and report no collection index remain
    indistinguishable.
    """

    class_name: str | None
    resource_id: str | None
    text: str | None
    content_description: str | None
    bounds: Bounds
    collection_index: int | None = None
    content: tuple[tuple[str | None, str | None], ...] = ()

    @classmethod
    def of(cls, element: UiElement) -> ElementIdentity:
        return cls(
            class_name=element.class_name,
            resource_id=element.resource_id,
            text=element.text,
            content_description=element.content_description,
            bounds=element.bounds,
            collection_index=element.collection_index,
            content=tuple(
                (descendant.text, descendant.content_description)
                for descendant in element.iter_descendants(include_self=False, visible_only=True)
                if descendant.text or descendant.content_description
            ),
        )
