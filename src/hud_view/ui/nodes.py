"""Retained-mode visual nodes the HUD is composed from."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from hud_view.core.exceptions import InvalidDimensionsError, LayoutError
from hud_view.core.types import Bounds, ScrollBarPolicy

if TYPE_CHECKING:
    from numpy.typing import NDArray


@runtime_checkable
class VisualNode(Protocol):
    """Capability any target UI layer must offer to host the HUD."""

    def set_text(self, text: str) -> None: ...

    def add_child(self, node: Node) -> None: ...

    def remove_child(self, node: Node) -> None: ...

    def set_bounds(self, x: float, y: float, width: float, height: float) -> None: ...


class Node:
    """Base node of the tree: children, parent link, bounds and style."""

    def __init__(self, style_class: str | None = None, node_id: str | None = None) -> None:
        self.style_class = style_class
        self.node_id = node_id
        self.bounds = Bounds()
        self._children: list[Node] = []
        self._parent: Node | None = None

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Node | None:
        return self._parent

    def has_child(self, node: Node) -> bool:
        """Identity membership test (nodes are never compared by value)."""
        return any(child is node for child in self._children)

    def add_child(self, node: Node) -> None:
        """Append a node to the end of this node's children.

        Raises:
            LayoutError: If the node is already attached somewhere or is this node
        """
        if node is self:
            raise LayoutError("A node cannot be its own child")
        if node._parent is not None:
            raise LayoutError(f"{type(node).__name__} is already attached to a parent")
        self._children.append(node)
        node._parent = self

    def remove_child(self, node: Node) -> None:
        """Detach a child node.

        Raises:
            LayoutError: If the node is not a child of this node
        """
        for i, child in enumerate(self._children):
            if child is node:
                del self._children[i]
                node._parent = None
                return
        raise LayoutError(f"{type(node).__name__} is not a child of {type(self).__name__}")

    def set_bounds(self, x: float, y: float, width: float, height: float) -> None:
        """Pin the position and size of this node.

        Raises:
            InvalidDimensionsError: If width or height is negative
        """
        if width < 0 or height < 0:
            raise InvalidDimensionsError(f"Invalid node size {width}x{height}")
        self.bounds = Bounds(x, y, width, height)

    def set_text(self, text: str) -> None:
        raise LayoutError(f"{type(self).__name__} does not display text")

    def walk(self) -> Iterator[Node]:
        """Depth-first iteration over this node and its descendants."""
        yield self
        for child in self._children:
            yield from child.walk()

    def find(self, node_id: str) -> Node | None:
        """First node in the subtree with the given id."""
        for node in self.walk():
            if node.node_id == node_id:
                return node
        return None


class Label(Node):
    """Single line of text."""

    def __init__(
        self,
        text: str = "",
        style_class: str | None = None,
        node_id: str | None = None,
    ) -> None:
        super().__init__(style_class, node_id)
        self.text = text

    def set_text(self, text: str) -> None:
        self.text = text

    def add_child(self, node: Node) -> None:
        raise LayoutError("Label cannot have children")

    def __repr__(self) -> str:
        return f"Label({self.text!r})"


class VBox(Node):
    """Stacks its children vertically with fixed spacing."""

    def __init__(
        self,
        *children: Node,
        spacing: float = 0.0,
        style_class: str | None = None,
        node_id: str | None = None,
    ) -> None:
        super().__init__(style_class, node_id)
        self.spacing = spacing
        for child in children:
            self.add_child(child)


class ScrollPane(Node):
    """Viewport onto a single content node.

    Attributes:
        scroll_x: Horizontal offset of the viewport into the content
        scroll_y: Vertical offset of the viewport into the content
        vbar_policy: When the vertical scroll bar is drawn
        hbar_policy: When the horizontal scroll bar is drawn
    """

    def __init__(
        self,
        content: Node | None = None,
        style_class: str | None = None,
        node_id: str | None = None,
    ) -> None:
        super().__init__(style_class, node_id)
        self.scroll_x = 0.0
        self.scroll_y = 0.0
        self.vbar_policy = ScrollBarPolicy.AS_NEEDED
        self.hbar_policy = ScrollBarPolicy.AS_NEEDED
        if content is not None:
            self.add_child(content)

    @property
    def content(self) -> Node | None:
        return self._children[0] if self._children else None

    def add_child(self, node: Node) -> None:
        if self._children:
            raise LayoutError("ScrollPane holds a single content node")
        super().add_child(node)

    def scroll_by(self, dx: float = 0.0, dy: float = 0.0) -> None:
        """Move the viewport; offsets never go negative."""
        self.scroll_x = max(0.0, self.scroll_x + dx)
        self.scroll_y = max(0.0, self.scroll_y + dy)

    def clamp_scroll(self, max_x: float, max_y: float) -> None:
        """Keep the viewport inside the content extent."""
        self.scroll_x = min(max(0.0, self.scroll_x), max(0.0, max_x))
        self.scroll_y = min(max(0.0, self.scroll_y), max(0.0, max_y))


class ImageNode(Node):
    """Leaf node displaying a BGR image."""

    def __init__(
        self,
        image: NDArray[np.uint8] | None = None,
        style_class: str | None = None,
        node_id: str | None = None,
    ) -> None:
        super().__init__(style_class, node_id)
        self.image: NDArray[np.uint8] = (
            image if image is not None else np.zeros((1, 1, 3), dtype=np.uint8)
        )

    def set_image(self, image: NDArray[np.uint8]) -> None:
        self.image = image

    def add_child(self, node: Node) -> None:
        raise LayoutError("ImageNode cannot have children")
