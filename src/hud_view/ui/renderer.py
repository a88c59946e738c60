"""OpenCV rasterization of a visual node tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import cv2
import numpy as np

from hud_view.core.types import TITLE_ID, ScrollBarPolicy
from hud_view.ui.nodes import ImageNode, Label, Node, ScrollPane, VBox

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass
class RenderLayout:
    """Fonts, spacing and colors used when drawing nodes."""

    font: int = cv2.FONT_HERSHEY_SIMPLEX
    label_scale: float = 0.5
    label_thickness: int = 1
    title_scale: float = 0.7
    title_thickness: int = 2
    label_padding: int = 4

    scrollbar_width: int = 6

    # Colors (BGR)
    color_text: tuple[int, int, int] = (255, 255, 255)
    color_bg: tuple[int, int, int] = (0, 0, 0)
    color_accent: tuple[int, int, int] = (0, 255, 255)
    color_scroll_track: tuple[int, int, int] = (60, 60, 60)
    color_scroll_thumb: tuple[int, int, int] = (170, 170, 170)


class NodeRenderer:
    """Measures and draws node trees onto BGR images.

    Labels are stacked by :class:`VBox`, clipped by :class:`ScrollPane`
    viewports and drawn with ``cv2.putText``; :class:`ImageNode` content is
    copied in as-is.
    """

    def __init__(self, layout: RenderLayout | None = None) -> None:
        self.layout = layout or RenderLayout()

    def measure(self, node: Node) -> tuple[int, int]:
        """Size of a node as (width, height) in pixels."""
        if node.bounds.is_sized:
            return node.bounds.size

        if isinstance(node, Label):
            return self._measure_label(node)

        if isinstance(node, ImageNode):
            h, w = node.image.shape[:2]
            return int(w), int(h)

        if isinstance(node, VBox):
            sizes = [self.measure(child) for child in node.children]
            if not sizes:
                return 0, 0
            width = max(w for w, _ in sizes)
            height = sum(h for _, h in sizes) + int(round(node.spacing)) * (len(sizes) - 1)
            return width, height

        if isinstance(node, ScrollPane):
            return self.measure(node.content) if node.content is not None else (0, 0)

        return 0, 0

    def render(self, node: Node) -> NDArray[np.uint8]:
        """Draw a node tree into a new image of the root node's size.

        Args:
            node: Root of the tree (typically a panel's view)

        Returns:
            BGR image of the rendered tree
        """
        width, height = self.measure(node)
        canvas = self._blank(width, height)
        self._draw(node, canvas, 0, 0)
        return canvas

    def overlay(
        self,
        frame: NDArray[np.uint8],
        panel: NDArray[np.uint8],
        position: tuple[int, int] = (0, 0),
        alpha: float = 1.0,
    ) -> NDArray[np.uint8]:
        """Blend a rendered panel onto a copy of a frame.

        Args:
            frame: Game frame
            panel: Rendered panel image
            position: (x, y) of the panel's top-left corner in the frame
            alpha: Panel opacity in [0, 1]

        Returns:
            Frame with the panel composited
        """
        result = frame.copy()
        region = _clip_region(result.shape, panel.shape, position)
        if region is None:
            return result

        (fy0, fy1, fx0, fx1), (py0, py1, px0, px1) = region
        roi = result[fy0:fy1, fx0:fx1]
        src = panel[py0:py1, px0:px1]
        if alpha >= 1.0:
            roi[:] = src
        else:
            roi[:] = cv2.addWeighted(src, alpha, roi, 1.0 - alpha, 0)
        return result

    def _draw(self, node: Node, canvas: NDArray[np.uint8], x: int, y: int) -> None:
        if isinstance(node, Label):
            self._draw_label(node, canvas, x, y)
        elif isinstance(node, ImageNode):
            _blit(canvas, node.image, x, y)
        elif isinstance(node, ScrollPane):
            self._draw_scroll_pane(node, canvas, x, y)
        else:
            spacing = int(round(getattr(node, "spacing", 0)))
            cy = y
            for child in node.children:
                self._draw(child, canvas, x, cy)
                cy += self.measure(child)[1] + spacing

    def _draw_label(self, label: Label, canvas: NDArray[np.uint8], x: int, y: int) -> None:
        if not label.text:
            return
        scale, thickness = self._font_for(label)
        color = self.layout.color_accent if label.node_id == TITLE_ID else self.layout.color_text
        (_, text_h), _ = cv2.getTextSize("Ag", self.layout.font, scale, thickness)
        pad = self.layout.label_padding
        cv2.putText(
            canvas,
            label.text,
            (x + pad, y + pad + text_h),
            self.layout.font,
            scale,
            color,
            thickness,
        )

    def _draw_scroll_pane(self, pane: ScrollPane, canvas: NDArray[np.uint8], x: int, y: int) -> None:
        view_w, view_h = self.measure(pane)
        if pane.content is None or view_w == 0 or view_h == 0:
            return

        content_w, content_h = self.measure(pane.content)
        pane.clamp_scroll(content_w - view_w, content_h - view_h)

        content = self._blank(content_w, content_h)
        self._draw(pane.content, content, 0, 0)

        sx, sy = int(pane.scroll_x), int(pane.scroll_y)
        visible = content[sy : sy + view_h, sx : sx + view_w]
        _blit(canvas, visible, x, y)

        bar = self.layout.scrollbar_width
        if _bar_visible(pane.vbar_policy, content_h, view_h):
            track = (x + view_w - bar, y, bar, view_h)
            self._draw_scroll_bar(canvas, track, sy, content_h, view_h, vertical=True)
        if _bar_visible(pane.hbar_policy, content_w, view_w):
            track = (x, y + view_h - bar, view_w, bar)
            self._draw_scroll_bar(canvas, track, sx, content_w, view_w, vertical=False)

    def _draw_scroll_bar(
        self,
        canvas: NDArray[np.uint8],
        track: tuple[int, int, int, int],
        offset: int,
        content_len: int,
        view_len: int,
        vertical: bool,
    ) -> None:
        tx, ty, tw, th = track
        cv2.rectangle(canvas, (tx, ty), (tx + tw - 1, ty + th - 1), self.layout.color_scroll_track, -1)

        track_len = th if vertical else tw
        ratio = min(1.0, view_len / content_len) if content_len > 0 else 1.0
        thumb_len = max(4, int(track_len * ratio))
        thumb_pos = int(track_len * offset / content_len) if content_len > 0 else 0
        thumb_pos = min(thumb_pos, track_len - thumb_len)

        if vertical:
            p0, p1 = (tx, ty + thumb_pos), (tx + tw - 1, ty + thumb_pos + thumb_len - 1)
        else:
            p0, p1 = (tx + thumb_pos, ty), (tx + thumb_pos + thumb_len - 1, ty + th - 1)
        cv2.rectangle(canvas, p0, p1, self.layout.color_scroll_thumb, -1)

    def _measure_label(self, label: Label) -> tuple[int, int]:
        scale, thickness = self._font_for(label)
        pad = self.layout.label_padding
        (_, line_h), baseline = cv2.getTextSize("Ag", self.layout.font, scale, thickness)
        text_w = 0
        if label.text:
            (text_w, _), _ = cv2.getTextSize(label.text, self.layout.font, scale, thickness)
        return text_w + 2 * pad, line_h + baseline + 2 * pad

    def _font_for(self, label: Label) -> tuple[float, int]:
        if label.node_id == TITLE_ID:
            return self.layout.title_scale, self.layout.title_thickness
        return self.layout.label_scale, self.layout.label_thickness

    def _blank(self, width: int, height: int) -> NDArray[np.uint8]:
        return np.full((max(height, 1), max(width, 1), 3), self.layout.color_bg, dtype=np.uint8)


def _bar_visible(policy: ScrollBarPolicy, content_len: int, view_len: int) -> bool:
    if policy is ScrollBarPolicy.ALWAYS:
        return True
    if policy is ScrollBarPolicy.NEVER:
        return False
    return content_len > view_len


def _clip_region(
    dst_shape: tuple[int, ...],
    src_shape: tuple[int, ...],
    position: tuple[int, int],
) -> tuple[tuple[int, int, int, int], tuple[int, int, int, int]] | None:
    """Overlapping rows/cols of a source placed at position inside a destination."""
    x, y = position
    dst_h, dst_w = dst_shape[:2]
    src_h, src_w = src_shape[:2]

    dx0, dy0 = max(x, 0), max(y, 0)
    dx1, dy1 = min(x + src_w, dst_w), min(y + src_h, dst_h)
    if dx0 >= dx1 or dy0 >= dy1:
        return None

    return (dy0, dy1, dx0, dx1), (dy0 - y, dy1 - y, dx0 - x, dx1 - x)


def _blit(canvas: NDArray[np.uint8], image: NDArray[np.uint8], x: int, y: int) -> None:
    region = _clip_region(canvas.shape, image.shape, (x, y))
    if region is None:
        return
    (cy0, cy1, cx0, cx1), (iy0, iy1, ix0, ix1) = region
    canvas[cy0:cy1, cx0:cx1] = image[iy0:iy1, ix0:ix1]
