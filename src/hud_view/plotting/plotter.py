"""Rolling line chart of numeric trackers."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import cv2
import numpy as np

from hud_view.core.config import PlotSettings
from hud_view.core.exceptions import InvalidDimensionsError, TrackerKindError
from hud_view.core.logging import get_logger
from hud_view.core.types import PLOT_CLASS
from hud_view.plotting.tracker import NumericalDataTracker
from hud_view.ui.nodes import ImageNode

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


@dataclass
class PlotStyle:
    """Colors and fonts for the chart."""

    # Colors (BGR)
    color_bg: tuple[int, int, int] = (20, 20, 20)
    color_axes: tuple[int, int, int] = (110, 110, 110)
    color_text: tuple[int, int, int] = (220, 220, 220)
    palette: tuple[tuple[int, int, int], ...] = (
        (0, 255, 255),
        (0, 255, 0),
        (255, 128, 0),
        (255, 0, 255),
        (0, 165, 255),
        (255, 255, 0),
        (128, 128, 255),
    )

    font: int = cv2.FONT_HERSHEY_SIMPLEX
    font_scale: float = 0.4
    legend_line_height: int = 14


class Plotter:
    """Keeps a bounded history per numeric tracker and draws it as a chart.

    The chart is rendered into a single :class:`ImageNode` returned by
    :meth:`view`; the same node is reused across redraws.
    """

    def __init__(
        self,
        width: float,
        height: float,
        trackers: Sequence[NumericalDataTracker],
        settings: PlotSettings | None = None,
        style: PlotStyle | None = None,
    ) -> None:
        """Initialize plotter.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
            trackers: Numeric trackers to sample on every redraw
            settings: Plot settings
            style: Chart colors and fonts

        Raises:
            InvalidDimensionsError: If width or height is not positive
            TrackerKindError: If a tracker is not tagged numeric
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"Plot size must be positive, got {width}x{height}")

        for tracker in trackers:
            if not tracker.is_numeric:
                raise TrackerKindError(f"Tracker '{tracker.name}' is not numeric")

        self.settings = settings or PlotSettings()
        self.style = style or PlotStyle()
        self._width = max(1, int(round(width)))
        self._height = max(1, int(round(height)))
        self._trackers = tuple(trackers)
        self._history: list[deque[float]] = [
            deque(maxlen=self.settings.history_length) for _ in self._trackers
        ]

        self._node = ImageNode(style_class=PLOT_CLASS)
        self._node.set_bounds(0, 0, self._width, self._height)
        self.render()

        logger.debug(
            "Plotter created (%dx%d, %d series)",
            self._width,
            self._height,
            len(self._trackers),
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def trackers(self) -> tuple[NumericalDataTracker, ...]:
        return self._trackers

    @property
    def sample_count(self) -> int:
        """Number of samples currently held per series."""
        return len(self._history[0]) if self._history else 0

    def series(self, index: int) -> NDArray[np.float64]:
        """History of one tracker, oldest first."""
        return np.asarray(self._history[index], dtype=np.float64)

    def view(self) -> ImageNode:
        """Node holding the rendered chart."""
        return self._node

    def sample(self) -> None:
        """Append every tracker's current value to its history without drawing."""
        for tracker, history in zip(self._trackers, self._history):
            history.append(tracker.as_float())

    def redraw(self) -> None:
        """Sample every tracker's current value and re-render the chart."""
        self.sample()
        self.render()

    def clear(self) -> None:
        """Drop all history."""
        for history in self._history:
            history.clear()
        self.render()

    def render(self) -> None:
        """Draw the current history into the view's image."""
        style = self.style
        margin = self.settings.margin
        canvas = np.full((self._height, self._width, 3), style.color_bg, dtype=np.uint8)

        # Legend (top)
        for i, tracker in enumerate(self._trackers):
            y = margin + (i + 1) * style.legend_line_height
            cv2.putText(
                canvas,
                tracker.name,
                (margin, y),
                style.font,
                style.font_scale,
                self._color(i),
                1,
            )
        legend_h = len(self._trackers) * style.legend_line_height

        x0, x1 = margin, self._width - margin
        y0, y1 = margin + legend_h + 6, self._height - margin

        values = (
            np.concatenate([self.series(i) for i in range(len(self._history))])
            if self._history
            else np.empty(0)
        )
        finite = values[np.isfinite(values)]

        if finite.size == 0 or x1 - x0 < 2 or y1 - y0 < 2:
            self._draw_placeholder(canvas)
            self._node.set_image(canvas)
            return

        v_min = float(finite.min())
        v_max = float(finite.max())
        if v_max == v_min:
            v_min -= 1.0
            v_max += 1.0

        cv2.rectangle(canvas, (x0, y0), (x1, y1), style.color_axes, 1)
        self._draw_axis_label(canvas, f"{v_max:.4g}", (x0 + 3, y0 + 12))
        self._draw_axis_label(canvas, f"{v_min:.4g}", (x0 + 3, y1 - 4))

        x_step = (x1 - x0) / (self.settings.history_length - 1)
        for i in range(len(self._history)):
            data = self.series(i)
            xs = x0 + np.arange(data.size) * x_step
            ys = y1 - (data - v_min) / (v_max - v_min) * (y1 - y0)
            for segment in _finite_runs(xs, ys):
                if len(segment) == 1:
                    x, y = (int(v) for v in segment[0])
                    cv2.circle(canvas, (x, y), 1, self._color(i), -1)
                else:
                    cv2.polylines(
                        canvas,
                        [segment.reshape(-1, 1, 2)],
                        False,
                        self._color(i),
                        self.settings.line_thickness,
                    )

        self._node.set_image(canvas)

    def _color(self, index: int) -> tuple[int, int, int]:
        palette = self.style.palette
        return palette[index % len(palette)]

    def _draw_axis_label(
        self, canvas: NDArray[np.uint8], text: str, position: tuple[int, int]
    ) -> None:
        cv2.putText(
            canvas,
            text,
            position,
            self.style.font,
            self.style.font_scale,
            self.style.color_text,
            1,
        )

    def _draw_placeholder(self, canvas: NDArray[np.uint8]) -> None:
        text = "No data"
        (text_w, text_h), _ = cv2.getTextSize(text, self.style.font, self.style.font_scale, 1)
        x = max(0, (self._width - text_w) // 2)
        y = (self._height + text_h) // 2
        cv2.putText(
            canvas,
            text,
            (x, y),
            self.style.font,
            self.style.font_scale,
            self.style.color_text,
            1,
        )


def _finite_runs(xs: NDArray[np.float64], ys: NDArray[np.float64]) -> list[NDArray[np.int32]]:
    """Split a series into contiguous runs of finite points."""
    runs: list[NDArray[np.int32]] = []
    mask = np.isfinite(ys)
    start = None
    for i, ok in enumerate(mask):
        if ok and start is None:
            start = i
        elif not ok and start is not None:
            runs.append(_to_points(xs[start:i], ys[start:i]))
            start = None
    if start is not None:
        runs.append(_to_points(xs[start:], ys[start:]))
    return runs


def _to_points(xs: NDArray[np.float64], ys: NDArray[np.float64]) -> NDArray[np.int32]:
    return np.round(np.stack([xs, ys], axis=1)).astype(np.int32)
