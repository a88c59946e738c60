"""Heads-up display (HUD) panel of live tracker values with an optional plot."""

from __future__ import annotations

from dataclasses import dataclass

from hud_view.core.config import HudSettings, PlotSettings
from hud_view.core.exceptions import InvalidDimensionsError
from hud_view.core.logging import get_logger
from hud_view.core.types import DATA_LABEL_CLASS, SCROLL_PANE_CLASS, TITLE_ID, ScrollBarPolicy
from hud_view.plotting.plotter import Plotter
from hud_view.plotting.tracker import DataTracker, NumericalDataTracker, numeric_subset
from hud_view.ui.nodes import Label, ScrollPane, VBox

logger = get_logger(__name__)


@dataclass
class HudLayout:
    """Spacing between HUD elements."""

    values_spacing: float = 2.0
    plot_spacing: float = 20.0


@dataclass(frozen=True)
class HudWidgets:
    """Nodes owned by a panel, built once at construction.

    Attributes:
        title: Heading label
        rows: One label per tracker, same order as the trackers
        values_box: Title followed by the rows
        plot_and_values_box: Values box, then the plot view when shown
        scroll_pane: Root node handed to the host
    """

    title: Label
    rows: tuple[Label, ...]
    values_box: VBox
    plot_and_values_box: VBox
    scroll_pane: ScrollPane


class HudPanel:
    """A HUD showing ``"<name>: <value>"`` for each tracker and an optional plot.

    The game loop stores data in the trackers and calls :meth:`refresh` once
    per tick. Numeric trackers are also handed to a :class:`Plotter` whose
    chart can be shown below the values with :meth:`toggle_plots`.

    Tracker membership is fixed at construction.
    """

    def __init__(
        self,
        width: float,
        height: float,
        title: str,
        include_plots: bool,
        *trackers: DataTracker,
        layout: HudLayout | None = None,
        plot_settings: PlotSettings | None = None,
    ) -> None:
        """Create a HUD panel.

        Args:
            width: Panel width in pixels
            height: Panel height in pixels
            title: Initial heading text
            include_plots: Whether the plot is visible at start
            trackers: Value sources to display, in display order
            layout: Spacing between elements
            plot_settings: Settings for the embedded plotter

        Raises:
            InvalidDimensionsError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"HUD size must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self.layout = layout or HudLayout()
        self._trackers = tuple(trackers)
        self._numeric_trackers = numeric_subset(self._trackers)
        self._plotter = Plotter(width, height, self._numeric_trackers, plot_settings)
        self._widgets = self._build_widgets(title)
        self._plots_visible = False

        self.set_plots_visible(include_plots)
        self.refresh()

        logger.debug(
            "HUD '%s' created (%d rows, %d plotted)",
            title,
            len(self._trackers),
            len(self._numeric_trackers),
        )

    @classmethod
    def from_settings(
        cls,
        settings: HudSettings,
        *trackers: DataTracker,
        plot_settings: PlotSettings | None = None,
    ) -> HudPanel:
        """Create a panel from a configuration object."""
        return cls(
            settings.width,
            settings.height,
            settings.title,
            settings.include_plots,
            *trackers,
            plot_settings=plot_settings,
        )

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def title(self) -> str:
        return self._widgets.title.text

    @property
    def rows(self) -> tuple[str, ...]:
        """Current text of every row."""
        return tuple(row.text for row in self._widgets.rows)

    @property
    def row_nodes(self) -> tuple[Label, ...]:
        return self._widgets.rows

    @property
    def trackers(self) -> tuple[DataTracker, ...]:
        return self._trackers

    @property
    def numeric_trackers(self) -> tuple[NumericalDataTracker, ...]:
        return self._numeric_trackers

    @property
    def plotter(self) -> Plotter:
        return self._plotter

    @property
    def plots_visible(self) -> bool:
        return self._plots_visible

    def view(self) -> ScrollPane:
        """Root node embedding the title, rows and optional plot."""
        return self._widgets.scroll_pane

    def refresh(self) -> None:
        """Update the displayed values and sample the plot, drawing it if shown."""
        for row in self._widgets.rows:
            row.set_text("")

        for tracker, row in zip(self._trackers, self._widgets.rows):
            row.set_text(f"{tracker.name}: {tracker.latest_value}")

        if self._plots_visible:
            self._plotter.redraw()
        else:
            self._plotter.sample()

    def set_title(self, title: str) -> None:
        """Replace the heading text."""
        self._widgets.title.set_text(title)

    def toggle_plots(self) -> None:
        """Show the plot if hidden and vice versa."""
        self.set_plots_visible(not self._plots_visible)

    def set_plots_visible(self, visible: bool) -> None:
        """Attach or detach the plot view below the values."""
        box = self._widgets.plot_and_values_box
        plot_view = self._plotter.view()

        if visible and not self._plots_visible:
            self._plotter.render()
            box.add_child(plot_view)
        elif not visible and self._plots_visible:
            box.remove_child(plot_view)
        else:
            return

        self._plots_visible = visible
        logger.info("HUD plots %s", "shown" if visible else "hidden")

    def _build_widgets(self, title: str) -> HudWidgets:
        title_label = Label(title, style_class=DATA_LABEL_CLASS, node_id=TITLE_ID)
        rows = tuple(Label(style_class=DATA_LABEL_CLASS) for _ in self._trackers)

        values_box = VBox(title_label, *rows, spacing=self.layout.values_spacing)
        plot_and_values_box = VBox(values_box, spacing=self.layout.plot_spacing)

        scroll_pane = ScrollPane(plot_and_values_box, style_class=SCROLL_PANE_CLASS)
        scroll_pane.set_bounds(0, 0, self._width, self._height)
        scroll_pane.vbar_policy = ScrollBarPolicy.AS_NEEDED
        scroll_pane.hbar_policy = ScrollBarPolicy.AS_NEEDED

        return HudWidgets(
            title=title_label,
            rows=rows,
            values_box=values_box,
            plot_and_values_box=plot_and_values_box,
            scroll_pane=scroll_pane,
        )
