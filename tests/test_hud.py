"""Tests for the HUD panel."""

from __future__ import annotations

import pytest

from hud_view.core.config import HudSettings, PlotSettings
from hud_view.core.exceptions import InvalidDimensionsError
from hud_view.core.types import DATA_LABEL_CLASS, SCROLL_PANE_CLASS, TITLE_ID
from hud_view.plotting.tracker import DataTracker, NumericalDataTracker
from hud_view.ui.hud import HudLayout, HudPanel
from hud_view.ui.nodes import ScrollPane, VBox
from hud_view.ui.renderer import NodeRenderer


def _plot_box(hud: HudPanel) -> VBox:
    box = hud.view().content
    assert isinstance(box, VBox)
    return box


class TestHudConstruction:
    """Tests for building the panel."""

    def test_one_row_per_tracker_in_order(self, mixed_trackers: list[DataTracker]) -> None:
        """There should be exactly one row per tracker, in input order."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)

        assert len(hud.rows) == len(mixed_trackers)
        assert hud.rows == ("Level: Forest", "Score: 0", "Health: 100.0")

    def test_initial_refresh_fills_rows(self, score_tracker: NumericalDataTracker) -> None:
        """Rows should never be shown empty after construction."""
        score_tracker.update(42)
        hud = HudPanel(300, 200, "Stats", False, score_tracker)

        assert hud.rows == ("Score: 42",)

    def test_empty_trackers(self) -> None:
        """No trackers should give no rows and no error."""
        hud = HudPanel(300, 200, "Empty", True)

        assert hud.rows == ()
        assert hud.trackers == ()
        assert hud.numeric_trackers == ()

    def test_numeric_subset_goes_to_plotter(self, mixed_trackers: list[DataTracker]) -> None:
        """Only numeric trackers should be handed to the plotter."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)

        assert [t.name for t in hud.plotter.trackers] == ["Score", "Health"]
        assert hud.numeric_trackers == hud.plotter.trackers

    def test_title_and_style_identifiers(self, mixed_trackers: list[DataTracker]) -> None:
        """Title, rows and scroll pane should carry their style identifiers."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        view = hud.view()

        assert hud.title == "Stats"
        assert view.style_class == SCROLL_PANE_CLASS
        assert view.find(TITLE_ID).style_class == DATA_LABEL_CLASS
        assert all(row.style_class == DATA_LABEL_CLASS for row in hud.row_nodes)

    def test_view_is_pinned_to_panel_size(self) -> None:
        """The root view should have the panel's width and height."""
        hud = HudPanel(320.0, 240.0, "Stats", False)

        assert isinstance(hud.view(), ScrollPane)
        assert hud.view().bounds.size == (320, 240)

    def test_layout_spacing(self, score_tracker: NumericalDataTracker) -> None:
        """Custom layout spacing should be applied to the boxes."""
        layout = HudLayout(values_spacing=5.0, plot_spacing=30.0)
        hud = HudPanel(300, 200, "Stats", False, score_tracker, layout=layout)
        box = _plot_box(hud)
        values_box = box.children[0]

        assert box.spacing == 30.0
        assert isinstance(values_box, VBox)
        assert values_box.spacing == 5.0

    @pytest.mark.parametrize("width,height", [(0, 200), (300, 0), (-1, -1)])
    def test_rejects_non_positive_size(self, width: float, height: float) -> None:
        """Width and height must be positive."""
        with pytest.raises(InvalidDimensionsError):
            HudPanel(width, height, "Stats", False)

    def test_sub_pixel_size(self, renderer: NodeRenderer, score_tracker: NumericalDataTracker) -> None:
        """Positive sizes under one pixel should build and render."""
        hud = HudPanel(0.4, 200, "Stats", True, score_tracker)
        hud.refresh()

        assert hud.view().bounds.size == (1, 200)
        assert hud.plotter.width == 1
        assert renderer.render(hud.view()).shape == (200, 1, 3)

    def test_size_error_is_value_error(self) -> None:
        """Invalid dimensions should be catchable as ValueError."""
        with pytest.raises(ValueError):
            HudPanel(0, 0, "Stats", False)

    def test_from_settings(self, score_tracker: NumericalDataTracker) -> None:
        """Settings should map to construction options."""
        settings = HudSettings(width=250, height=150, title="Configured", include_plots=True)
        hud = HudPanel.from_settings(settings, score_tracker)

        assert hud.title == "Configured"
        assert hud.plots_visible
        assert hud.width == 250
        assert hud.height == 150
        assert hud.rows == ("Score: 0",)


class TestHudRefresh:
    """Tests for updating displayed values."""

    def test_refresh_reads_current_values(self, mixed_trackers: list[DataTracker]) -> None:
        """Each row should show its tracker's name and current value."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        mixed_trackers[0].update("Cave")
        mixed_trackers[1].update(1250)
        mixed_trackers[2].update(87.5)

        hud.refresh()

        for tracker, row in zip(mixed_trackers, hud.rows):
            assert row == f"{tracker.name}: {tracker.latest_value}"
        assert hud.rows == ("Level: Cave", "Score: 1250", "Health: 87.5")

    def test_rows_unchanged_until_refresh(self, score_tracker: NumericalDataTracker) -> None:
        """Tracker updates are only shown after refresh."""
        hud = HudPanel(300, 200, "Stats", False, score_tracker)
        score_tracker.update(10)

        assert hud.rows == ("Score: 0",)

    def test_refresh_is_idempotent(self, mixed_trackers: list[DataTracker]) -> None:
        """Refreshing twice without changes should show the same text."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        hud.refresh()
        first = hud.rows
        hud.refresh()

        assert hud.rows == first

    def test_uses_natural_string_form(self) -> None:
        """Values should be shown with str()."""
        trackers = [
            DataTracker("Alive", True),
            DataTracker("Target", None),
            DataTracker("Pos", (3, 4)),
        ]
        hud = HudPanel(300, 200, "Stats", False, *trackers)

        assert hud.rows == ("Alive: True", "Target: None", "Pos: (3, 4)")

    def test_refresh_redraws_visible_plot(
        self, score_tracker: NumericalDataTracker, plot_settings: PlotSettings
    ) -> None:
        """A visible plot should sample on every refresh."""
        hud = HudPanel(300, 200, "Stats", True, score_tracker, plot_settings=plot_settings)
        hud.refresh()
        hud.refresh()

        # One sample from construction plus two refreshes
        assert hud.plotter.sample_count == 3

    def test_hidden_plot_samples_without_redrawing(
        self, score_tracker: NumericalDataTracker
    ) -> None:
        """A hidden plot should keep sampling but not redraw its image."""
        hud = HudPanel(300, 200, "Stats", False, score_tracker)
        image = hud.plotter.view().image
        hud.refresh()

        # One sample from construction plus one refresh
        assert hud.plotter.sample_count == 2
        assert hud.plotter.view().image is image

    def test_showing_plot_draws_hidden_history(self, score_tracker: NumericalDataTracker) -> None:
        """Values sampled while hidden should be drawn once the plot is shown."""
        hud = HudPanel(300, 200, "Stats", False, score_tracker)
        for value in (5, 1, 9):
            score_tracker.update(value)
            hud.refresh()
        hidden_image = hud.plotter.view().image

        hud.toggle_plots()

        assert hud.plotter.view().image is not hidden_image
        assert hud.plotter.series(0).tolist() == [0.0, 5.0, 1.0, 9.0]

    def test_huge_int_value_does_not_break_refresh(self) -> None:
        """Integers beyond float range should display and plot without raising."""
        tracker = NumericalDataTracker("Score", 10**400)
        hud = HudPanel(300, 200, "Stats", True, tracker)
        hud.refresh()

        assert hud.rows == (f"Score: {10**400}",)
        assert hud.plotter.sample_count == 2


class TestHudTitle:
    """Tests for the title."""

    def test_set_title(self, mixed_trackers: list[DataTracker]) -> None:
        """Set title should change only the title."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        rows = hud.rows

        hud.set_title("X")

        assert hud.title == "X"
        assert hud.rows == rows


class TestHudPlotToggle:
    """Tests for showing and hiding the plot."""

    def test_initially_hidden(self, score_tracker: NumericalDataTracker) -> None:
        """include_plots=False should leave the plot detached."""
        hud = HudPanel(300, 200, "Stats", False, score_tracker)

        assert not hud.plots_visible
        assert hud.plotter.view().parent is None
        assert len(_plot_box(hud).children) == 1

    def test_initially_shown(self, score_tracker: NumericalDataTracker) -> None:
        """include_plots=True should attach the plot below the values."""
        hud = HudPanel(300, 200, "Stats", True, score_tracker)
        box = _plot_box(hud)

        assert hud.plots_visible
        assert box.children[1] is hud.plotter.view()

    @pytest.mark.parametrize("include_plots", [True, False])
    def test_toggle_twice_restores_state(
        self, include_plots: bool, mixed_trackers: list[DataTracker]
    ) -> None:
        """Toggling twice should restore the flag and the attachment."""
        hud = HudPanel(300, 200, "Stats", include_plots, *mixed_trackers)
        children_before = _plot_box(hud).children

        hud.toggle_plots()
        assert hud.plots_visible is not include_plots
        hud.toggle_plots()

        assert hud.plots_visible is include_plots
        assert _plot_box(hud).children == children_before
        assert (hud.plotter.view().parent is not None) is include_plots

    def test_set_plots_visible_is_idempotent(self, score_tracker: NumericalDataTracker) -> None:
        """Showing an already shown plot should not attach it twice."""
        hud = HudPanel(300, 200, "Stats", False, score_tracker)
        hud.set_plots_visible(True)
        hud.set_plots_visible(True)

        assert _plot_box(hud).children.count(hud.plotter.view()) == 1

        hud.set_plots_visible(False)
        hud.set_plots_visible(False)

        assert len(_plot_box(hud).children) == 1

    def test_no_numeric_trackers_shows_empty_plot(
        self, generic_trackers: list[DataTracker]
    ) -> None:
        """Without numeric trackers the plot is empty but can be shown."""
        hud = HudPanel(300, 200, "Stats", False, *generic_trackers)

        assert not hud.plots_visible
        assert hud.numeric_trackers == ()
        assert hud.plotter.trackers == ()

        hud.toggle_plots()
        hud.refresh()

        assert hud.plots_visible
        assert hud.plotter.view().parent is _plot_box(hud)
        assert hud.plotter.sample_count == 0


class TestHudView:
    """Tests for the root view handle."""

    def test_view_is_stable(self, mixed_trackers: list[DataTracker]) -> None:
        """view() should always return the same node."""
        hud = HudPanel(300, 200, "Stats", True, *mixed_trackers)
        view = hud.view()
        hud.refresh()
        hud.toggle_plots()

        assert hud.view() is view

    def test_view_contains_title_and_rows(self, mixed_trackers: list[DataTracker]) -> None:
        """All labels should be reachable from the view."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        nodes = list(hud.view().walk())

        assert all(any(node is row for node in nodes) for row in hud.row_nodes)
        assert hud.view().find(TITLE_ID) is not None

    def test_tracker_membership_is_fixed(self, mixed_trackers: list[DataTracker]) -> None:
        """Changing the input list after construction should not affect the panel."""
        hud = HudPanel(300, 200, "Stats", False, *mixed_trackers)
        mixed_trackers.append(NumericalDataTracker("Extra", 1))
        hud.refresh()

        assert len(hud.rows) == 3
        assert isinstance(hud.trackers, tuple)
