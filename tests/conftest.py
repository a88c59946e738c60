"""Pytest fixtures for HUD View tests."""

from __future__ import annotations

import pytest

from hud_view.core.config import PlotSettings
from hud_view.plotting.tracker import DataTracker, NumericalDataTracker
from hud_view.ui.renderer import NodeRenderer


@pytest.fixture
def score_tracker() -> NumericalDataTracker:
    """Create a numeric score tracker."""
    return NumericalDataTracker("Score", 0)


@pytest.fixture
def health_tracker() -> NumericalDataTracker:
    """Create a numeric health tracker."""
    return NumericalDataTracker("Health", 100.0)


@pytest.fixture
def level_tracker() -> DataTracker:
    """Create a generic tracker holding a level name."""
    return DataTracker("Level", "Forest")


@pytest.fixture
def mixed_trackers(
    level_tracker: DataTracker,
    score_tracker: NumericalDataTracker,
    health_tracker: NumericalDataTracker,
) -> list[DataTracker]:
    """Generic and numeric trackers interleaved."""
    return [level_tracker, score_tracker, health_tracker]


@pytest.fixture
def generic_trackers() -> list[DataTracker]:
    """Trackers with no numeric member."""
    return [
        DataTracker("Player", "Ada"),
        DataTracker("Weapon", "Bow"),
    ]


@pytest.fixture
def plot_settings() -> PlotSettings:
    """Create plot settings with a short history for testing."""
    return PlotSettings(history_length=5, line_thickness=1, margin=4)


@pytest.fixture
def renderer() -> NodeRenderer:
    """Create a node renderer with the default layout."""
    return NodeRenderer()
