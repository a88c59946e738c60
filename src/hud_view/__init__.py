"""Heads-up display panel with live tracker rows and an optional plot."""

from hud_view.core.types import TrackerKind
from hud_view.plotting import DataTracker, NumericalDataTracker, Plotter
from hud_view.ui.hud import HudPanel

__all__ = [
    "HudPanel",
    "Plotter",
    "DataTracker",
    "NumericalDataTracker",
    "TrackerKind",
]
