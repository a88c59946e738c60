"""Data trackers and the rolling plot fed by the numeric ones."""

from hud_view.plotting.plotter import Plotter, PlotStyle
from hud_view.plotting.tracker import DataTracker, NumericalDataTracker, numeric_subset

__all__ = [
    "DataTracker",
    "NumericalDataTracker",
    "numeric_subset",
    "Plotter",
    "PlotStyle",
]
