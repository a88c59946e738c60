"""Core infrastructure: config, types, exceptions, and logging."""

from hud_view.core.config import (
    HudSettings,
    LoggingSettings,
    PlotSettings,
    Settings,
    UISettings,
    get_settings,
)
from hud_view.core.exceptions import (
    HudViewError,
    InvalidDimensionsError,
    LayoutError,
    TrackerKindError,
    TrackerValueError,
)
from hud_view.core.logging import get_logger, setup_logging, setup_logging_from_settings
from hud_view.core.types import (
    DATA_LABEL_CLASS,
    SCROLL_PANE_CLASS,
    TITLE_ID,
    Bounds,
    ScrollBarPolicy,
    TrackerKind,
)

__all__ = [
    # Config
    "Settings",
    "HudSettings",
    "PlotSettings",
    "UISettings",
    "LoggingSettings",
    "get_settings",
    # Types
    "Bounds",
    "ScrollBarPolicy",
    "TrackerKind",
    "TITLE_ID",
    "DATA_LABEL_CLASS",
    "SCROLL_PANE_CLASS",
    # Exceptions
    "HudViewError",
    "InvalidDimensionsError",
    "LayoutError",
    "TrackerValueError",
    "TrackerKindError",
    # Logging
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
]
