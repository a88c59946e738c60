"""Core data types and structures."""

from dataclasses import dataclass
from enum import Enum, auto


class TrackerKind(Enum):
    """Tag distinguishing numeric trackers from generic ones."""

    GENERIC = auto()
    NUMERIC = auto()


class ScrollBarPolicy(Enum):
    """When a scroll pane draws its scroll bar."""

    AS_NEEDED = auto()
    ALWAYS = auto()
    NEVER = auto()


@dataclass(frozen=True, slots=True)
class Bounds:
    """Position and fixed size of a node, in pixels.

    A zero width or height means the size is not pinned and the node
    takes its measured size.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_sized(self) -> bool:
        """Whether both width and height are pinned."""
        return self.width > 0 and self.height > 0

    @property
    def size(self) -> tuple[int, int]:
        """Pinned size as integer (width, height); positive sizes are at least 1 pixel."""
        return _pixels(self.width), _pixels(self.height)


def _pixels(length: float) -> int:
    return max(1, int(round(length))) if length > 0 else 0


# Style identifiers the host may restyle
TITLE_ID = "hud-title"
DATA_LABEL_CLASS = "data-label"
SCROLL_PANE_CLASS = "scroll-pane"
PLOT_CLASS = "plot"
