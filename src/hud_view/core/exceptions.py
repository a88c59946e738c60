"""Custom exceptions for HUD View."""


class HudViewError(Exception):
    """Base exception for all HUD View errors."""

    pass


class InvalidDimensionsError(HudViewError, ValueError):
    """A panel, plot or node was given a non-positive size."""

    def __init__(self, message: str = "Dimensions must be positive") -> None:
        self.message = message
        super().__init__(self.message)


class LayoutError(HudViewError):
    """Invalid operation on the visual node tree."""

    def __init__(self, message: str = "Invalid layout operation") -> None:
        self.message = message
        super().__init__(self.message)


class TrackerValueError(HudViewError, TypeError):
    """A numeric tracker received a value that is not a real number."""

    def __init__(self, message: str = "Tracker value must be a real number") -> None:
        self.message = message
        super().__init__(self.message)


class TrackerKindError(HudViewError, TypeError):
    """A tracker of the wrong kind was handed to a component."""

    def __init__(self, message: str = "Tracker kind not supported") -> None:
        self.message = message
        super().__init__(self.message)
