"""Named value sources written by the game loop and read by the HUD."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, ClassVar

from hud_view.core.exceptions import TrackerValueError
from hud_view.core.types import TrackerKind


class DataTracker:
    """A named source of a single current value.

    The game loop stores values with :meth:`update`; the HUD only reads
    :attr:`name` and :attr:`latest_value`.
    """

    kind: ClassVar[TrackerKind] = TrackerKind.GENERIC

    def __init__(self, name: str, initial_value: Any = "") -> None:
        self._name = name
        self._value = self._validate(initial_value)

    @property
    def name(self) -> str:
        """Display name of the tracked value."""
        return self._name

    @property
    def latest_value(self) -> Any:
        """Most recently stored value."""
        return self._value

    @property
    def is_numeric(self) -> bool:
        """Whether this tracker carries the numeric tag."""
        return self.kind is TrackerKind.NUMERIC

    def update(self, value: Any) -> None:
        """Store a new current value."""
        self._value = self._validate(value)

    def _validate(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r})"


class NumericalDataTracker(DataTracker):
    """Tracker whose value is a real number, eligible for plotting."""

    kind: ClassVar[TrackerKind] = TrackerKind.NUMERIC

    def __init__(self, name: str, initial_value: float = 0.0) -> None:
        super().__init__(name, initial_value)

    @property
    def latest_value(self) -> float:
        return self._value

    def as_float(self) -> float:
        """Current value as a float.

        NaN stays NaN; integers beyond float range become signed infinity.
        """
        try:
            return float(self._value)
        except OverflowError:
            return math.inf if self._value > 0 else -math.inf

    def _validate(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TrackerValueError(
                f"Tracker '{self._name}' expects a real number, got {type(value).__name__}"
            )
        return value


def numeric_subset(trackers: tuple[DataTracker, ...]) -> tuple[NumericalDataTracker, ...]:
    """Select the numeric-tagged trackers, preserving order."""
    return tuple(t for t in trackers if t.is_numeric)  # type: ignore[misc]
