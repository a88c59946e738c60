"""OpenCV window management for the HUD demo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

import cv2
import numpy as np

from hud_view.core.config import UISettings
from hud_view.core.logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


class KeyAction(Enum):
    """Actions triggered by keyboard input."""

    NONE = auto()
    QUIT = auto()
    TOGGLE_PLOTS = auto()
    PAUSE = auto()
    RESET = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


# Key mappings (ASCII codes)
KEY_BINDINGS: dict[int, KeyAction] = {
    ord("q"): KeyAction.QUIT,
    ord("Q"): KeyAction.QUIT,
    27: KeyAction.QUIT,  # ESC
    ord("p"): KeyAction.TOGGLE_PLOTS,
    ord("P"): KeyAction.TOGGLE_PLOTS,
    ord(" "): KeyAction.PAUSE,
    ord("r"): KeyAction.RESET,
    ord("R"): KeyAction.RESET,
    ord("k"): KeyAction.SCROLL_UP,
    ord("j"): KeyAction.SCROLL_DOWN,
}


def key_to_action(key: int) -> KeyAction:
    """Map a raw ``cv2.waitKey`` code to an action."""
    key &= 0xFF
    if key == 255:  # No key pressed
        return KeyAction.NONE
    return KEY_BINDINGS.get(key, KeyAction.NONE)


@dataclass
class WindowState:
    """Current state of the display window."""

    is_open: bool = False
    is_paused: bool = False
    width: int = 1280
    height: int = 720


class DisplayWindow:
    """Manages the OpenCV window showing game frames with the HUD.

    Handles window creation, frame display, and keyboard input.
    """

    WINDOW_NAME = "HUD View"

    def __init__(self, settings: UISettings | None = None) -> None:
        """Initialize display window.

        Args:
            settings: UI settings (uses defaults if None)
        """
        self.settings = settings or UISettings()
        self._state = WindowState(
            width=self.settings.display_width,
            height=self.settings.display_height,
        )

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    def open(self) -> None:
        """Create and show the display window."""
        cv2.namedWindow(self.WINDOW_NAME, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(self.WINDOW_NAME, self._state.width, self._state.height)
        self._state.is_open = True
        logger.info(
            "Display window opened (%dx%d)",
            self._state.width,
            self._state.height,
        )

    def close(self) -> None:
        """Close and destroy the display window."""
        if not self._state.is_open:
            return
        cv2.destroyWindow(self.WINDOW_NAME)
        self._state.is_open = False
        logger.info("Display window closed")

    def show_frame(self, image: NDArray[np.uint8]) -> None:
        """Display a frame in the window.

        Args:
            image: BGR image array to display
        """
        if not self._state.is_open:
            self.open()

        h, w = image.shape[:2]
        if w != self._state.width or h != self._state.height:
            image = cv2.resize(image, (self._state.width, self._state.height))
        cv2.imshow(self.WINDOW_NAME, image)

    def poll_key(self, wait_ms: int = 1) -> KeyAction:
        """Poll for keyboard input.

        Args:
            wait_ms: Milliseconds to wait for key (1 for non-blocking)

        Returns:
            KeyAction corresponding to pressed key
        """
        action = key_to_action(cv2.waitKey(wait_ms))

        if action == KeyAction.PAUSE:
            self._state.is_paused = not self._state.is_paused
            logger.info("Paused: %s", self._state.is_paused)

        return action

    def __enter__(self) -> DisplayWindow:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()
