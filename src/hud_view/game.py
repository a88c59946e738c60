"""Synthetic bouncing-ball game that feeds trackers for the HUD demo."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

import cv2
import numpy as np

from hud_view.plotting.tracker import DataTracker, NumericalDataTracker

if TYPE_CHECKING:
    from numpy.typing import NDArray

GRAVITY = 900.0  # px/s^2
RESTITUTION = 0.85
MIN_BOUNCE_SPEED = 350.0


@dataclass(slots=True)
class Ball:
    """Ball state in screen coordinates (y grows downward)."""

    x: float
    y: float
    vx: float
    vy: float
    radius: float = 18.0

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)


class BouncingBallGame:
    """Ball bouncing inside the frame under gravity.

    Owns the trackers the HUD displays and updates them on every
    :meth:`step`.
    """

    def __init__(self, width: int, height: int, seed: int | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = random.Random(seed)
        self.ball = self._spawn_ball()
        self.bounces = 0
        self.paused = False

        self.fps_tracker = NumericalDataTracker("FPS", 0.0)
        self.x_tracker = NumericalDataTracker("Ball X", 0.0)
        self.y_tracker = NumericalDataTracker("Ball Y", 0.0)
        self.speed_tracker = NumericalDataTracker("Speed", 0.0)
        self.bounce_tracker = NumericalDataTracker("Bounces", 0)
        self.state_tracker = DataTracker("State", "RUNNING")
        self._sync_trackers()

    @property
    def trackers(self) -> tuple[DataTracker, ...]:
        """All trackers in display order."""
        return (
            self.state_tracker,
            self.fps_tracker,
            self.x_tracker,
            self.y_tracker,
            self.speed_tracker,
            self.bounce_tracker,
        )

    def step(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        if self.paused:
            return

        ball = self.ball
        ball.vy += GRAVITY * dt
        ball.x += ball.vx * dt
        ball.y += ball.vy * dt

        if ball.x - ball.radius < 0:
            ball.x = ball.radius
            ball.vx = abs(ball.vx)
            self.bounces += 1
        elif ball.x + ball.radius > self.width:
            ball.x = self.width - ball.radius
            ball.vx = -abs(ball.vx)
            self.bounces += 1

        floor = self.height - ball.radius
        if ball.y > floor:
            ball.y = floor
            # Kick the ball back up when it would otherwise come to rest
            ball.vy = -max(abs(ball.vy) * RESTITUTION, MIN_BOUNCE_SPEED)
            self.bounces += 1
        elif ball.y < ball.radius:
            ball.y = ball.radius
            ball.vy = abs(ball.vy)

        self._sync_trackers()

    def set_paused(self, paused: bool) -> None:
        self.paused = paused
        self.state_tracker.update("PAUSED" if paused else "RUNNING")

    def set_fps(self, fps: float) -> None:
        self.fps_tracker.update(round(fps, 1))

    def reset(self) -> None:
        """Respawn the ball and zero the bounce count."""
        self.ball = self._spawn_ball()
        self.bounces = 0
        self._sync_trackers()

    def draw(self) -> NDArray[np.uint8]:
        """Render the current game frame."""
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        cv2.line(frame, (0, self.height - 1), (self.width, self.height - 1), (90, 90, 90), 2)
        center = (int(self.ball.x), int(self.ball.y))
        cv2.circle(frame, center, int(self.ball.radius), (0, 140, 255), -1)
        return frame

    def _spawn_ball(self) -> Ball:
        return Ball(
            x=self.width * self._rng.uniform(0.3, 0.7),
            y=self.height * 0.25,
            vx=self._rng.choice([-1, 1]) * self._rng.uniform(150.0, 300.0),
            vy=0.0,
        )

    def _sync_trackers(self) -> None:
        self.x_tracker.update(round(self.ball.x, 1))
        self.y_tracker.update(round(self.ball.y, 1))
        self.speed_tracker.update(round(self.ball.speed, 1))
        self.bounce_tracker.update(self.bounces)
