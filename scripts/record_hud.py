#!/usr/bin/env python3
"""Record the HUD demo to a video file.

Runs the bouncing-ball game at a fixed time step without a window and
writes every composited frame, for reviewing HUD layout changes.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

import cv2
from hud_view.core.config import get_settings
from hud_view.core.logging import get_logger, setup_logging_from_settings
from hud_view.game import BouncingBallGame
from hud_view.ui.hud import HudPanel
from hud_view.ui.renderer import NodeRenderer

logger = get_logger(__name__)

DEFAULT_OUTPUT_DIR = Path("data/recordings")


def record_demo(
    output_path: Path,
    frames: int,
    fps: float = 30.0,
    toggle_every: int = 0,
) -> int:
    """Render demo frames to a video.

    Args:
        output_path: Output video file path
        frames: Number of frames to write
        fps: Output video frame rate
        toggle_every: Toggle the plot every N frames (0 = never)

    Returns:
        Number of frames recorded
    """
    settings = get_settings()
    width, height = settings.ui.display_width, settings.ui.display_height

    game = BouncingBallGame(width, height, seed=0)
    renderer = NodeRenderer()
    hud = HudPanel.from_settings(settings.hud, *game.trackers, plot_settings=settings.plot)

    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    writer = cv2.VideoWriter(str(output_path), fourcc, fps, (width, height))

    if not writer.isOpened():
        logger.error("Could not open video writer")
        return 0

    logger.info("Recording to %s (%dx%d @ %.1f fps)", output_path, width, height, fps)

    frame_count = 0
    try:
        for i in range(frames):
            if toggle_every and i and i % toggle_every == 0:
                hud.toggle_plots()

            game.step(1.0 / fps)
            game.set_fps(fps)
            hud.refresh()

            frame = renderer.overlay(
                game.draw(),
                renderer.render(hud.view()),
                (20, 20),
                settings.ui.panel_alpha,
            )
            writer.write(frame)
            frame_count += 1
    finally:
        writer.release()

    logger.info("Recorded %d frames to %s", frame_count, output_path)
    return frame_count


def main() -> int:
    parser = argparse.ArgumentParser(description="Record the HUD demo to video")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: data/recordings/hud_<timestamp>.mp4)",
    )
    parser.add_argument("-n", "--frames", type=int, default=300, help="Frames to record")
    parser.add_argument("--fps", type=float, default=30.0, help="Output frame rate")
    parser.add_argument(
        "--toggle-every",
        type=int,
        default=0,
        help="Toggle the plot every N frames",
    )
    args = parser.parse_args()

    setup_logging_from_settings(get_settings().logging)

    output = args.output
    if output is None:
        DEFAULT_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output = DEFAULT_OUTPUT_DIR / f"hud_{stamp}.mp4"

    count = record_demo(output, args.frames, args.fps, args.toggle_every)
    return 0 if count > 0 else 1


if __name__ == "__main__":
    sys.exit(main())
