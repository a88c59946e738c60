"""Main entry point for the HUD View demo."""

from __future__ import annotations

import argparse
import os
import sys
import time

from hud_view.core.config import Settings, get_settings
from hud_view.core.exceptions import HudViewError
from hud_view.core.logging import get_logger, setup_logging_from_settings
from hud_view.game import BouncingBallGame
from hud_view.ui.display import DisplayWindow, KeyAction
from hud_view.ui.hud import HudPanel
from hud_view.ui.renderer import NodeRenderer

logger = get_logger(__name__)

PANEL_POSITION = (20, 20)
SCROLL_STEP = 40.0
FIXED_DT = 1.0 / 60.0


def run_demo(
    settings: Settings,
    include_plots: bool = True,
    max_frames: int | None = None,
    headless: bool = False,
) -> int:
    """Run the bouncing-ball game with a HUD panel.

    Args:
        settings: Application settings
        include_plots: Whether the HUD plot is visible at start
        max_frames: Stop after this many frames (None = until quit)
        headless: Render frames without opening a window

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    ui = settings.ui
    game = BouncingBallGame(ui.display_width, ui.display_height)
    renderer = NodeRenderer()
    display = DisplayWindow(ui)

    try:
        hud = HudPanel(
            settings.hud.width,
            settings.hud.height,
            settings.hud.title,
            include_plots,
            *game.trackers,
            plot_settings=settings.plot,
        )

        if not headless:
            display.open()

        frame_count = 0
        fps_frames = 0
        fps_start = time.time()
        last_tick = time.time()

        logger.info("Starting game loop (press 'q' to quit, 'p' to toggle plots)")

        while max_frames is None or frame_count < max_frames:
            now = time.time()
            dt = FIXED_DT if headless else min(now - last_tick, 0.1)
            last_tick = now

            game.step(dt)
            hud.refresh()

            frame = renderer.overlay(
                game.draw(),
                renderer.render(hud.view()),
                PANEL_POSITION,
                ui.panel_alpha,
            )
            frame_count += 1

            fps_frames += 1
            elapsed = time.time() - fps_start
            if elapsed > 1.0:
                game.set_fps(fps_frames / elapsed)
                fps_frames = 0
                fps_start = time.time()

            if headless:
                continue

            display.show_frame(frame)
            action = display.poll_key(wait_ms=1)

            if action == KeyAction.QUIT:
                logger.info("Quit requested")
                break
            elif action == KeyAction.TOGGLE_PLOTS:
                hud.toggle_plots()
            elif action == KeyAction.PAUSE:
                game.set_paused(display.is_paused)
                hud.set_title(f"{settings.hud.title} (paused)" if game.paused else settings.hud.title)
            elif action == KeyAction.RESET:
                logger.info("Game reset requested")
                game.reset()
                hud.plotter.clear()
            elif action == KeyAction.SCROLL_UP:
                hud.view().scroll_by(dy=-SCROLL_STEP)
            elif action == KeyAction.SCROLL_DOWN:
                hud.view().scroll_by(dy=SCROLL_STEP)

        logger.info("Rendered %d frames (%d bounces)", frame_count, game.bounces)
        return 0

    except HudViewError as e:
        logger.error("HUD error: %s", e)
        return 2

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 3

    finally:
        display.close()
        logger.info("HUD View stopped")


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="HUD View - live tracker HUD demo")
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Start with the plot hidden",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run the loop without opening a window",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    settings = get_settings()
    setup_logging_from_settings(settings.logging)

    exit_code = run_demo(
        settings,
        include_plots=not args.no_plots,
        max_frames=args.frames,
        headless=args.headless,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
