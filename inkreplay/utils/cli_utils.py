import argparse

from .error_handler import handle_error
from ..config.config import ASPECT_RATIOS, QUALITY_PRESETS, DEFAULT_HOLD_SECONDS, FPS
from ..render.board import parse_color


def parse_replay_options(args_list):
    """Parse replay CLI options (ratio, quality, brush, color, ...) using argparse.
    Positionals (trace, output video) are left to the caller.
    """
    parser = argparse.ArgumentParser(add_help=False)  # Sub-parser style, no help
    parser.add_argument(
        "--ratio",
        choices=list(ASPECT_RATIOS.keys()),
        help="Aspect ratio",
    )
    parser.add_argument(
        "--quality",
        choices=list(QUALITY_PRESETS.keys()),
        help="Video quality",
    )
    parser.add_argument("--brush-size", type=float, help="Initial brush size (line thickness)")
    parser.add_argument("--color", help="Initial ink color as #rrggbb")
    parser.add_argument("--converge", action="store_true",
                        help="Brush catches up with the pointer every frame (less smooth)")
    parser.add_argument("--hold", type=float, default=DEFAULT_HOLD_SECONDS,
                        help="Seconds to hold the finished drawing")
    parser.add_argument("--fps", type=int, default=FPS, help="Video frame rate")

    # Parse known args, ignore unknowns (positionals are scanned by the caller)
    parsed, _ = parser.parse_known_args(args_list)

    if parsed.brush_size is not None and parsed.brush_size <= 0:
        handle_error("--brush-size must be positive")
    if parsed.hold < 0:
        handle_error("--hold must not be negative")
    if parsed.fps <= 0:
        handle_error("--fps must be positive")

    color = None
    if parsed.color:
        try:
            color = parse_color(parsed.color)
        except ValueError as e:
            handle_error(str(e))

    return {
        "aspect_ratio": parsed.ratio,
        "quality": parsed.quality,
        "brush_size": parsed.brush_size,
        "color": color,
        "slow_simulation": False if parsed.converge else None,
        "hold_seconds": parsed.hold,
        "fps": parsed.fps,
    }
