#!/usr/bin/env python3
"""
Vector ink replay
Replays a recorded pen/mouse trace through the DynaDraw brush simulation and
renders the resulting ink strokes to a video
"""

import sys
from pathlib import Path
# Relative imports for package structure (CLI in inkreplay/cli/, modules in inkreplay/)
from ..config.config import ASPECT_RATIOS, QUALITY_PRESETS, TEMP_DIR, DEFAULT_HOLD_SECONDS
from ..video.video_writer import create_replay_video
from ..download.download_utils import is_url
from ..cleanup.cleanup_utils import CleanupManager
from ..utils.error_handler import handle_error
from ..utils.cli_utils import parse_replay_options
# Colored logging for differentiation (success green, etc.)
from ..utils.log_utils import log_success, log_info

VIDEO_SUFFIXES = ['.mp4', '.avi']


def _print_usage():
    print("Usage:")
    print("    python -m inkreplay.cli.ink_replay <trace.json> [output.mp4] [OPTIONS]")
    print("    Example: python -m inkreplay.cli.ink_replay lecture.json lecture.mp4")
    print("    Example: python -m inkreplay.cli.ink_replay https://example.com/trace.json")
    print()
    print("  Options:")
    print("    --ratio <ratio>      Aspect ratio (default: 16:9)")
    print(f"                         Available: {', '.join(ASPECT_RATIOS.keys())}")
    print("    --quality <qual>     Video quality (default: 720p)")
    print(f"                         Available: {', '.join(QUALITY_PRESETS.keys())}")
    print("    --brush-size <size>  Initial brush size (the trace may change it)")
    print("    --color <#rrggbb>    Initial ink color (default: black)")
    print("    --converge           Brush catches up with the pointer every frame")
    print(f"    --hold <seconds>     Hold the finished drawing (default: {DEFAULT_HOLD_SECONDS})")
    print("    --fps <n>            Video frame rate")
    print()
    print("  Trace JSON format:")
    print('    {"board": {"width": 800, "height": 600}, "events": [')
    print('      {"type": "cursor-movement", "time": 0, "x": 10, "y": 20, "pressure": 0.8},')
    print('      {"type": "brush-size-change", "time": 1200, "size": 10},')
    print('      {"type": "color-change", "time": 1500, "color": "#1e88e5"}')
    print('    ]}')
    print()
    print("  Output videos are saved to output/ directory")


def main(argv=None):
    """Main entry point for the replay tool"""
    raw_args = sys.argv[1:] if argv is None else list(argv)
    if not raw_args or raw_args[0] in ("-h", "--help"):
        _print_usage()
        sys.exit(1)

    trace_arg = raw_args[0]
    options = parse_replay_options(raw_args[1:])

    # Manual scan for the optional output positional
    output_video = None
    for arg in raw_args[1:]:
        if not arg.startswith("--") and Path(arg).suffix.lower() in VIDEO_SUFFIXES:
            output_video = arg

    if not is_url(trace_arg) and not Path(trace_arg).exists():
        handle_error(f"Trace file not found: {trace_arg}")

    if output_video is None:
        from ..filename.filename_utils import generate_timestamped_filename
        output_video = generate_timestamped_filename()
        log_info(f"Generated filename: {output_video}")

    with CleanupManager(TEMP_DIR) as cleanup:
        try:
            video_path = create_replay_video(trace_arg, output_video, cleanup, **options)
        except ValueError as e:
            handle_error(str(e))

    log_success(f"\n✓ Success! Video saved locally: {video_path}")


if __name__ == "__main__":
    main()
