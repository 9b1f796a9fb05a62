#!/usr/bin/env python3
"""
Vector ink replay
Renders a recorded pen/mouse trace as smooth brush strokes into a video

    python ink_replay.py <trace.json> [output.mp4] [OPTIONS]
"""

from inkreplay.cli.ink_replay import main


if __name__ == "__main__":
    main()
