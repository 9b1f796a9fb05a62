"""Drawing board: the canvas, the current ink color and the finished strokes"""

import numpy as np

from .canvas_path import CanvasPath
from ..config.config import DEFAULT_INK_COLOR, BOARD_BACKGROUND


def parse_color(value):
    """Parse a '#rrggbb' string (or an RGB sequence) into a BGR tuple

    Args:
        value: Hex string like '#ff8800' or a sequence of three 0-255 ints (RGB)

    Returns:
        tuple: (b, g, r)

    Raises:
        ValueError: If the color cannot be parsed
    """
    if isinstance(value, str):
        hex_value = value.strip().lstrip('#')
        if len(hex_value) == 3:
            hex_value = ''.join(ch * 2 for ch in hex_value)
        if len(hex_value) != 6:
            raise ValueError(f"Invalid color '{value}'. Use #rrggbb")
        try:
            r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid color '{value}'. Use #rrggbb")
        return (b, g, r)

    try:
        r, g, b = (int(c) for c in value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid color {value!r}. Use #rrggbb or [r, g, b]")
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"Color components must be between 0 and 255: {value!r}")
    return (b, g, r)


class Board:
    """A white board the simulator paints on.

    create_path is the simulator's path factory; collect is meant to be
    registered as its on_path_finished observer.
    """

    def __init__(self, width, height, color=DEFAULT_INK_COLOR, background=BOARD_BACKGROUND):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = tuple(background)
        self.color = tuple(color)
        self.canvas = np.empty((height, width, 3), dtype=np.uint8)
        self.paths = []
        self.clear()

    def set_color(self, color):
        """Change the ink color for the next stroke (BGR tuple or '#rrggbb')."""
        self.color = parse_color(color) if isinstance(color, str) else tuple(color)

    def create_path(self):
        return CanvasPath(self.canvas, self.color)

    def collect(self, path):
        self.paths.append(path)

    def clear(self):
        self.canvas[:] = self.background
        self.paths = []

    def snapshot(self):
        """Copy of the current canvas (safe to keep as a video frame)."""
        return self.canvas.copy()
