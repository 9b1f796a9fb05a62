"""Configuration constants for the ink simulator and replay renderer"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root directory (robust for subdir structure like config/config.py)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load environment overrides from .env file
load_dotenv()


def _env_flag(name, default=False):
    """Read a boolean flag from the environment ("1", "true", "yes", "on")."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Folder paths
OUTPUT_DIR = PROJECT_ROOT / "output"
TEMP_DIR = PROJECT_ROOT / "temp"

# Debug builds fail fast on programming errors instead of skipping the frame
DEBUG = _env_flag("INKREPLAY_DEBUG")

# Aspect ratio presets (width:height)
ASPECT_RATIOS = {
    '16:9': (16, 9),    # Landscape (YouTube, TV)
    '9:16': (9, 16),    # Vertical/Portrait
    '1:1': (1, 1),      # Square
    '4:3': (4, 3),      # Classic whiteboard
}

# Quality presets (height in pixels)
QUALITY_PRESETS = {
    '480p': 480,
    '720p': 720,
    '1080p': 1080,
}

# Default settings
DEFAULT_ASPECT_RATIO = '16:9'
DEFAULT_QUALITY = '720p'


def calculate_dimensions(aspect_ratio=None, quality=None):
    """Calculate WIDTH and HEIGHT from aspect ratio and quality preset

    Args:
        aspect_ratio: String like '16:9' or '4:3' (None uses default)
        quality: String like '720p' or '1080p' (None uses default)

    Returns:
        tuple: (width, height)
    """
    if aspect_ratio is None:
        aspect_ratio = DEFAULT_ASPECT_RATIO
    if quality is None:
        quality = DEFAULT_QUALITY

    if aspect_ratio not in ASPECT_RATIOS:
        raise ValueError(f"Invalid aspect ratio '{aspect_ratio}'. Must be one of {list(ASPECT_RATIOS.keys())}")

    if quality not in QUALITY_PRESETS:
        raise ValueError(f"Invalid quality '{quality}'. Must be one of {list(QUALITY_PRESETS.keys())}")

    ratio_w, ratio_h = ASPECT_RATIOS[aspect_ratio]
    height = QUALITY_PRESETS[quality]
    width = int((ratio_w / ratio_h) * height)

    return width, height


# Video settings
FPS = 30

# Simulation clock: the brush physics is tuned for a 60 Hz display
SIMULATION_HZ = 60
FRAME_INTERVAL_MS = 1000 / SIMULATION_HZ

# Slow simulation = time-scaled integration (smoother curves);
# otherwise the brush converges to the pointer within every frame
SLOW_SIMULATION = _env_flag("INKREPLAY_SLOW_SIMULATION", default=True)

# Speed correction: fast strokes leave a thinner print
CALCULATE_SPEED = True

# Brush physics (larger brushes are heavier and slide further)
MIN_MASS = 1
MAX_MASS = 10
MIN_FRICTION = 0.4  # experimentally derived, gives nice results for all weights
MAX_FRICTION = 0.6

# Movement below these squared magnitudes does not register
FORCE_THRESHOLD = 1
VELOCITY_THRESHOLD = 1

# Thinnest print relative to the nominal brush width
MIN_SPEED_FACTOR = 0.4

# Brush sizes offered by the recorder toolbar (line thickness in pixels)
BRUSH_SIZES = (2, 4, 6, 10, 15, 20, 30)
MIN_BRUSH_SIZE = min(BRUSH_SIZES)
MAX_BRUSH_SIZE = max(BRUSH_SIZES)
DEFAULT_BRUSH_SIZE = 6

# Ink and board colors (BGR, as OpenCV expects)
DEFAULT_INK_COLOR = (0, 0, 0)
BOARD_BACKGROUND = (255, 255, 255)

# Seconds to hold the finished drawing at the end of the video
DEFAULT_HOLD_SECONDS = 1.0
