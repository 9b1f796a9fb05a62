"""Colored logging utilities for terminal differentiation.
Supports info (default), success (green), warning (yellow), error (red)
and debug (blue, only when INKREPLAY_DEBUG is set).
"""
import sys

from ..config.config import DEBUG


def color_text(text, color_code):
    """Wrap text with ANSI color code (works in most terminals)."""
    colors = {
        'red': 31,      # Errors
        'green': 32,    # Success
        'yellow': 33,   # Warnings
        'blue': 34,     # Debug
        'reset': 0
    }
    return f"\033[{colors.get(color_code, 0)}m{text}\033[0m"


def log_info(msg):
    """Standard log (white/default)."""
    print(msg)


def log_success(msg):
    """Success log (green)."""
    print(color_text(msg, 'green'))


def log_warning(msg):
    """Warning log (yellow), written to stderr so frame output stays clean."""
    print(color_text(f"Warning: {msg}", 'yellow'), file=sys.stderr)


def log_debug(msg):
    """Debug log (blue); silent unless debug mode is on."""
    if DEBUG:
        print(color_text(f"Debug: {msg}", 'blue'))


def log_error(msg):
    """Error log (red) - also exits."""
    print(color_text(f"Error: {msg}", 'red'), file=sys.stderr)
    sys.exit(1)
