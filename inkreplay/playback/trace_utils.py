"""Loading and validation of recorded cursor traces.

A trace is a JSON array of events, or an object
{"board": {"width": W, "height": H}, "events": [...]} when the recording
was captured on a board of a known size. Events:

    {"type": "cursor-movement", "time": 0.0, "x": 10, "y": 20, "pressure": 0.8}
    {"type": "brush-size-change", "time": 1200, "size": 10}
    {"type": "color-change", "time": 1500, "color": "#1e88e5"}

Events without "type" are cursor movements; times are in milliseconds.
"""

import json
import math
from pathlib import Path

from ..download.download_utils import resolve_trace_path
from ..render.board import parse_color
from ..utils.error_handler import handle_error

CURSOR_MOVEMENT = "cursor-movement"
BRUSH_SIZE_CHANGE = "brush-size-change"
COLOR_CHANGE = "color-change"
EVENT_TYPES = (CURSOR_MOVEMENT, BRUSH_SIZE_CHANGE, COLOR_CHANGE)


def _number(event, key, idx):
    value = event.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"Event at index {idx}: '{key}' must be a number, got {value!r}")
    return float(value)


def validate_trace(data):
    """Validate parsed trace JSON and normalize its events

    Args:
        data: Parsed JSON (list of events or object with 'events')

    Returns:
        tuple: (events, board) where events is a list of dicts and board is
               (width, height) of the recording surface or None

    Raises:
        ValueError: On any malformed event
    """
    board = None
    if isinstance(data, dict):
        events = data.get("events")
        board_info = data.get("board")
        if board_info is not None:
            if not isinstance(board_info, dict):
                raise ValueError("'board' must be an object with 'width' and 'height'")
            width = _number(board_info, "width", "board")
            height = _number(board_info, "height", "board")
            if width <= 0 or height <= 0:
                raise ValueError("'board' width and height must be positive")
            board = (width, height)
    else:
        events = data

    if not isinstance(events, list):
        raise ValueError("Trace must be an array of events (or an object with an 'events' array)")

    normalized = []
    last_time = 0.0
    for idx, event in enumerate(events):
        if not isinstance(event, dict):
            raise ValueError(f"Event at index {idx} must be an object")

        event_type = event.get("type", CURSOR_MOVEMENT)
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Invalid event type '{event_type}' at index {idx}. Must be one of {list(EVENT_TYPES)}")

        time = _number(event, "time", idx) if "time" in event else last_time
        if time < last_time:
            raise ValueError(f"Event at index {idx}: time {time} goes back before {last_time}")
        last_time = time

        item = {"type": event_type, "time": time}
        if event_type == CURSOR_MOVEMENT:
            item["x"] = _number(event, "x", idx)
            item["y"] = _number(event, "y", idx)
            item["pressure"] = _number(event, "pressure", idx)
            if not 0.0 <= item["pressure"] <= 1.0:
                raise ValueError(f"Event at index {idx}: pressure must be between 0.0 and 1.0")
        elif event_type == BRUSH_SIZE_CHANGE:
            item["size"] = _number(event, "size", idx)
            if item["size"] <= 0:
                raise ValueError(f"Event at index {idx}: brush size must be positive")
        else:
            item["color"] = parse_color(event.get("color"))
        normalized.append(item)

    return normalized, board


def scale_events(events, board, width, height):
    """Map cursor coordinates from the recording board onto the output canvas."""
    if board is None:
        return list(events)
    sx = width / board[0]
    sy = height / board[1]
    scaled = []
    for event in events:
        if event["type"] == CURSOR_MOVEMENT:
            event = dict(event, x=event["x"] * sx, y=event["y"] * sy)
        scaled.append(event)
    return scaled


def close_trace(events):
    """Append a pen-up when the recording ends in the middle of a stroke."""
    cursor_events = [e for e in events if e["type"] == CURSOR_MOVEMENT]
    if cursor_events and cursor_events[-1]["pressure"] > 0:
        last = cursor_events[-1]
        events = events + [dict(last, time=events[-1]["time"], pressure=0.0)]
    return events


def trace_duration(events):
    """Length of the recording in milliseconds."""
    return events[-1]["time"] if events else 0.0


def load_trace(path_or_url, cleanup_manager, width, height):
    """Load a trace file or URL and prepare its events for replay on a width x height canvas

    Raises:
        ValueError: If the trace is missing, not JSON, or malformed
    """
    trace_path = Path(resolve_trace_path(path_or_url, cleanup_manager))
    if not trace_path.exists():
        raise ValueError(f"Trace file not found: {trace_path}")

    try:
        with open(trace_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in trace file: {e}")

    events, board = validate_trace(data)
    return close_trace(scale_events(events, board, width, height))


def load_and_validate_trace(path_or_url, cleanup_manager, width, height):
    """CLI wrapper around load_trace: exits with a red error message on failure."""
    try:
        return load_trace(path_or_url, cleanup_manager, width, height)
    except ValueError as e:
        handle_error(str(e))
