"""Replay of a recorded trace on a virtual frame clock"""

import math

from .trace_utils import CURSOR_MOVEMENT, BRUSH_SIZE_CHANGE, COLOR_CHANGE, trace_duration
from ..config.config import FPS, SLOW_SIMULATION, DEFAULT_BRUSH_SIZE, DEFAULT_INK_COLOR
from ..drawing.cursor import CursorState
from ..drawing.dynadraw import StrokeSimulator
from ..render.board import Board
from ..utils.error_handler import report_exception
from ..utils.log_utils import log_warning


class ReplaySession:
    """Single dispatch queue for recorded events and frame ticks.

    For every frame, all events recorded up to the frame time are delivered
    before the simulator ticks, so a stroke start is always fully processed
    before the brush moves.
    """

    def __init__(self, events, simulator, board, fps=FPS, max_settle_seconds=10.0):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.events = events
        self.simulator = simulator
        self.board = board
        self.fps = fps
        self.frame_duration = 1000 / fps
        self.max_settle_frames = int(max_settle_seconds * fps)
        self.now = 0.0
        self.next_event = 0
        self.paused = False
        self._settle_frames = 0

    @property
    def duration(self):
        """Length of the recording in milliseconds."""
        return trace_duration(self.events)

    def estimated_frames(self):
        """Frames needed to cover the recording (settling frames not included)."""
        return int(math.floor(self.duration / self.frame_duration)) + 1

    @property
    def finished(self):
        if self.next_event < len(self.events):
            return False
        if not self.simulator.is_drawing:
            return True
        return self._settle_frames >= self.max_settle_frames

    def pause(self):
        """Freeze the clock; the stroke in progress is kept and continues on resume()."""
        self.paused = True
        self.simulator.pause()

    def resume(self):
        self.paused = False
        self.simulator.resume()

    def dispatch(self, event):
        event_type = event["type"]
        if event_type == CURSOR_MOVEMENT:
            self.simulator.observe_cursor_movement(
                CursorState(event["x"], event["y"], event["pressure"], event["time"])
            )
        elif event_type == BRUSH_SIZE_CHANGE:
            try:
                self.simulator.set_brush_size(event["size"])
            except (KeyError, TypeError, ValueError) as e:
                report_exception("Brush size change skipped", e, self.simulator.strict)
        elif event_type == COLOR_CHANGE:
            try:
                self.board.set_color(event["color"])
            except (KeyError, TypeError, ValueError) as e:
                report_exception("Color change skipped", e, self.simulator.strict)

    def step(self):
        """Advance one video frame

        Returns:
            numpy.ndarray: Snapshot of the board after the frame
        """
        if self.paused:
            return self.board.snapshot()

        while self.next_event < len(self.events) and self.events[self.next_event]["time"] <= self.now:
            self.dispatch(self.events[self.next_event])
            self.next_event += 1

        self.simulator.catch_up(self.now)
        if self.next_event >= len(self.events):
            self._settle_frames += 1

        self.now += self.frame_duration
        return self.board.snapshot()

    def frames(self, hold_seconds=0.0):
        """Generate every frame of the replay, then hold the final drawing

        Stops early (without the hold) when the session gets paused; calling
        frames() again after resume() continues from the same point.

        Args:
            hold_seconds: How long to keep showing the finished board

        Yields:
            numpy.ndarray: BGR frames
        """
        while not self.finished:
            if self.paused:
                return
            yield self.step()

        if self.simulator.is_drawing:
            log_warning(f"Brush still moving after {self.max_settle_frames} settling frames; stopping replay")

        for _ in range(int(hold_seconds * self.fps)):
            yield self.board.snapshot()


def create_replay(events, width, height, brush_size=DEFAULT_BRUSH_SIZE,
                  slow_simulation=SLOW_SIMULATION, color=DEFAULT_INK_COLOR, fps=FPS):
    """Wire a board and a simulator together for replaying a trace

    Args:
        events: Validated trace events (see trace_utils)
        width, height: Canvas size in pixels
        brush_size: Brush size until the trace changes it
        slow_simulation: Time-scaled (True) or converge-to-target (False) integration
        color: Initial ink color (BGR)
        fps: Video frame rate

    Returns:
        ReplaySession: Ready to generate frames
    """
    board = Board(width, height, color=color)
    simulator = StrokeSimulator(board.create_path, slow_simulation=slow_simulation, brush_size=brush_size)
    simulator.on_path_finished(board.collect)
    return ReplaySession(events, simulator, board, fps=fps)
