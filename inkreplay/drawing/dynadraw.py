"""Stroke simulator: turns cursor samples into smooth vector ink.

Cursor samples and animation frames arrive from two independent sources.
Samples only move the target the brush is pulled towards; every frame tick
advances the brush physics and forwards the segments it produces to the
active path. Both sources must be dispatched from one queue (see
ReplaySession); samples coming from another thread go through submit().
"""

import math
import queue

from .brush import BrushProfileCache
from .brush_tip import BrushTip, InactiveBrushError
from .cursor import CursorState
from .integration import create_integration
from .vector import Vector2
from ..config.config import (
    DEBUG, SLOW_SIMULATION, CALCULATE_SPEED, FRAME_INTERVAL_MS, DEFAULT_BRUSH_SIZE,
    MIN_BRUSH_SIZE, MAX_BRUSH_SIZE, MIN_MASS, MAX_MASS, MIN_FRICTION, MAX_FRICTION
)
from ..utils.error_handler import report_exception
from ..utils.log_utils import log_debug


class StrokeSimulator:
    """Implementation of DynaDraw, the algorithm created in 1989 by Paul Haeberli.

    Args:
        path_factory: Zero-argument callable returning a fresh PathSink per stroke
        slow_simulation: Time-scaled integration when True, converge-to-target when False
        min_brush_size, max_brush_size: Brush size range the physics is interpolated over
        min_mass, max_mass, min_friction, max_friction: Physical constants range
        brush_size: Initial brush size
        calculate_speed: Thin the stroke when the brush moves fast
        strict: Raise on programming errors instead of skipping (defaults to debug mode)
        integration: IntegrationStrategy overriding slow_simulation
        frame_interval: Nominal frame duration in milliseconds
    """

    def __init__(self, path_factory, slow_simulation=SLOW_SIMULATION,
                 min_brush_size=MIN_BRUSH_SIZE, max_brush_size=MAX_BRUSH_SIZE,
                 min_mass=MIN_MASS, max_mass=MAX_MASS,
                 min_friction=MIN_FRICTION, max_friction=MAX_FRICTION,
                 brush_size=DEFAULT_BRUSH_SIZE, calculate_speed=CALCULATE_SPEED,
                 strict=None, integration=None, frame_interval=FRAME_INTERVAL_MS):
        if not callable(path_factory):
            raise ValueError("path_factory must be callable")
        if frame_interval <= 0:
            raise ValueError(f"frame_interval must be positive, got {frame_interval}")

        self.path_factory = path_factory
        self.profiles = BrushProfileCache(
            min_brush_size, max_brush_size, min_mass, max_mass, min_friction, max_friction
        )
        self.tip = BrushTip(calculate_speed)
        self.integration = integration if integration is not None else create_integration(slow_simulation)
        self.strict = DEBUG if strict is None else strict
        self.frame_interval = frame_interval
        self.brush_size = None
        self.set_brush_size(brush_size)

        # Currently drawn path
        self.path = None
        # Last valid sample received
        self.last_state = None
        self.running = True

        # Next target of the brush and its pressure
        self._target = None
        self._pressure = 0.0
        self._pending = False
        self._pen_down = False
        self._last_tick_time = None

        self._inbox = queue.SimpleQueue()
        self._path_started = []
        self._path_finished = []

    @property
    def is_drawing(self):
        """True while a stroke is open (pen down or brush still settling)."""
        return self.path is not None

    def on_path_started(self, callback):
        """Register callback(path), called right after a stroke gets its path."""
        self._path_started.append(callback)

    def on_path_finished(self, callback):
        """Register callback(path), called once a stroke is complete and released."""
        self._path_finished.append(callback)

    def set_brush_size(self, size):
        """Set the brush size used by the next stroke

        Args:
            size: The new size of the brush (line thickness)
        """
        if size is None or size <= 0:
            raise ValueError(f"Brush size must be positive, got {size}")
        self.brush_size = size

    def submit(self, sample):
        """Queue a cursor sample; it is processed at the start of the next tick.

        Safe to call from an input thread; only tick() touches the brush.
        """
        self._inbox.put(sample)

    def observe_cursor_movement(self, sample):
        """Process the next cursor sample

        Args:
            sample: CursorState, or a mapping/object with x, y, pressure (and time)
        """
        try:
            state = CursorState.from_mapping(sample)
        except ValueError as e:
            report_exception("Ignoring malformed cursor sample", e, self.strict)
            return

        try:
            point = Vector2(state.x, state.y)
            last = self.last_state
            if state.pen_down:
                if last is None or not last.pen_down:
                    self._begin_path(point, state.pressure)
                else:
                    self.next_point(point, state.pressure)
            elif last is not None and last.pen_down:
                self.end_path(point)
        except Exception as e:
            report_exception("Cursor sample processing failed", e, self.strict)

        self.last_state = state

    def _begin_path(self, point, pressure):
        if self.path is not None:
            # previous stroke was still settling after pen-up
            self._finish_path()

        self.path = self.path_factory()
        for callback in self._path_started:
            callback(self.path)
        self.start_path(point, pressure)

    def start_path(self, position, pressure):
        """Start drawing a new path at the given position."""
        self.tip.reset(position, self.profiles.get_profile(self.brush_size))
        self._target = position
        self._pressure = pressure
        self._pen_down = True
        self._pending = True
        self.tip.start_path(self.path, position, pressure)
        log_debug(f"Stroke started at {position} (brush size {self.brush_size})")

    def next_point(self, position, pressure):
        """Move the target; the frame loop pulls the brush towards it."""
        self._target = position
        self._pressure = pressure
        self._pending = True

    def end_path(self, position):
        """Pen released: the brush settles at the final position, then the path closes."""
        self._target = position
        self._pen_down = False
        self._pending = True

    def pause(self):
        """Stop simulating; brush and path state are kept for resume()."""
        self.running = False

    def resume(self):
        """Continue the simulation; the next tick is treated as a single frame."""
        self.running = True
        self._last_tick_time = None

    def tick(self, now):
        """Advance the simulation for one animation frame

        Args:
            now: Current frame time in milliseconds

        Returns:
            bool: True if the brush is still moving
        """
        if not self.running:
            return False

        self._drain_inbox()

        elapsed_frames = self._elapsed_frames(now)
        if elapsed_frames is None or not self._pending:
            return False

        if not self.tip.is_active:
            if self.strict:
                raise InactiveBrushError("frame tick has a pending target but no active stroke")
            self._pending = False
            return False

        try:
            moving = self.integration.advance(
                self.tip, self.path, self._target, self._pressure, elapsed_frames
            )
        except Exception as e:
            report_exception("Simulation tick failed", e, self.strict)
            moving = False

        if not moving:
            # skip the physics until the next sample moves the target
            self._pending = False
            if not self._pen_down:
                self._finish_path()
        return moving

    def catch_up(self, now):
        """Tick at the nominal frame interval until the clock reaches now

        Hosts that redraw less often than the simulation rate (a 30 fps
        video, a throttled window) call this instead of tick(), so no single
        step covers more than one nominal frame. Drag is (1 - friction) times
        the elapsed frames and must stay below 1 for low-friction brushes.

        Args:
            now: Current host time in milliseconds

        Returns:
            bool: True if the brush is still moving
        """
        last = self._last_tick_time
        if last is None or not self.running or now <= last:
            return self.tick(now)

        # tolerance keeps an exact multiple of the interval from gaining a step
        steps = max(1, math.ceil((now - last) / self.frame_interval - 1e-6))
        moving = False
        for step in range(1, steps + 1):
            moving = self.tick(last + (now - last) * step / steps)
        return moving

    def _drain_inbox(self):
        while True:
            try:
                sample = self._inbox.get_nowait()
            except queue.Empty:
                return
            self.observe_cursor_movement(sample)

    def _elapsed_frames(self, now):
        last = self._last_tick_time
        if last is None:
            self._last_tick_time = now
            return 1.0

        elapsed = (now - last) / self.frame_interval
        if elapsed <= 0:
            return None
        self._last_tick_time = now
        return elapsed

    def _finish_path(self):
        path = self.path
        self.path = None
        self._pending = False
        self.tip.release()
        if path is None:
            return
        log_debug("Stroke finished")
        for callback in self._path_finished:
            callback(path)


DynaDraw = StrokeSimulator
