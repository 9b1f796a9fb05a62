"""The physical brush: a mass dragged by the pointer through a viscous medium.

Implementation of the "filter" from Paul Haeberli's DynaDraw (1989). The
pointer pulls the tip with a force proportional to their distance, the tip
accelerates according to its mass and loses speed to friction. Heavy,
slippery brushes lag behind quick pointer motion, which is what makes the
ink look painted rather than traced.
"""

from .vector import Vector2
from ..config.config import (
    CALCULATE_SPEED, FORCE_THRESHOLD, VELOCITY_THRESHOLD, MIN_SPEED_FACTOR
)


class InactiveBrushError(RuntimeError):
    """Raised when the tip is asked to move or draw without an active stroke."""


class Idle:
    """No active stroke."""

    __slots__ = ()

    def __repr__(self):
        return "Idle"


IDLE = Idle()


class Tracking:
    """State of the tip while a stroke is being drawn"""

    __slots__ = (
        "profile", "position", "start_position", "velocity", "acceleration",
        "orientation", "previous_position", "previous_pressure",
        "pointer_position", "first_segment",
    )

    def __init__(self, position, profile):
        self.profile = profile
        self.position = position.copy()
        self.start_position = position.copy()
        self.velocity = Vector2(0, 0)
        self.acceleration = None
        self.orientation = None
        self.previous_position = position.copy()
        # None until the first radius of the stroke is computed
        self.previous_pressure = None
        self.pointer_position = position.copy()
        self.first_segment = True

    def __repr__(self):
        return f"Tracking(position={self.position!r}, velocity={self.velocity!r})"


class BrushTip:
    """Brush with all its physical properties"""

    def __init__(self, calculate_speed=CALCULATE_SPEED):
        # When on, the quicker the brush moves the thinner the print it leaves
        self.calculate_speed = calculate_speed
        self.state = IDLE

    @property
    def is_active(self):
        return isinstance(self.state, Tracking)

    @property
    def profile(self):
        return self._tracking().profile

    @property
    def position(self):
        return self._tracking().position.copy()

    def _tracking(self):
        if not isinstance(self.state, Tracking):
            raise InactiveBrushError("brush tip has no active stroke; call reset() first")
        return self.state

    def reset(self, position, profile):
        """Start tracking a new stroke

        Args:
            position: The starting point of the stroke (Vector2)
            profile: BrushProfile with the physical properties of the brush
        """
        self.state = Tracking(position, profile)

    def release(self):
        """End the stroke; the tip ignores everything until the next reset."""
        self.state = IDLE

    def apply_force(self, target, elapsed_frames):
        """Pull the tip towards the pointer for one simulation step

        Args:
            target: Pointer position (Vector2)
            elapsed_frames: Number of nominal frames elapsed since the last step

        Returns:
            float: Squared distance the tip moved (0 when the movement is too subtle)
        """
        state = self._tracking()

        force = target - state.position
        if force.length_squared() < FORCE_THRESHOLD:
            return 0  # too subtle movement

        # a = F / m
        state.acceleration = force / state.profile.mass
        state.velocity.add_inplace(state.acceleration)
        if state.velocity.length_squared() < VELOCITY_THRESHOLD:
            return 0  # nearly no movement (a "heavy" brush)

        state.pointer_position = target.copy()
        state.acceleration = None

        state.orientation = state.velocity.normal()

        # more friction means less movement
        state.velocity.scale_inplace((1 - state.profile.friction) * elapsed_frames)
        state.position.add_inplace(state.velocity)

        return state.velocity.length_squared()

    def draw(self, path, pressure):
        """Emit the segment between the last drawn position and the current one

        Args:
            path: PathSink receiving the geometry
            pressure: Raw pressure reported at the pointer
        """
        state = self._tracking()
        if state.orientation is None:
            raise InactiveBrushError("brush tip has not moved yet; nothing to draw")

        if self.calculate_speed:
            size = state.profile.size
            relative_speed = state.velocity.length() / (size * size)
        else:
            relative_speed = 0
        offset = state.orientation * self.get_radius(pressure, relative_speed)

        if state.first_segment:
            path.init_path(state.start_position + offset, state.start_position - offset)
            state.first_segment = False

        path.extend_path(state.position + offset, state.position - offset)
        path.draw()

    def start_path(self, path, point, pressure):
        """Seed the stroke width before any velocity has accumulated."""
        path.start_path(point, self.get_radius(pressure, 0))

    def get_radius(self, pressure, speed):
        """Half-width of the stroke for the given pressure and relative speed.

        Remembers the position and interpolated pressure for the next call.
        """
        state = self._tracking()
        if state.previous_pressure is None:
            state.previous_pressure = pressure

        interpolated = self.interpolate_pressure(pressure)
        radius = self.speed_factor(speed) * state.profile.size * interpolated / 2

        state.previous_position = state.position.copy()
        state.previous_pressure = interpolated
        return radius

    def interpolate_pressure(self, pressure):
        """Blend the previous and the raw pressure by how far the tip got.

        Pressure is captured at the pointer, but the tip lags behind it, so
        the tip gets the share of the pressure change that matches the share
        of the way it has covered.
        """
        state = self._tracking()
        previous = pressure if state.previous_pressure is None else state.previous_pressure

        d1 = state.position.distance_to(state.previous_position)
        d2 = state.position.distance_to(state.pointer_position)
        if d1 == 0 and d2 == 0:
            return pressure

        return (d1 / (d1 + d2)) * (pressure - previous) + previous

    @staticmethod
    def speed_factor(speed):
        """Fast strokes thin down, but never below MIN_SPEED_FACTOR of the width."""
        return max(1 - speed, MIN_SPEED_FACTOR)
