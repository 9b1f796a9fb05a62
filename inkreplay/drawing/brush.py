"""Brush profiles: physical constants derived from the brush size"""

from dataclasses import dataclass

from ..config.config import (
    MIN_BRUSH_SIZE, MAX_BRUSH_SIZE,
    MIN_MASS, MAX_MASS, MIN_FRICTION, MAX_FRICTION
)


@dataclass(frozen=True)
class BrushProfile:
    """Set of brush properties that have effect on the outcome"""
    mass: float
    friction: float
    size: float


class BrushProfileCache:
    """Lazily built table of brush profiles, one per distinct brush size.

    Each brush size gets its own physics: larger brushes are heavier (more
    mass resists quick direction changes) and slipperier (less friction lets
    them glide further per frame). Sizes outside [min_brush_size,
    max_brush_size] are extrapolated, not clamped.
    """

    def __init__(self, min_brush_size=MIN_BRUSH_SIZE, max_brush_size=MAX_BRUSH_SIZE,
                 min_mass=MIN_MASS, max_mass=MAX_MASS,
                 min_friction=MIN_FRICTION, max_friction=MAX_FRICTION):
        if max_brush_size <= min_brush_size:
            raise ValueError(
                f"max_brush_size ({max_brush_size}) must be greater than "
                f"min_brush_size ({min_brush_size})"
            )
        if min_mass <= 0:
            raise ValueError(f"min_mass must be positive, got {min_mass}")

        self.min_brush_size = min_brush_size
        self.max_brush_size = max_brush_size
        self.min_mass = min_mass
        self.max_mass = max_mass
        self.min_friction = min_friction
        self.max_friction = max_friction
        self._profiles = {}

    def _progress(self, size):
        return (size - self.min_brush_size) / (self.max_brush_size - self.min_brush_size)

    def interpolate_mass(self, size):
        return self.min_mass + (self.max_mass - self.min_mass) * self._progress(size)

    def interpolate_friction(self, size):
        # Inverted direction vs. mass
        return self.max_friction - (self.max_friction - self.min_friction) * self._progress(size)

    def get_profile(self, size):
        """Get (creating on first use) the profile for a brush size

        Args:
            size: Brush size (line thickness)

        Returns:
            BrushProfile: The same instance for every call with an equal size
        """
        key = round(float(size), 3)
        profile = self._profiles.get(key)
        if profile is None:
            profile = BrushProfile(
                mass=self.interpolate_mass(key),
                friction=self.interpolate_friction(key),
                size=key,
            )
            self._profiles[key] = profile
        return profile

    def __len__(self):
        return len(self._profiles)

    def __contains__(self, size):
        return round(float(size), 3) in self._profiles
