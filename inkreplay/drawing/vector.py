"""2D vector math for the brush simulation"""

import math


class Vector2:
    """A 2D vector with value-style operators and in-place variants.

    The operators (+, -, *, /) always return a new vector. The *_inplace
    methods mutate and return self; the simulation step uses them on
    vectors it owns exclusively.
    """

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"

    def copy(self):
        return Vector2(self.x, self.y)

    def length_squared(self):
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def normal(self):
        """Unit vector perpendicular to this one (rotated 90 degrees).

        The zero vector has no normal; callers must check the magnitude first.
        """
        length = self.length()
        if length == 0:
            raise ZeroDivisionError("normal of a zero vector is undefined")
        return Vector2(-self.y / length, self.x / length)

    def add_inplace(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def sub_inplace(self, other):
        self.x -= other.x
        self.y -= other.y
        return self

    def scale_inplace(self, scalar):
        self.x *= scalar
        self.y *= scalar
        return self

    def is_close(self, other, tolerance=1e-9):
        """Approximate equality, for comparing simulated positions."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


__all__ = ["Vector2"]
