"""Path sink interface: the drawing commands the simulator emits"""

from abc import ABC, abstractmethod


class PathSink(ABC):
    """Target of the drawing commands for one stroke.

    The simulator calls, in order: one start_path, then for every emitted
    segment either init_path (first segment only) or nothing, followed by
    extend_path and draw.
    """

    @abstractmethod
    def start_path(self, point, radius):
        """Seed the stroke with a dot at point with the given radius."""

    @abstractmethod
    def init_path(self, edge_a, edge_b):
        """Set the two edges of the stroke's first cross-section."""

    @abstractmethod
    def extend_path(self, edge_a, edge_b):
        """Append a cross-section; the segment from the previous one is pending."""

    @abstractmethod
    def draw(self):
        """Render pending segments."""


class RecordingPath(PathSink):
    """Path sink that only records the commands it receives.

    Useful for tests and for inspecting a simulation without a canvas.
    """

    def __init__(self):
        self.commands = []

    def start_path(self, point, radius):
        self.commands.append(("start_path", point.copy(), radius))

    def init_path(self, edge_a, edge_b):
        self.commands.append(("init_path", edge_a.copy(), edge_b.copy()))

    def extend_path(self, edge_a, edge_b):
        self.commands.append(("extend_path", edge_a.copy(), edge_b.copy()))

    def draw(self):
        self.commands.append(("draw",))

    def names(self):
        """Command names in call order."""
        return [command[0] for command in self.commands]

    def count(self, name):
        return sum(1 for command in self.commands if command[0] == name)
