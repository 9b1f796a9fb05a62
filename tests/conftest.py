import pytest

from inkreplay.drawing.brush import BrushProfile
from inkreplay.drawing.brush_tip import BrushTip
from inkreplay.drawing.dynadraw import StrokeSimulator
from inkreplay.drawing.path import RecordingPath
from inkreplay.drawing.vector import Vector2


@pytest.fixture
def profile():
    """Brush with mass 5 and friction 0.5 (the worked example in the docs)."""
    return BrushProfile(mass=5, friction=0.5, size=10)


@pytest.fixture
def tip(profile):
    tip = BrushTip()
    tip.reset(Vector2(0, 0), profile)
    return tip


@pytest.fixture
def make_simulator():
    """Build a simulator whose brushes all have mass 5 and friction 0.5."""
    paths = []

    def factory():
        path = RecordingPath()
        paths.append(path)
        return path

    def build(**overrides):
        options = dict(
            min_brush_size=5, max_brush_size=20,
            min_mass=5, max_mass=5,
            min_friction=0.5, max_friction=0.5,
            brush_size=10, slow_simulation=True, strict=False,
        )
        options.update(overrides)
        simulator = StrokeSimulator(options.pop("path_factory", factory), **options)
        simulator.created_paths = paths
        return simulator

    return build
