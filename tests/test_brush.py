import pytest

from inkreplay.drawing.brush import BrushProfile, BrushProfileCache


@pytest.fixture
def cache():
    return BrushProfileCache(min_brush_size=5, max_brush_size=20,
                             min_mass=1, max_mass=10,
                             min_friction=0.4, max_friction=0.6)


def test_mass_is_interpolated_from_size(cache):
    profile = cache.get_profile(10)

    assert profile.mass == pytest.approx(4.0)
    assert profile.friction == pytest.approx(0.6 - 0.2 / 3)
    assert profile.size == 10


def test_range_ends(cache):
    smallest = cache.get_profile(5)
    largest = cache.get_profile(20)

    assert (smallest.mass, smallest.friction) == pytest.approx((1, 0.6))
    assert (largest.mass, largest.friction) == pytest.approx((10, 0.4))


def test_larger_brushes_are_heavier_and_slipperier(cache):
    sizes = [6, 8, 11, 15, 19]
    profiles = [cache.get_profile(size) for size in sizes]

    for smaller, larger in zip(profiles, profiles[1:]):
        assert smaller.mass <= larger.mass
        assert smaller.friction >= larger.friction


def test_profiles_are_memoized(cache):
    first = cache.get_profile(10)

    assert cache.get_profile(10) is first
    assert cache.get_profile(10.0) is first
    assert 10 in cache
    assert len(cache) == 1


def test_sizes_outside_range_are_extrapolated(cache):
    profile = cache.get_profile(35)

    assert profile.mass == pytest.approx(19.0)
    assert profile.friction == pytest.approx(0.2)


def test_profile_is_immutable():
    profile = BrushProfile(mass=1, friction=0.5, size=2)

    with pytest.raises(AttributeError):
        profile.mass = 3


@pytest.mark.parametrize("min_size, max_size", [(10, 10), (20, 5)])
def test_empty_size_range_is_rejected(min_size, max_size):
    with pytest.raises(ValueError):
        BrushProfileCache(min_brush_size=min_size, max_brush_size=max_size)
