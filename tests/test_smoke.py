"""Tests for puff spawning, drift, retirement and visibility."""

import random

import pytest
from house_scene.smoke import Puff, SmokePlume
from house_scene.surface import RasterSurface

from conftest import FixedRandom


def test_plume_starts_with_one_puff(still_air):
    """Test a new plume is seeded with a single narrow puff."""
    plume = SmokePlume(still_air)
    assert len(plume) == 1
    puff = plume.puffs[0]
    assert puff.points.tolist() == [123, 126, 128]
    assert puff.band.tolist() == [153, 147]
    assert puff.age == 0


def test_coin_flip_spawns_wide_puff():
    """Test a winning coin flip adds two extra points."""
    plume = SmokePlume(FixedRandom(0.9))
    assert plume.puffs[0].points.tolist() == [123, 126, 128, 131, 133]


def test_single_step_without_jitter(still_air):
    """Test one step drifts points right and the band up by the fixed velocity."""
    plume = SmokePlume(still_air)
    plume.step()
    puff = plume.puffs[0]
    assert puff.points.tolist() == pytest.approx([123.8, 126.8, 128.8])
    assert puff.band.tolist() == pytest.approx([152.2, 146.2])
    assert puff.age == 1


def test_jitter_range():
    """Test jitter stays within [-randomness, randomness)."""
    plume = SmokePlume(random.Random(3))
    for _ in range(1000):
        j = plume.jitter()
        assert -0.4 <= j < 0.4


def test_jitter_shared_within_puff():
    """Test all points and both band values of a puff move by the same amount."""
    plume = SmokePlume(random.Random(7))
    puff = plume.puffs[0]
    before_points = puff.points.copy()
    before_band = puff.band.copy()
    plume.step()
    dx = puff.points - before_points
    dy = puff.band - before_band
    assert dx.tolist() == pytest.approx([dx[0]] * len(dx))
    assert dy[0] == pytest.approx(dy[1])
    # Both axes share the same jitter draw
    assert dx[0] - 0.8 == pytest.approx(dy[0] + 0.8)


def test_spawn_when_newest_passes_threshold(still_air):
    """Test the plume grows by exactly one puff when the newest puff passes x=150."""
    plume = SmokePlume(still_air)
    for _ in range(33):
        plume.step()
    assert len(plume) == 1
    assert plume.puffs[-1].points[0] < 150

    plume.step()
    assert len(plume) == 2
    assert plume.puffs[0].points[0] > 150
    assert plume.puffs[-1].age == 0
    assert plume.puffs[-1].points.tolist() == [123, 126, 128]


def test_at_most_one_spawn_per_tick(still_air):
    """Test the plume never grows by more than one puff per step."""
    plume = SmokePlume(still_air)
    previous = len(plume)
    for _ in range(500):
        plume.step()
        assert len(plume) - previous <= 1
        previous = len(plume)


def test_retire_when_oldest_leaves_surface(still_air):
    """Test the oldest puff is dropped from the front once it passes the right edge."""
    plume = SmokePlume(still_air)
    for _ in range(221):
        plume.step()
    # Seed puff plus spawns at ticks 34, 68, 102, 136, 170 and 204
    assert len(plume) == 7
    oldest = plume.puffs[0]
    second = plume.puffs[1]
    assert oldest.points[0] <= 300

    plume.step()
    assert len(plume) == 6
    assert oldest not in plume.puffs
    assert plume.puffs[0] is second


def test_plume_never_empties():
    """Test continuous stepping keeps at least one puff alive and the plume bounded."""
    plume = SmokePlume(random.Random(11))
    for _ in range(3000):
        plume.step()
        assert 1 <= len(plume) <= 12


def test_puffs_ordered_oldest_first():
    """Test ages decrease from the front of the plume to the back."""
    plume = SmokePlume(random.Random(5))
    for _ in range(400):
        plume.step()
    ages = [puff.age for puff in plume.puffs]
    assert ages == sorted(ages, reverse=True)


def test_point_count_fixed_after_spawn():
    """Test a puff keeps its number of points for its whole life."""
    plume = SmokePlume(random.Random(2))
    counts = {id(puff): len(puff.points) for puff in plume.puffs}
    for _ in range(300):
        plume.step()
        for puff in plume.puffs:
            counts.setdefault(id(puff), len(puff.points))
            assert len(puff.points) == counts[id(puff)]
            assert len(puff.points) in (3, 5)


def test_fresh_puff_is_invisible(still_air):
    """Test no circle is drawn the instant a puff spawns."""
    plume = SmokePlume(still_air)
    assert list(plume.circles()) == []


def test_points_appear_with_age():
    """Test point i only shows once age > i * 1.5."""
    puff = Puff([123, 126, 128, 131, 133], [153, 147])
    puff.age = 1
    assert [puff.is_visible(i) for i in range(5)] == [True, False, False, False, False]
    puff.age = 2
    assert [puff.is_visible(i) for i in range(5)] == [True, True, False, False, False]
    puff.age = 7
    assert [puff.is_visible(i) for i in range(5)] == [True, True, True, True, True]
    puff.age = 6
    assert puff.is_visible(3) is True
    assert puff.is_visible(4) is False


def test_circles_alternate_band_and_rise(still_air):
    """Test visible circles alternate band offsets and lift by two units per index."""
    plume = SmokePlume(still_air)
    puff = plume.puffs[0]
    puff.age = 10
    circles = list(plume.circles())
    assert circles == [
        (123.0, 153.0, 2.0),
        (126.0, 147.0 - 2, 2.0),
        (128.0, 153.0 - 4, 2.0),
    ]


def test_radius_grows_with_age():
    """Test radius is age divided by the base radius."""
    puff = Puff([123], [153, 147])
    assert puff.radius() == 0
    puff.age = 15
    assert puff.radius() == 3
    assert puff.radius(10) == 1.5


def test_render_draws_grey_to_white(still_air):
    """Test rendering paints smoke circles with the horizontal gradient."""
    plume = SmokePlume(still_air)
    plume.puffs[0].age = 20
    surface = RasterSurface(300, 300)
    plume.render(surface)
    r, g, b = surface.pixels[153, 123]
    assert r == pytest.approx(g)
    assert g == pytest.approx(b)
    # Grey at x=0 is 0.5, white at x=290
    assert 0.5 < r < 1.0
    assert surface.pixels[0, 0].tolist() == [0.0, 0.0, 0.0]


def test_render_fresh_plume_draws_nothing(still_air):
    """Test a freshly seeded plume leaves the surface untouched."""
    plume = SmokePlume(still_air)
    surface = RasterSurface(300, 300)
    plume.render(surface)
    assert not surface.pixels.any()


def test_retire_must_exceed_spawn():
    """Test thresholds that would let retirement overtake spawning are rejected."""
    with pytest.raises(ValueError):
        SmokePlume(FixedRandom(), spawn_x=150, retire_x=150)


def test_base_radius_must_be_positive():
    """Test a zero base radius is rejected."""
    with pytest.raises(ValueError):
        SmokePlume(FixedRandom(), base_radius=0)


def test_step_asserts_on_empty_plume(still_air):
    """Test stepping an emptied plume fails fast."""
    plume = SmokePlume(still_air)
    plume.retire_puff()
    with pytest.raises(AssertionError):
        plume.step()
