# src/tests/obstacles_unit.py
import random
import pytest

from src.game.config import WIDTH, SPEED_UNITS
from src.game.obstacles import Obstacle, generate, POOL_SIZES
from src.game.options import Pattern


@pytest.mark.parametrize("units", sorted(SPEED_UNITS.values()))
def test_pool_sizes_independent_of_speed(units):
    assert len(generate("asteroids", units)) == 8
    assert len(generate("walls", units)) == 3
    assert len(generate("blocks", units)) == 12
    for pattern, size in POOL_SIZES.items():
        assert len(generate(pattern, units)) == size


def test_asteroids_layout():
    rng = random.Random(7)
    for _ in range(20):
        for ob in generate(Pattern.ASTEROIDS, 4, rng):
            assert (ob.w, ob.h) == (32, 32)
            assert 0 <= ob.x < WIDTH - 32
            assert -600 <= ob.y < 0
            assert ob.vy == 4
            assert ob.vx is None


def test_blocks_layout():
    rng = random.Random(8)
    for _ in range(20):
        for ob in generate(Pattern.BLOCKS, 6, rng):
            assert (ob.w, ob.h) == (20, 20)
            assert 0 <= ob.x < WIDTH - 20
            assert -300 <= ob.y < 0
            assert ob.vy == 6
            assert ob.vx is None


def test_walls_layout_is_fixed():
    walls = generate(Pattern.WALLS, 2)
    assert [(w.x, w.y) for w in walls] == [(0, -100), (300, -300), (600, -500)]
    assert all((w.w, w.h) == (200, 50) for w in walls)
    assert [w.vx for w in walls] == [2, -2, 2]
    assert all(w.vy == 2 for w in walls)


def test_seeded_generation_is_reproducible():
    a = generate(Pattern.BLOCKS, 4, random.Random(99))
    b = generate(Pattern.BLOCKS, 4, random.Random(99))
    assert a == b


def test_unknown_pattern_rejected():
    with pytest.raises(ValueError):
        generate("spirals", 4)


# ---- motion ----

def test_bounce_at_right_edge():
    ob = Obstacle(x=598, y=0, w=200, h=50, vy=4, vx=4)
    ob.advance(bounce=True)
    assert ob.x == 602 and ob.vx == -4
    ob.advance(bounce=True)
    assert ob.x == 598 and ob.vx == -4, "leaving the edge must not flip again"


def test_bounce_at_left_edge():
    ob = Obstacle(x=2, y=0, w=200, h=50, vy=4, vx=-4)
    ob.advance(bounce=True)
    assert ob.x == -2 and ob.vx == 4
    ob.advance(bounce=True)
    assert ob.x == 2 and ob.vx == 4


def test_no_flip_mid_field():
    ob = Obstacle(x=300, y=0, w=200, h=50, vy=4, vx=4)
    for _ in range(10):
        ob.advance(bounce=True)
        assert ob.vx == 4
    assert ob.x == 340 and ob.y == 40


def test_no_bounce_when_disabled():
    ob = Obstacle(x=598, y=0, w=200, h=50, vy=4, vx=4)
    ob.advance(bounce=False)
    assert ob.x == 602 and ob.vx == 4


def test_recycle_keeps_velocity():
    rng = random.Random(3)
    ob = Obstacle(x=100, y=601, w=32, h=32, vy=6)
    assert ob.needs_recycle()
    ob.recycle(rng, keep_x=False)
    assert -200 <= ob.y < 0
    assert 0 <= ob.x < WIDTH - 32
    assert ob.vy == 6

    wall = Obstacle(x=123, y=650, w=200, h=50, vy=2, vx=-2)
    wall.recycle(rng, keep_x=True)
    assert wall.x == 123 and wall.vx == -2 and -200 <= wall.y < 0


def test_exactly_600_is_not_recycled():
    assert not Obstacle(x=0, y=600, w=20, h=20, vy=2).needs_recycle()
