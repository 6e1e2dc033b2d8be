# src/tests/geometry_unit.py
import pygame
from src.game.geometry import overlaps, first_overlap


def test_identical_rects_overlap():
    a = pygame.Rect(384, 568, 32, 32)
    assert overlaps(a, a.copy())


def test_partial_and_contained_overlap():
    a = pygame.Rect(0, 0, 32, 32)
    assert overlaps(a, pygame.Rect(16, 16, 32, 32)), "corner overlap"
    assert overlaps(a, pygame.Rect(8, 8, 4, 4)), "contained"
    assert overlaps(pygame.Rect(8, 8, 4, 4), a), "container"


def test_shared_edges_do_not_collide():
    a = pygame.Rect(0, 0, 10, 10)
    assert not overlaps(a, pygame.Rect(10, 0, 10, 10)), "right edge"
    assert not overlaps(a, pygame.Rect(-10, 0, 10, 10)), "left edge"
    assert not overlaps(a, pygame.Rect(0, 10, 10, 10)), "bottom edge"
    assert not overlaps(a, pygame.Rect(0, -10, 10, 10)), "top edge"
    assert not overlaps(a, pygame.Rect(10, 10, 10, 10)), "corner"


def test_one_unit_of_overlap_collides():
    a = pygame.Rect(0, 0, 10, 10)
    assert overlaps(a, pygame.Rect(9, 0, 10, 10))
    assert overlaps(a, pygame.Rect(0, 9, 10, 10))


def test_overlap_needs_both_axes():
    a = pygame.Rect(0, 0, 10, 10)
    assert not overlaps(a, pygame.Rect(5, 50, 10, 10)), "x overlaps only"
    assert not overlaps(a, pygame.Rect(50, 5, 10, 10)), "y overlaps only"


def test_overlap_is_symmetric():
    rects = [pygame.Rect(x, y, 20, 20) for x in (0, 10, 20, 30) for y in (0, 15, 20)]
    for a in rects:
        for b in rects:
            assert overlaps(a, b) == overlaps(b, a)


def test_first_overlap():
    player = pygame.Rect(100, 100, 32, 32)
    others = [pygame.Rect(0, 0, 10, 10), pygame.Rect(120, 120, 10, 10), pygame.Rect(100, 100, 5, 5)]
    assert first_overlap(player, others) == 1
    assert first_overlap(player, others[:1]) is None
    assert first_overlap(player, []) is None
