# src/game/geometry.py
from __future__ import annotations
import pygame


def overlaps(a: pygame.Rect, b: pygame.Rect) -> bool:
    """
    Axis-aligned overlap test. Rectangles that only share an edge do not
    collide: both projections must intersect with positive length.
    """
    return (
        a.left < b.right and
        a.right > b.left and
        a.top < b.bottom and
        a.bottom > b.top
    )


def first_overlap(rect: pygame.Rect, others) -> int | None:
    """Index of the first rect in `others` overlapping `rect`, or None."""
    for i, other in enumerate(others):
        if overlaps(rect, other):
            return i
    return None
