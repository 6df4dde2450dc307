"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rects_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Check if two axis-aligned rectangles overlap.

    Strict on all four sides: rectangles that only share an edge do not collide.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def overlaps(a, b) -> bool:
    """Rectangle overlap for any two entities with x, y, width, height"""
    return rects_overlap(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values"""
    return int(value + 0.5)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
