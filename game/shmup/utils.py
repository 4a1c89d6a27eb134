"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def rect_intersect(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Check if two axis-aligned rectangles overlap (touching edges do not count)"""
    return x2 < x1 + w1 and x2 + w2 > x1 and y2 < y1 + h1 and y2 + h2 > y1


def rect_of(entity) -> Tuple[float, float, float, float]:
    """(x, y, width, height) of any sized entity"""
    return entity.x, entity.y, entity.width, entity.height


def entities_intersect(a, b) -> bool:
    return rect_intersect(*rect_of(a), *rect_of(b))


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
