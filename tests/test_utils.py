"""Tests for game.shmup.utils — rectangle overlap and vector helpers."""

import itertools
import math

import pytest

from game.shmup.utils import clamp, normalize, rect_intersect


@pytest.mark.unit
class TestRectIntersect:
    def test_overlap(self):
        assert rect_intersect(0, 0, 10, 10, 5, 5, 10, 10)

    def test_disjoint(self):
        assert not rect_intersect(0, 0, 10, 10, 20, 20, 5, 5)

    def test_touching_edges_do_not_overlap(self):
        assert not rect_intersect(0, 0, 10, 10, 10, 0, 10, 10)
        assert not rect_intersect(0, 0, 10, 10, 0, 10, 10, 10)

    def test_containment(self):
        assert rect_intersect(0, 0, 100, 100, 40, 40, 5, 5)

    def test_symmetric(self):
        rects = [
            (0, 0, 10, 10),
            (5, 5, 10, 10),
            (10, 0, 10, 10),
            (-5, -5, 3, 30),
            (2, 2, 1, 1),
            (0, 9.5, 50, 1),
        ]
        for a, b in itertools.product(rects, repeat=2):
            assert rect_intersect(*a, *b) == rect_intersect(*b, *a), (a, b)


@pytest.mark.unit
class TestVectorHelpers:
    def test_clamp(self):
        assert clamp(-3, 0, 10) == 0
        assert clamp(30, 0, 10) == 10
        assert clamp(4, 0, 10) == 4

    def test_normalize_diagonal(self):
        x, y = normalize(1, 1)
        assert math.isclose(x, math.sqrt(0.5))
        assert math.isclose(y, math.sqrt(0.5))

    def test_normalize_zero(self):
        assert normalize(0, 0) == (0.0, 0.0)
