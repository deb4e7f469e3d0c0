"""Tests for chipplot/predicates.py."""
from fractions import Fraction

import pytest

from chipplot.predicates import orient2d, orientation


def _exact_sign(a, b, c):
    ax, ay, bx, by, cx, cy = (Fraction(v) for v in (*a, *b, *c))
    det = (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)
    return (det > 0) - (det < 0)


# --- orient2d ---

def test_orient2d_counterclockwise():
    assert orient2d((0, 0), (1, 0), (0, 1)) == 1.0


def test_orient2d_clockwise():
    assert orient2d((0, 0), (0, 1), (1, 0)) == -1.0


def test_orient2d_collinear():
    assert orient2d((0, 0), (1, 1), (3, 3)) == 0.0


def test_orient2d_magnitude_is_twice_the_area():
    assert orient2d((0, 0), (4, 0), (0, 3)) == 12.0


# --- orientation ---

@pytest.mark.parametrize("a, b, c, expected", [
    ((0, 0), (1, 0), (1, 1), 1),
    ((0, 0), (1, 1), (1, 0), -1),
    ((0, 0), (2, 2), (-1, -1), 0),
])
def test_orientation_sign(a, b, c, expected):
    assert orientation(a, b, c) == expected


def test_orientation_matches_exact_arithmetic_near_collinear():
    # Points within a few ulps of the line y = x; plain float evaluation
    # gets a sizeable share of these signs wrong
    ulp = 2.0 ** -53
    q = (12.0, 12.0)
    r = (24.0, 24.0)
    for i in range(32):
        for j in range(32):
            p = (0.5 + i * ulp, 0.5 + j * ulp)
            assert orientation(p, q, r) == _exact_sign(p, q, r), (i, j)


def test_orientation_exact_for_tiny_offsets():
    a = (1e-300, 0.0)
    b = (0.0, 1e-300)
    c = (0.0, 0.0)
    assert orientation(a, b, c) == 1
    assert orientation(b, a, c) == -1
