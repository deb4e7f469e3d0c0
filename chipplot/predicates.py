"""Robust orientation predicate for points in the plane."""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

_EPSILON = 2.0 ** -53
# Relative error bound of the floating-point determinant (Shewchuk's stage A)
_CCW_ERRBOUND_A = (3.0 + 16.0 * _EPSILON) * _EPSILON
_SMALLEST_SUBNORMAL = 5e-324


def orient2d(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> float:
    """Signed area test for the triangle (a, b, c).

    The result is positive if a, b, c occur in counterclockwise order,
    negative if they occur in clockwise order and zero if they are
    collinear. Its magnitude approximates twice the triangle's area, its
    sign is always exact.

    The determinant is first evaluated in floating point. If the error
    bound cannot certify the sign, it is recomputed in exact rational
    arithmetic.

    Args:
        a: First point as (x, y)
        b: Second point as (x, y)
        c: Third point as (x, y)

    Returns:
        Orientation value with exact sign
    """
    detleft = (a[0] - c[0]) * (b[1] - c[1])
    detright = (a[1] - c[1]) * (b[0] - c[0])
    det = detleft - detright

    if detleft > 0:
        if detright <= 0:
            return det
        detsum = detleft + detright
    elif detleft < 0:
        if detright >= 0:
            return det
        detsum = -detleft - detright
    elif detright != 0:
        return det
    else:
        # Both products zero, possibly through underflow
        return _orient2d_exact(a, b, c)

    errbound = _CCW_ERRBOUND_A * detsum
    if errbound > 0 and (det > errbound or -det > errbound):
        return det

    return _orient2d_exact(a, b, c)


def _orient2d_exact(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> float:
    """Evaluate the orientation determinant without rounding."""
    ax, ay = Fraction(a[0]), Fraction(a[1])
    bx, by = Fraction(b[0]), Fraction(b[1])
    cx, cy = Fraction(c[0]), Fraction(c[1])

    det = (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)
    if det == 0:
        return 0.0

    approx = float(det)
    if approx == 0.0:
        # Underflow must not turn a turn into a collinear result
        return _SMALLEST_SUBNORMAL if det > 0 else -_SMALLEST_SUBNORMAL
    return approx


def orientation(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> int:
    """Turn direction of a -> b -> c: 1 counterclockwise, -1 clockwise, 0 collinear."""
    value = orient2d(a, b, c)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
