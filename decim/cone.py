"""Bearing and tolerance-cone geometry.

Angles are measured from a pivot with ``atan2``. For a pivot P and a point Q
the admissible range is the set of bearings of lines through P that pass
within ``tol`` of Q vertically:

    [atan2(dy - tol, dx), atan2(dy + tol, dx)]

Intersecting these ranges over consecutive points yields the cone of slopes
that represent all of them at once.
"""

import math
from typing import Tuple

from .types import DegenerateGeometry, Point


def bearing(pivot: Point, q: Point) -> float:
    """Angle of the direction from ``pivot`` to ``q``.

    Args:
        pivot: Anchor of the current segment
        q: Point to measure

    Returns:
        Bearing in radians, in (-pi/2, pi/2)

    Raises:
        DegenerateGeometry: If the direction is undefined (non-finite
                            deltas, or q not strictly right of the pivot)
    """
    dx = q.x - pivot.x
    dy = q.y - pivot.y
    if not (math.isfinite(dx) and math.isfinite(dy)):
        raise DegenerateGeometry(
            f"got infinity or NaN between pivot ({pivot.x}, {pivot.y}) "
            f"and point ({q.x}, {q.y})"
        )
    if dx == 0:
        raise DegenerateGeometry(f"duplicate x={q.x} at the pivot")
    if dx < 0:
        raise DegenerateGeometry(
            f"x decreased from {pivot.x} to {q.x}; samples must be ordered"
        )
    return math.atan2(dy, dx)


def admissible_range(pivot: Point, q: Point, tol: float) -> Tuple[float, float]:
    """Return (lo, hi) bearings of lines through pivot within tol of q."""
    dx = q.x - pivot.x
    dy = q.y - pivot.y
    return math.atan2(dy - tol, dx), math.atan2(dy + tol, dx)


def narrow(
    angle_min: float, angle_max: float, lo: float, hi: float
) -> Tuple[float, float]:
    """Intersect the cone with another admissible range."""
    return max(angle_min, lo), min(angle_max, hi)


def contains(angle_min: float, angle_max: float, angle: float) -> bool:
    """True if ``angle`` is strictly inside the open cone."""
    return angle_min < angle < angle_max


def midline_y(pivot: Point, x: float, angle_min: float, angle_max: float) -> float:
    """Value at ``x`` of the line through pivot with the cone's mean slope.

    The mean of the boundary tangents lies inside the cone, so the line
    stays within tolerance of every point the cone was built from.
    """
    slope = (math.tan(angle_max) + math.tan(angle_min)) / 2
    return pivot.y + (x - pivot.x) * slope
