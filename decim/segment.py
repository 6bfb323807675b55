"""Segment state and the single step of the angle-cone decimator.

The state is immutable: ``advance`` returns a new state together with the
point to emit, if any. Both the pull-based ``Decimator`` and the push-based
``Stepper`` are thin drivers around this transition.
"""

import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .cone import admissible_range, bearing, contains, midline_y, narrow
from .types import Point


@dataclass(frozen=True)
class SegmentState:
    """Streaming state of one candidate line segment.

    Attributes:
        pivot: Last retained point; anchor of the segment
        trailing: Last accepted point not yet retained
        angle_min: Lower bound of the admissible bearing cone
        angle_max: Upper bound of the admissible bearing cone
        is_open: True once a point has been accepted since the pivot was set
    """

    pivot: Point
    trailing: Point
    angle_min: float = -math.pi / 2
    angle_max: float = math.pi / 2
    is_open: bool = False

    @classmethod
    def start(
        cls, first: Point, opening: Optional[Point] = None, tol: float = 0.0
    ) -> "SegmentState":
        """State anchored at ``first``.

        When the opening point is known, the cone is computed from it up
        front, as the Decimator does. Otherwise the cone keeps its default
        (-pi/2, pi/2), the whole right half-plane, until the opening point
        arrives; only the push-based Stepper starts this way.
        """
        if opening is None:
            return cls(pivot=first, trailing=first)
        angle_min, angle_max = admissible_range(first, opening, tol)
        return cls(
            pivot=first, trailing=first, angle_min=angle_min, angle_max=angle_max
        )


def advance(
    state: SegmentState, q: Point, tol: float, interpolate: bool = False
) -> Tuple[SegmentState, Optional[Point]]:
    """Feed one point to the segment.

    Args:
        state: Current segment state
        q: Next sample, with x greater than every sample fed so far
        tol: Vertical tolerance
        interpolate: Recenter the emitted pivot on the cone midline

    Returns:
        Tuple of (new state, retained point or None)

    Raises:
        DegenerateGeometry: If q has no defined bearing from the pivot, or
                            from the new pivot after a breakpoint
    """
    angle = bearing(state.pivot, q)
    lo, hi = admissible_range(state.pivot, q, tol)

    if not state.is_open:
        # A single point is always representable by a line from the pivot
        angle_min, angle_max = narrow(state.angle_min, state.angle_max, lo, hi)
        return replace(
            state, trailing=q, angle_min=angle_min, angle_max=angle_max, is_open=True
        ), None

    if contains(state.angle_min, state.angle_max, angle):
        angle_min, angle_max = narrow(state.angle_min, state.angle_max, lo, hi)
        return replace(state, trailing=q, angle_min=angle_min, angle_max=angle_max), None

    return _break(state, q, tol, interpolate)


def _break(
    state: SegmentState, q: Point, tol: float, interpolate: bool
) -> Tuple[SegmentState, Point]:
    """Close the segment at the trailing point and open a new one with q."""
    trailing = state.trailing
    if interpolate:
        y = midline_y(state.pivot, trailing.x, state.angle_min, state.angle_max)
    else:
        y = trailing.y
    pivot = Point(trailing.x, y)

    # q is the first member of the new segment, so the cone restarts from it
    bearing(pivot, q)
    angle_min, angle_max = admissible_range(pivot, q, tol)
    new_state = SegmentState(
        pivot=pivot,
        trailing=q,
        angle_min=angle_min,
        angle_max=angle_max,
        is_open=True,
    )
    return new_state, pivot


def flush(state: SegmentState) -> Optional[Point]:
    """Return the final point of the stream, if one is pending."""
    if state.is_open:
        return state.trailing
    return None
