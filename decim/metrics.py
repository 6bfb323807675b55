"""Quality metrics for a decimated curve."""

import numpy as np

from .source import ArraySource, PointSource
from .types import InvalidInput


def _columns(source: PointSource):
    if isinstance(source, ArraySource):
        return source.x, source.y
    pts = np.array([p.as_tuple() for p in source], dtype=np.float64).reshape(-1, 2)
    return pts[:, 0], pts[:, 1]


def max_deviation(original: PointSource, retained: PointSource) -> float:
    """Largest vertical distance from an original sample to the reconstruction.

    The reconstruction linearly interpolates the retained points, so for a
    decimation with tolerance ``tol`` the result is at most ``tol`` up to
    floating point error.

    Args:
        original: Source that was decimated
        retained: Decimated output

    Returns:
        Maximum absolute deviation in y units
    """
    if len(retained) < 2:
        raise InvalidInput("need at least 2 retained points to reconstruct a curve")
    ox, oy = _columns(original)
    rx, ry = _columns(retained)
    reconstructed = np.interp(ox, rx, ry)
    return float(np.max(np.abs(oy - reconstructed)))


def reduction_ratio(original: PointSource, retained: PointSource) -> float:
    """Fraction of points kept; 1.0 means no reduction."""
    if len(original) == 0:
        raise InvalidInput("original source is empty")
    return len(retained) / len(original)
