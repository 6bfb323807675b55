"""Pull-based angle-cone decimation of an ordered 2D curve."""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cone import bearing
from .segment import SegmentState, advance, flush
from .source import ArraySource, PointSource
from .types import (
    DecimationError,
    DecimatorConfig,
    EndOfStream,
    InvalidInput,
    Point,
)

logger = logging.getLogger(__name__)

MIN_POINTS = 3


class Decimator:
    """Streaming decimator over a point source.

    Each call to ``next()`` consumes source points until one must be
    retained and returns it. The first and last points of the source are
    always retained verbatim. Every discarded point lies within the
    tolerance of the straight line joining its neighbouring retained points.

    Example:
        >>> src = ArraySource([0, 1, 2], [0, 1, 2])
        >>> [p.as_tuple() for p in Decimator(src, 0.01)]
        [(0.0, 0.0), (2.0, 2.0)]
    """

    def __init__(self, source: PointSource, tol: float, interpolate: bool = False):
        """Initialize the decimator.

        Args:
            source: Point source with at least 3 points
            tol: Vertical tolerance, in y units
            interpolate: Emit cone-midline y values at breakpoints instead of
                         raw samples

        Raises:
            InvalidInput: If the source is missing or too short, or the
                          tolerance is negative or NaN
        """
        self._setup(source, DecimatorConfig(tolerance=tol, interpolate=interpolate))

    @classmethod
    def from_config(cls, source: PointSource, config: DecimatorConfig) -> "Decimator":
        """Build a decimator from an already validated configuration."""
        decimator = cls.__new__(cls)
        decimator._setup(source, config)
        return decimator

    def _setup(self, source: PointSource, config: DecimatorConfig) -> None:
        if source is None:
            raise InvalidInput("got no point source")
        if len(source) < MIN_POINTS:
            raise InvalidInput(
                f"need at least {MIN_POINTS} points to decimate, got {len(source)}"
            )
        self._source = source
        self._tol = float(config.tolerance)
        self._interpolate = config.interpolate
        self.reset()

    def reset(self) -> None:
        """Return to the construction-time state."""
        first = self._source.point_at(0)
        self._state = SegmentState.start(first, self._source.point_at(1), self._tol)
        self._cursor = 1
        self._started = False
        self._finished = False
        self._error: Optional[DecimationError] = None
        logger.debug(
            f"Decimator reset: {len(self._source)} points, "
            f"tol={self._tol}, interpolate={self._interpolate}"
        )

    def __iter__(self) -> "Decimator":
        return self

    def __next__(self) -> Point:
        """Return the next retained point.

        Raises:
            EndOfStream: When every retained point has been returned
            DegenerateGeometry: If a point has no defined bearing from the
                                pivot. The error repeats until ``reset()``.
        """
        if self._error is not None:
            raise self._error
        try:
            return self._step()
        except DecimationError as e:
            self._error = e
            raise

    next = __next__

    def _step(self) -> Point:
        if self._finished:
            raise EndOfStream()

        if not self._started:
            bearing(self._state.pivot, self._source.point_at(1))
            self._started = True
            return self._state.pivot

        n = len(self._source)
        while self._cursor < n:
            q = self._source.point_at(self._cursor)
            self._cursor += 1
            self._state, retained = advance(
                self._state, q, self._tol, self._interpolate
            )
            if retained is not None:
                return retained

        self._finished = True
        last = flush(self._state)
        logger.debug(f"Decimator exhausted source of {n} points")
        return last

    @property
    def interpolate(self) -> bool:
        return self._interpolate

    @interpolate.setter
    def interpolate(self, value: bool) -> None:
        if self._started:
            raise DecimationError(
                "interpolate cannot change mid-stream; call reset() first"
            )
        self._interpolate = bool(value)

    @property
    def tolerance(self) -> float:
        return self._tol

    @property
    def source(self) -> PointSource:
        return self._source

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def pivot(self) -> Point:
        return self._state.pivot

    @property
    def trailing(self) -> Point:
        return self._state.trailing

    @property
    def angle_min(self) -> float:
        return self._state.angle_min

    @property
    def angle_max(self) -> float:
        return self._state.angle_max

    def to_source(self) -> ArraySource:
        """Decimate the whole source from the start.

        Returns:
            New point source holding the retained points
        """
        self.reset()
        retained: List[Point] = list(self)
        return ArraySource.from_points(retained)


def decimate(
    x: Sequence[float],
    y: Sequence[float],
    tol: float = 0.1,
    interpolate: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """Decimate a sampled signal.

    Args:
        x: Strictly increasing abscissae
        y: Ordinates
        tol: Vertical tolerance
        interpolate: Use cone-midline y values at breakpoints

    Returns:
        Tuple of (x, y) float64 arrays of the retained points
    """
    source = ArraySource(x, y)
    result = Decimator(source, tol, interpolate=interpolate).to_source()
    logger.info(f"Decimated {len(source)} points to {len(result)} (tol={tol})")
    return result.to_arrays()
