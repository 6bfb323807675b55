"""Push-based decimation for streams of unknown length."""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from .segment import SegmentState, advance, flush
from .types import DecimationError, DecimatorConfig, Point

logger = logging.getLogger(__name__)


class Stepper:
    """Decimator fed one sample at a time.

    Emits the same retained points as ``Decimator`` for the same input,
    but does not need the whole curve up front. Call ``close()`` after the
    last sample to obtain the final point.
    """

    def __init__(self, tol: float, interpolate: bool = False):
        config = DecimatorConfig(tolerance=tol, interpolate=interpolate)
        self._tol = float(config.tolerance)
        self._interpolate = config.interpolate
        self._state: Optional[SegmentState] = None
        self._pushed = 0
        self._error: Optional[DecimationError] = None

    @property
    def state(self) -> Optional[SegmentState]:
        return self._state

    @property
    def tolerance(self) -> float:
        return self._tol

    @property
    def interpolate(self) -> bool:
        return self._interpolate

    def push(self, x: float, y: float) -> Optional[Point]:
        """Feed a sample.

        Args:
            x: Abscissa, greater than that of every earlier sample
            y: Ordinate

        Returns:
            The retained point this sample released, or None

        Raises:
            DegenerateGeometry: If the sample has no defined bearing from
                                the pivot. The error repeats until ``close()``.
        """
        if self._error is not None:
            raise self._error
        q = Point(float(x), float(y))
        self._pushed += 1
        if self._state is None:
            self._state = SegmentState.start(q)
            return q
        try:
            self._state, retained = advance(
                self._state, q, self._tol, self._interpolate
            )
        except DecimationError as e:
            self._error = e
            raise
        return retained

    def close(self) -> Optional[Point]:
        """End the stream and return its last point if still pending.

        The stepper is then ready for a new stream, even after an error.

        Raises:
            DegenerateGeometry: If the stream failed; the stepper is still
                                cleared
        """
        error = self._error
        self._error = None
        if error is not None:
            self._state = None
            self._pushed = 0
            raise error
        last = flush(self._state) if self._state is not None else None
        logger.debug(f"Stepper closed after {self._pushed} samples")
        self._state = None
        self._pushed = 0
        return last


def decimate_stream(
    points: Iterable[Tuple[float, float]], tol: float, interpolate: bool = False
) -> Iterator[Point]:
    """Lazily decimate an iterable of (x, y) pairs.

    Args:
        points: Samples in increasing x order
        tol: Vertical tolerance
        interpolate: Use cone-midline y values at breakpoints

    Yields:
        Retained points, first and last sample included
    """
    stepper = Stepper(tol, interpolate=interpolate)
    for x, y in points:
        retained = stepper.push(x, y)
        if retained is not None:
            yield retained
    last = stepper.close()
    if last is not None:
        yield last
