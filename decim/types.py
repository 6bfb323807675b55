"""Common types, configuration and exceptions for decim."""

import math
import warnings
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Point:
    """2D sample with float coordinates."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class DecimatorConfig:
    """Configuration for the angle-cone decimator.

    Attributes:
        tolerance: Half-width of the vertical band, in y units, that every
                   discarded point must stay within.
        interpolate: Recenter retained y values on the cone midline instead
                     of reusing raw samples. Output y values then no longer
                     coincide with the input data.
    """

    tolerance: float = 0.1
    interpolate: bool = False

    def __post_init__(self):
        """Validate the tolerance."""
        if math.isnan(self.tolerance) or self.tolerance < 0:
            raise InvalidInput(
                f"tolerance must be a non-negative number, got {self.tolerance}"
            )
        if self.tolerance == 0:
            warnings.warn(
                "Zero tolerance retains every point. "
                "Consider a positive tolerance to get any reduction."
            )


class DecimationError(Exception):
    """Base exception for decimation errors."""

    pass


class InvalidInput(DecimationError, ValueError):
    """Exception raised when a decimator is built from unusable input."""

    pass


class DegenerateGeometry(DecimationError):
    """Exception raised when a point has no defined bearing from the pivot."""

    pass


class EndOfStream(StopIteration):
    """Raised by a drained decimator. Not a failure."""

    pass
