"""Point sources: read-only indexable sequences of 2D samples."""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence, Tuple

import numpy as np

from .types import InvalidInput, Point


class PointSource(ABC):
    """Read-only, 0-indexed sequence of points with increasing x.

    Implementations must not change while a decimator reads them.
    """

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def point_at(self, index: int) -> Point:
        """Return the point at ``index`` in ``[0, len(self))``."""

    def __iter__(self) -> Iterator[Point]:
        for i in range(len(self)):
            yield self.point_at(i)


class ArraySource(PointSource):
    """Point source backed by two float64 numpy arrays."""

    def __init__(self, x: Sequence[float], y: Sequence[float]):
        """Initialize from matching x and y columns.

        Args:
            x: Abscissae, strictly increasing
            y: Ordinates, same length as ``x``

        Raises:
            InvalidInput: If the columns are not 1-D or differ in length
        """
        x_arr = np.array(x, dtype=np.float64)
        y_arr = np.array(y, dtype=np.float64)
        if x_arr.ndim != 1 or y_arr.ndim != 1:
            raise InvalidInput(
                f"x and y must be 1-D, got shapes {x_arr.shape} and {y_arr.shape}"
            )
        if x_arr.shape != y_arr.shape:
            raise InvalidInput(
                f"x and y lengths differ: {len(x_arr)} != {len(y_arr)}"
            )
        self._x = x_arr
        self._y = y_arr
        # Columns are exposed read-only
        self._x.setflags(write=False)
        self._y.setflags(write=False)

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "ArraySource":
        """Build a source from (x, y) pairs or Point instances."""
        pairs = [tuple(p) for p in points]
        if not pairs:
            return cls([], [])
        if any(len(p) != 2 for p in pairs):
            raise InvalidInput("every point needs exactly two coordinates")
        xs, ys = zip(*pairs)
        return cls(xs, ys)

    def __len__(self) -> int:
        return len(self._x)

    def point_at(self, index: int) -> Point:
        if not 0 <= index < len(self._x):
            raise IndexError(f"point index {index} out of range [0, {len(self._x)})")
        return Point(float(self._x[index]), float(self._y[index]))

    @property
    def x(self) -> np.ndarray:
        return self._x

    @property
    def y(self) -> np.ndarray:
        return self._y

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return writable copies of the x and y columns."""
        return self._x.copy(), self._y.copy()

    def __repr__(self) -> str:
        return f"ArraySource(n={len(self)})"
