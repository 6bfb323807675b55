"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from decim.source import ArraySource, PointSource
from decim.types import Point


@pytest.fixture
def collinear_source():
    """Three points on y = x."""
    return ArraySource([0.0, 1.0, 2.0], [0.0, 1.0, 2.0])


@pytest.fixture
def jump_source():
    """Flat noisy start followed by a large jump."""
    return ArraySource([0.0, 1.0, 2.0, 3.0], [0.0, 0.01, -0.01, 5.0])


@pytest.fixture
def zigzag_source():
    """Alternating 0/1 signal: no point can be dropped at small tolerance."""
    x = np.arange(10, dtype=float)
    return ArraySource(x, x % 2)


@pytest.fixture
def sine_source():
    """Densely sampled sine wave."""
    x = np.linspace(0.0, 10.0, 2000)
    return ArraySource(x, np.sin(x))


@pytest.fixture
def corner_source():
    """Triangle wave sampled at integers, corners at x = 10, 20."""
    x = np.arange(31, dtype=float)
    y = np.interp(x, [0, 10, 20, 30], [0, 10, 0, 10])
    return ArraySource(x, y)


class ListSource(PointSource):
    """Minimal source over a list of (x, y) tuples that counts reads."""

    def __init__(self, pairs):
        self._pairs = list(pairs)
        self.reads = 0

    def __len__(self):
        return len(self._pairs)

    def point_at(self, index):
        self.reads += 1
        return Point(*self._pairs[index])


@pytest.fixture
def list_source():
    """Factory for sources that are not backed by numpy arrays."""
    return ListSource
