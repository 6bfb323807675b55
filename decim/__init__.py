"""decim: tolerance-bounded decimation of sampled curves.

Reduces the number of points of an ordered 2D curve while keeping every
discarded point within a vertical tolerance of the straight-line
reconstruction.
"""

from decim.types import (
    Point,
    DecimatorConfig,
    DecimationError,
    InvalidInput,
    DegenerateGeometry,
    EndOfStream,
)
from decim.source import PointSource, ArraySource
from decim.sampler import Decimator, decimate
from decim.stepper import Stepper, decimate_stream
from decim.metrics import max_deviation, reduction_ratio

__version__ = "0.1.0"
__all__ = [
    "Point",
    "DecimatorConfig",
    "DecimationError",
    "InvalidInput",
    "DegenerateGeometry",
    "EndOfStream",
    "PointSource",
    "ArraySource",
    "Decimator",
    "decimate",
    "Stepper",
    "decimate_stream",
    "max_deviation",
    "reduction_ratio",
]
