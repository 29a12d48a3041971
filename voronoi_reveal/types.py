"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent.typing import PVector

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

# (height, width, 4) uint8, row-major, top-left origin; pixel (x, y) is grid[y, x]
PixelGrid = npt.NDArray[np.uint8]
FrameSequence = PVector[PixelGrid]

FloatArray = npt.NDArray[np.float64]
IndexArray = npt.NDArray[np.intp]
BoolArray = npt.NDArray[np.bool_]


class DistanceMetric(StrEnum):
    """Distance used by the nearest-site search.

    ``SQUARED`` is what the static rasterizer compares; ``EUCLIDEAN`` (the
    square root) is what the progressive rasterizer compares against the
    growth radius. Rounding in ``sqrt`` can turn two distinct squared
    distances into equal ones, so the two metrics may break ties differently.
    """

    SQUARED = auto()
    EUCLIDEAN = auto()
