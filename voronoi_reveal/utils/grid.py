"""Pixel grid helpers.

Small pure functions shared by the rasterizers and the marker overlay:
dimension checks, grid allocation, bounds tests and the mapping between
normalized site coordinates and pixel indices.
"""

import math
from typing import Optional, Tuple

import numpy as np

from voronoi_reveal.errors import InvalidDimensionsError
from voronoi_reveal.sites import Site
from voronoi_reveal.types import RGBA, FloatArray, PixelGrid


def check_dimensions(width: int, height: int) -> None:
    """Raise ``InvalidDimensionsError`` unless both sides are positive ints."""
    for side in (width, height):
        if isinstance(side, bool) or not isinstance(side, (int, np.integer)):
            raise InvalidDimensionsError(width, height)
        if side <= 0:
            raise InvalidDimensionsError(width, height)


def new_grid(width: int, height: int, color: RGBA) -> PixelGrid:
    """Allocate a ``(height, width, 4)`` grid filled with ``color``."""
    grid = np.empty((height, width, 4), dtype=np.uint8)
    grid[...] = color
    return grid


def grid_size(grid: PixelGrid) -> Tuple[int, int]:
    """Return ``(width, height)`` of a pixel grid."""
    height, width = grid.shape[:2]
    return width, height


def is_in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Return True if pixel ``(x, y)`` lies within the grid rectangle."""
    return 0 <= x < width and 0 <= y < height


def normalized_axes(width: int, height: int) -> Tuple[FloatArray, FloatArray]:
    """Normalized pixel coordinates ``(x / width, y / height)`` per axis.

    No half-pixel offset: pixel ``(0, 0)`` maps to ``(0.0, 0.0)``.
    """
    fx = np.arange(width, dtype=np.float64) / width
    fy = np.arange(height, dtype=np.float64) / height
    return fx, fy


def site_pixel(site: Site, width: int, height: int) -> Optional[Tuple[int, int]]:
    """Pixel containing ``site``, or None when the scaled point is not finite.

    The result may lie outside the grid; callers bounds-check it.
    """
    sx = site.x * width
    sy = site.y * height
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return math.floor(sx), math.floor(sy)
