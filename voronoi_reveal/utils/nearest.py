"""Brute-force nearest-site search.

Every pixel is compared against every site, ``O(width * height * N)``. The
per-grid search walks the sites in index order and keeps, per pixel, the
running minimum, replacing it only on a strict improvement. That is exactly
the sequential reference loop applied to all pixels at once, so vectorizing
over pixels changes neither the arithmetic nor the tie-break: on an exact tie
the lowest site index wins.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from voronoi_reveal.sites import SiteLike, site_coordinates
from voronoi_reveal.types import DistanceMetric, FloatArray, IndexArray
from voronoi_reveal.utils.grid import check_dimensions, normalized_axes


def nearest_site(
    sites: Sequence[SiteLike],
    fx: float,
    fy: float,
    metric: DistanceMetric = DistanceMetric.SQUARED,
) -> Tuple[int, float]:
    """Return ``(index, distance)`` of the site nearest to point ``(fx, fy)``.

    Raises:
        EmptySiteSetError: If ``sites`` is empty.
    """
    coords = site_coordinates(sites)
    best_idx = 0
    best_dist = math.inf
    for i, (sx, sy) in enumerate(coords.tolist()):
        dx = sx - fx
        dy = sy - fy
        d = dx * dx + dy * dy
        if metric is DistanceMetric.EUCLIDEAN:
            d = math.sqrt(d)
        if d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx, best_dist


def nearest_site_field(
    sites: Sequence[SiteLike],
    width: int,
    height: int,
    metric: DistanceMetric = DistanceMetric.SQUARED,
) -> Tuple[IndexArray, FloatArray]:
    """Classify every pixel of a ``width x height`` grid.

    Returns:
        ``(indices, distances)``, both of shape ``(height, width)``: the
        winning site index and its distance under ``metric``.

    Raises:
        InvalidDimensionsError: If a dimension is not a positive integer.
        EmptySiteSetError: If ``sites`` is empty.
    """
    check_dimensions(width, height)
    coords = site_coordinates(sites)
    fx, fy = normalized_axes(width, height)

    best_dist: FloatArray = np.full((height, width), np.inf, dtype=np.float64)
    best_idx: IndexArray = np.zeros((height, width), dtype=np.intp)
    for i, (sx, sy) in enumerate(coords):
        dx = sx - fx
        dy = sy - fy
        d = (dx * dx)[np.newaxis, :] + (dy * dy)[:, np.newaxis]
        if metric is DistanceMetric.EUCLIDEAN:
            d = np.sqrt(d)
        closer = d < best_dist
        best_dist[closer] = d[closer]
        best_idx[closer] = i
    return best_idx, best_dist
