from typing import Sequence, Set, Tuple

import numpy as np

from voronoi_reveal.palette import UNPAINTED
from voronoi_reveal.renderer.markers import marker_pixels
from voronoi_reveal.sites import Site, SiteLike, SiteSet, make_site_set
from voronoi_reveal.types import PixelGrid


def make_sites(*points: Tuple[float, float]) -> SiteSet:
    """Site set from literal ``(x, y)`` pairs."""
    return make_site_set(Site(x, y) for x, y in points)


def pixel(grid: PixelGrid, x: int, y: int) -> Tuple[int, ...]:
    """RGBA tuple at pixel ``(x, y)``."""
    return tuple(int(c) for c in grid[y, x])


def marker_set(sites: Sequence[SiteLike], grid: PixelGrid) -> Set[Tuple[int, int]]:
    height, width = grid.shape[:2]
    return set(marker_pixels(sites, width, height))


def painted_mask(grid: PixelGrid) -> np.ndarray:
    """Boolean ``(height, width)`` mask of pixels that differ from the background."""
    return np.any(grid != np.array(UNPAINTED, dtype=np.uint8), axis=-1)


def region_mask(sites: Sequence[SiteLike], grid: PixelGrid) -> np.ndarray:
    """Mask of pixels not covered by a site marker."""
    mask = np.ones(grid.shape[:2], dtype=np.bool_)
    for x, y in marker_set(sites, grid):
        mask[y, x] = False
    return mask
