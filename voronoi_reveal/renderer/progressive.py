"""Progressive rasterizer: the "ink spreading from each site" reveal.

Every site grows a disk at the same speed. A pixel is claimed by its nearest
site (true Euclidean distance, lowest index on ties) but only becomes visible
once the growth radius reaches that distance. Frames are captured as the
radius increases, so the sequence converges to the static diagram.

Radius bookkeeping is in pixel units: ``r`` runs over ``0, 2, 4, ...`` while
``r < sqrt(width**2 + height**2) / 2`` and is normalized by
``max(width, height)`` before comparing against site distances. Corner pixels
further away than the last radius stay unpainted in the final frame.

Design notes:

* A pixel's nearest distance does not depend on ``r``, so the full distance
  field is computed once and each step only paints pixels that are still
  uncovered and now within reach. Coverage is tracked with an explicit boolean
  mask instead of testing for the white background colour.
* The working grid never carries markers; each captured frame is a copy with
  markers drawn on it.
"""

import math
from typing import Iterator, Sequence

import numpy as np
import structlog
from pyrsistent import pvector

from voronoi_reveal.palette import UNPAINTED, colors_for
from voronoi_reveal.renderer.markers import draw_markers
from voronoi_reveal.renderer.static import DEFAULT_HEIGHT, DEFAULT_WIDTH
from voronoi_reveal.sites import SiteLike
from voronoi_reveal.types import BoolArray, DistanceMetric, FrameSequence, PixelGrid
from voronoi_reveal.utils.grid import new_grid
from voronoi_reveal.utils.nearest import nearest_site_field

RADIUS_STEP = 2
# Capture cadence: a frame is kept when r is a multiple of this.
CAPTURE_EVERY = 2

logger = structlog.get_logger()


def max_radius(width: int, height: int) -> float:
    """Half the grid diagonal, in pixels."""
    return math.sqrt(width * width + height * height) / 2


def radius_schedule(width: int, height: int, radius_step: int = RADIUS_STEP) -> range:
    """Integer radii visited by the reveal, in order."""
    if radius_step <= 0:
        raise ValueError(f"radius_step must be positive, got {radius_step}")
    return range(0, math.ceil(max_radius(width, height)), radius_step)


def iter_animation(
    sites: Sequence[SiteLike],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    radius_step: int = RADIUS_STEP,
) -> Iterator[PixelGrid]:
    """Yield reveal frames one at a time, in increasing radius order.

    Each yielded frame is an independent copy with site markers drawn on it.
    Inputs are validated before the first frame is produced.

    Raises:
        InvalidDimensionsError: If a dimension is not a positive integer.
        EmptySiteSetError: If ``sites`` is empty.
        ValueError: If ``radius_step`` is not positive.
    """
    indices, distances = nearest_site_field(
        sites, width, height, DistanceMetric.EUCLIDEAN
    )
    radii = radius_schedule(width, height, radius_step)
    return _reveal(sites, indices, distances, radii, width, height)


def _reveal(
    sites: Sequence[SiteLike],
    indices: np.ndarray,
    distances: np.ndarray,
    radii: range,
    width: int,
    height: int,
) -> Iterator[PixelGrid]:
    colors = colors_for(indices)
    grid = new_grid(width, height, UNPAINTED)
    painted: BoolArray = np.zeros((height, width), dtype=np.bool_)
    scale = max(width, height)

    for r in radii:
        r_norm = r / scale
        reached = ~painted & (distances <= r_norm)
        grid[reached] = colors[reached]
        painted |= reached

        if r % CAPTURE_EVERY == 0:
            yield draw_markers(grid, sites, copy=True)

    logger.debug(
        "reveal_finished",
        width=width,
        height=height,
        unpainted=int(painted.size - np.count_nonzero(painted)),
    )


def render_animation(
    sites: Sequence[SiteLike],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    radius_step: int = RADIUS_STEP,
) -> FrameSequence:
    """Render the whole reveal as a fully materialized frame sequence.

    Memory grows with the frame count (about ``max_radius / radius_step``
    grids); use :func:`iter_animation` to stream frames instead.

    Raises:
        InvalidDimensionsError: If a dimension is not a positive integer.
        EmptySiteSetError: If ``sites`` is empty.
    """
    frames = pvector(iter_animation(sites, width, height, radius_step))
    logger.debug("animation_rendered", width=width, height=height, frames=len(frames))
    return frames
