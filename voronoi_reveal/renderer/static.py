"""Static rasterizer: one fully classified Voronoi grid."""

from typing import Sequence

import structlog

from voronoi_reveal.palette import colors_for
from voronoi_reveal.renderer.markers import draw_markers
from voronoi_reveal.sites import SiteLike
from voronoi_reveal.types import DistanceMetric, PixelGrid
from voronoi_reveal.utils.nearest import nearest_site_field

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400

logger = structlog.get_logger()


def render_static(
    sites: Sequence[SiteLike],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> PixelGrid:
    """Render the Voronoi diagram of ``sites`` as a ``(height, width, 4)`` grid.

    Every pixel takes the colour of the site with the smallest squared
    distance to ``(x / width, y / height)``; the lowest index wins exact ties.
    Site markers are drawn over the result. The output is a pure function of
    the inputs.

    Raises:
        InvalidDimensionsError: If a dimension is not a positive integer.
        EmptySiteSetError: If ``sites`` is empty.
    """
    indices, _ = nearest_site_field(sites, width, height, DistanceMetric.SQUARED)
    grid = colors_for(indices)
    draw_markers(grid, sites)
    logger.debug("static_rendered", width=width, height=height, sites=len(sites))
    return grid
