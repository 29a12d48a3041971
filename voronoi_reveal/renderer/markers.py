"""Site marker overlay.

Each site gets a five pixel plus sign in opaque black centred on the pixel
that contains it. Markers are drawn last so they always cover region colour.
Every one of the five cells is bounds-checked on its own, so a site on the
first or last row/column loses only the arms that would leave the grid.
"""

from typing import List, Sequence, Tuple

from voronoi_reveal.palette import MARKER_COLOR
from voronoi_reveal.sites import SiteLike, to_site
from voronoi_reveal.types import PixelGrid
from voronoi_reveal.utils.grid import grid_size, is_in_bounds, site_pixel

MARKER_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)


def marker_pixels(
    sites: Sequence[SiteLike], width: int, height: int
) -> List[Tuple[int, int]]:
    """Return the in-bounds ``(x, y)`` pixels covered by site markers.

    A site is marked only when its pixel satisfies ``px < width`` and
    ``py < height``; the five cells are then clipped to the grid one by one.
    """
    out: List[Tuple[int, int]] = []
    for site in sites:
        pixel = site_pixel(to_site(site), width, height)
        if pixel is None:
            continue
        px, py = pixel
        if not (px < width and py < height):
            continue
        for dx, dy in MARKER_OFFSETS:
            x, y = px + dx, py + dy
            if is_in_bounds(x, y, width, height):
                out.append((x, y))
    return out


def draw_markers(
    grid: PixelGrid, sites: Sequence[SiteLike], copy: bool = False
) -> PixelGrid:
    """Draw a marker for every site onto ``grid``.

    Arguments:
        grid: ``(height, width, 4)`` RGBA grid.
        sites: Site set; marker centre is ``(floor(x * width), floor(y * height))``.
        copy: If True, draw on a copy and leave ``grid`` untouched.

    Returns:
        The grid that was drawn on (``grid`` itself unless ``copy``).
    """
    if copy:
        grid = grid.copy()
    width, height = grid_size(grid)
    for x, y in marker_pixels(sites, width, height):
        grid[y, x] = MARKER_COLOR
    return grid
