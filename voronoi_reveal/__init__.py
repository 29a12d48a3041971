"""Raster Voronoi diagrams with a progressive "spreading ink" reveal.

The package is split into a small pure core and optional collaborators:

* :mod:`voronoi_reveal.sites` / :mod:`voronoi_reveal.sampling`: site sets.
* :mod:`voronoi_reveal.palette`: index to colour mapping.
* :mod:`voronoi_reveal.renderer`: static and progressive rasterizers plus the
  site marker overlay and Pillow export helpers.
* :mod:`voronoi_reveal.playback`: immutable frame playback reducer used by the
  viewer.

Typical use::

    from voronoi_reveal import generate_sites, render_static, render_animation

    sites = generate_sites(5, seed=0)
    image = render_static(sites, 400, 400)
    frames = render_animation(sites, 400, 400)
"""

from voronoi_reveal.errors import EmptySiteSetError, InvalidDimensionsError
from voronoi_reveal.palette import PALETTE, color_for
from voronoi_reveal.renderer.markers import draw_markers
from voronoi_reveal.renderer.progressive import iter_animation, render_animation
from voronoi_reveal.renderer.static import render_static
from voronoi_reveal.sampling import generate_sites
from voronoi_reveal.sites import Site, make_site_set

__all__ = [
    "EmptySiteSetError",
    "InvalidDimensionsError",
    "PALETTE",
    "Site",
    "color_for",
    "draw_markers",
    "generate_sites",
    "iter_animation",
    "make_site_set",
    "render_animation",
    "render_static",
]
