"""Rendering subpackage.

Turns a site set into RGBA pixel grids:

* :mod:`voronoi_reveal.renderer.static`: one fully classified grid.
* :mod:`voronoi_reveal.renderer.progressive`: the radius-stepped reveal, a
  sequence of partially then fully classified grids.
* :mod:`voronoi_reveal.renderer.markers`: the black plus-shaped site markers
  drawn on top of either.
* :mod:`voronoi_reveal.renderer.image`: Pillow conversion and GIF export.

Grids are plain NumPy ``uint8`` arrays of shape ``(height, width, 4)``.
"""
