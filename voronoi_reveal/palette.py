"""Fixed region palette.

Site ``i`` is drawn with ``PALETTE[i % len(PALETTE)]``. White is deliberately
absent so a region colour can never be mistaken for the unpainted background
of the progressive reveal.
"""

from typing import Tuple

import numpy as np

from voronoi_reveal.types import RGB, RGBA, IndexArray, PixelGrid

PALETTE: Tuple[RGB, ...] = (
    (255, 128, 128),
    (128, 255, 128),
    (128, 128, 255),
    (255, 255, 128),
    (255, 128, 255),
    (128, 255, 255),
)

OPAQUE = 255
UNPAINTED: RGBA = (255, 255, 255, OPAQUE)
MARKER_COLOR: RGBA = (0, 0, 0, OPAQUE)

PALETTE_RGBA = np.array([(*rgb, OPAQUE) for rgb in PALETTE], dtype=np.uint8)


def color_for(index: int) -> RGB:
    """Return the palette colour for a site index, cycling past the end."""
    if index < 0:
        raise ValueError(f"Site index must be non-negative, got {index}")
    return PALETTE[index % len(PALETTE)]


def colors_for(indices: IndexArray) -> PixelGrid:
    """Vectorized :func:`color_for`: map an index array to opaque RGBA.

    The result has the shape of ``indices`` plus a trailing channel axis and
    is a fresh array.
    """
    return PALETTE_RGBA[np.asarray(indices) % len(PALETTE)]
