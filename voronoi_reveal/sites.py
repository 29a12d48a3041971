"""Site component and site sets.

A :class:`Site` is an immutable point in the normalized square. A *site set*
is an ordered persistent vector of sites; the order decides both the palette
index of each region and which site wins an exact distance tie (lowest index).

The rasterizers accept any sequence of :class:`Site` objects or plain
``(x, y)`` pairs. Coordinates are not validated: points outside ``[0, 1]`` are
legal and simply take part in the distance comparisons.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np
from pyrsistent import pvector
from pyrsistent.typing import PVector

from voronoi_reveal.errors import EmptySiteSetError
from voronoi_reveal.types import FloatArray


@dataclass(frozen=True)
class Site:
    """Point a Voronoi region is anchored to.

    Attributes:
        x: Horizontal coordinate (0 at left, 1 at right).
        y: Vertical coordinate (0 at top, 1 at bottom).
    """

    x: float
    y: float


SiteLike = Union[Site, Tuple[float, float]]
SiteSet = PVector[Site]


def to_site(value: SiteLike) -> Site:
    """Coerce a ``Site`` or an ``(x, y)`` pair into a ``Site``."""
    if isinstance(value, Site):
        return value
    x, y = value
    return Site(float(x), float(y))


def make_site_set(sites: Iterable[SiteLike]) -> SiteSet:
    """Build an immutable site set, preserving order.

    An empty input is allowed here; rendering it raises ``EmptySiteSetError``.
    """
    return pvector(to_site(site) for site in sites)


def site_coordinates(sites: Sequence[SiteLike]) -> FloatArray:
    """Return an ``(N, 2)`` float64 array of site coordinates.

    Raises:
        EmptySiteSetError: If ``sites`` is empty.
    """
    if len(sites) == 0:
        raise EmptySiteSetError()
    coords = [(site.x, site.y) for site in map(to_site, sites)]
    return np.asarray(coords, dtype=np.float64).reshape(len(coords), 2)
