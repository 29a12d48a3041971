"""Seeded random site sampling."""

import random
from typing import Optional, Tuple

import structlog

from voronoi_reveal.sites import Site, SiteSet, make_site_set

DEFAULT_SITE_COUNT = 5
DEFAULT_SITE_RANGE: Tuple[float, float] = (0.1, 0.9)

logger = structlog.get_logger()


def generate_sites(
    count: int = DEFAULT_SITE_COUNT,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    low: float = DEFAULT_SITE_RANGE[0],
    high: float = DEFAULT_SITE_RANGE[1],
) -> SiteSet:
    """Sample ``count`` sites uniformly from ``[low, high]`` on both axes.

    Arguments:
        count: Number of sites to draw.
        seed: Seed for a fresh ``random.Random``; ignored when ``rng`` is given.
        rng: Random source to draw from. Advanced by ``2 * count`` draws.
        low: Lower bound of each coordinate.
        high: Upper bound of each coordinate.

    Returns:
        SiteSet: Sites in draw order (x then y for each site).
    """
    if count <= 0:
        raise ValueError(f"Site count must be positive, got {count}")
    if low > high:
        raise ValueError(f"Empty sampling range [{low}, {high}]")
    if rng is None:
        rng = random.Random(seed)

    sites = []
    for _ in range(count):
        x = rng.uniform(low, high)
        y = rng.uniform(low, high)
        sites.append(Site(x, y))
    logger.debug("sites_generated", count=count, low=low, high=high)
    return make_site_set(sites)
