# tests/unit/test_sites.py

import numpy as np
import pytest

from voronoi_reveal.errors import EmptySiteSetError
from voronoi_reveal.sites import Site, make_site_set, site_coordinates, to_site


def test_make_site_set_preserves_order_and_coerces_pairs() -> None:
    sites = make_site_set([(0.2, 0.3), Site(0.9, 0.1), (1, 0)])
    assert list(sites) == [Site(0.2, 0.3), Site(0.9, 0.1), Site(1.0, 0.0)]


def test_site_set_is_immutable() -> None:
    sites = make_site_set([(0.5, 0.5)])
    extended = sites.append(Site(0.1, 0.1))
    assert len(sites) == 1
    assert len(extended) == 2
    with pytest.raises(TypeError):
        sites[0] = Site(0.0, 0.0)  # type: ignore[index]


def test_site_is_frozen() -> None:
    site = Site(0.1, 0.2)
    with pytest.raises(AttributeError):
        site.x = 0.5  # type: ignore[misc]


def test_to_site_accepts_out_of_range_points() -> None:
    assert to_site((-0.5, 1.5)) == Site(-0.5, 1.5)


def test_site_coordinates_shape() -> None:
    coords = site_coordinates([Site(0.1, 0.2), (0.3, 0.4)])
    assert coords.shape == (2, 2)
    assert coords.dtype == np.float64
    assert coords.tolist() == [[0.1, 0.2], [0.3, 0.4]]


def test_site_coordinates_rejects_empty() -> None:
    with pytest.raises(EmptySiteSetError):
        site_coordinates(make_site_set([]))
