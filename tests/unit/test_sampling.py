# tests/unit/test_sampling.py

import random

import pytest

from voronoi_reveal.sampling import DEFAULT_SITE_COUNT, generate_sites


def test_default_sampling_range() -> None:
    sites = generate_sites(seed=123)
    assert len(sites) == DEFAULT_SITE_COUNT
    for site in sites:
        assert 0.1 <= site.x <= 0.9
        assert 0.1 <= site.y <= 0.9


def test_same_seed_same_sites() -> None:
    assert list(generate_sites(8, seed=7)) == list(generate_sites(8, seed=7))


def test_different_seeds_differ() -> None:
    assert list(generate_sites(8, seed=1)) != list(generate_sites(8, seed=2))


def test_explicit_rng_is_used_and_advanced() -> None:
    rng = random.Random(42)
    first = generate_sites(3, rng=rng)
    second = generate_sites(3, rng=rng)
    assert list(first) != list(second)
    assert list(generate_sites(3, rng=random.Random(42))) == list(first)


def test_custom_range() -> None:
    sites = generate_sites(50, seed=0, low=0.25, high=0.5)
    assert all(0.25 <= s.x <= 0.5 and 0.25 <= s.y <= 0.5 for s in sites)


def test_degenerate_range_gives_fixed_point() -> None:
    sites = generate_sites(3, seed=0, low=0.5, high=0.5)
    assert all(s.x == 0.5 and s.y == 0.5 for s in sites)


@pytest.mark.parametrize("count", [0, -3])
def test_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(ValueError):
        generate_sites(count, seed=0)


def test_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        generate_sites(2, seed=0, low=0.9, high=0.1)
