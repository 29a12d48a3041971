# tests/integration/test_reveal_integration.py

import numpy as np
import pytest

from voronoi_reveal import generate_sites, render_animation, render_static
from voronoi_reveal.playback import advance, start
from tests.test_utils import painted_mask, region_mask


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_animation_converges_to_static(seed: int) -> None:
    width, height = 32, 24
    sites = generate_sites(5, seed=seed)
    static = render_static(sites, width, height)
    last = render_animation(sites, width, height)[-1]
    covered = painted_mask(last) & region_mask(sites, last)
    assert covered.any()
    assert np.array_equal(last[covered], static[covered])


def test_markers_identical_in_static_and_final_frame() -> None:
    sites = generate_sites(5, seed=12)
    static = render_static(sites, 20, 20)
    last = render_animation(sites, 20, 20)[-1]
    markers = ~region_mask(sites, static)
    assert np.array_equal(static[markers], last[markers])


def test_playback_ends_on_last_frame() -> None:
    sites = generate_sites(5, seed=0)
    frames = render_animation(sites, 12, 12)
    playback = start(frames, now=0.0)
    now = 0.0
    while playback.playing:
        now += 1.0
        playback = advance(playback, now=now, interval=1.0)
    assert playback.image is not None
    assert np.array_equal(playback.image, frames[-1])
    assert now == float(len(frames))
