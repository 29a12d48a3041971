# tests/unit/test_playback.py

import numpy as np
from pyrsistent import pvector

from voronoi_reveal.playback import (
    DEFAULT_FRAME_INTERVAL,
    Playback,
    advance,
    show,
    start,
    stop,
)


def make_frames(n: int):
    return pvector(np.full((2, 2, 4), i, dtype=np.uint8) for i in range(n))


def test_start_playing_from_first_frame() -> None:
    playback = start(make_frames(3), now=10.0)
    assert playback.playing
    assert playback.current_frame == 0
    assert playback.last_update == 10.0
    assert playback.image is None


def test_start_with_no_frames_does_not_play() -> None:
    playback = start(pvector(), now=1.0)
    assert not playback.playing
    assert advance(playback, now=100.0) is playback


def test_advance_waits_for_interval() -> None:
    playback = start(make_frames(3), now=0.0)
    assert advance(playback, now=DEFAULT_FRAME_INTERVAL / 2) is playback


def test_advance_steps_through_frames_then_stops() -> None:
    frames = make_frames(3)
    playback = start(frames, now=0.0)
    shown = []
    now = 0.0
    for _ in range(3):
        now += 1.0
        playback = advance(playback, now=now, interval=1.0)
        shown.append(playback.image)
    assert [int(img[0, 0, 0]) for img in shown] == [0, 1, 2]
    assert not playback.playing
    assert playback.current_frame == 0
    assert playback.last_update == now
    # stopped: further ticks change nothing
    assert advance(playback, now=now + 10.0, interval=1.0) is playback


def test_advance_is_pure() -> None:
    playback = start(make_frames(2), now=0.0)
    advanced = advance(playback, now=1.0, interval=0.5)
    assert advanced is not playback
    assert playback.current_frame == 0
    assert playback.image is None
    assert advanced.current_frame == 1


def test_stop_keeps_current_image() -> None:
    playback = advance(start(make_frames(3), now=0.0), now=1.0, interval=0.5)
    stopped = stop(playback)
    assert not stopped.playing
    assert stopped.image is playback.image
    assert stopped.current_frame == 1


def test_show_single_image() -> None:
    image = np.zeros((2, 2, 4), dtype=np.uint8)
    playback = show(image, now=3.0)
    assert isinstance(playback, Playback)
    assert playback.image is image
    assert not playback.playing
    assert len(playback.frames) == 0
