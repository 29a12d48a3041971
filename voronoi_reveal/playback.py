"""Immutable frame playback state and its reducer.

Presentation state (which frame is on screen, whether an animation is
running, when the last frame was shown) is kept out of the rasterizers and
modelled as a frozen :class:`Playback` value. Callers feed the current clock
into :func:`advance` on every UI tick and keep the returned value; nothing is
mutated in place.

Example::

    playback = start(render_animation(sites, 400, 400), now=time.monotonic())
    while playback.playing:
        playback = advance(playback, now=time.monotonic())
        show(playback.image)
"""

from dataclasses import dataclass, replace
from typing import Optional

from pyrsistent import pvector

from voronoi_reveal.types import FrameSequence, PixelGrid

# Seconds between frames; mirrors the reference viewer's 5 ms repaint check.
DEFAULT_FRAME_INTERVAL = 0.005


@dataclass(frozen=True)
class Playback:
    """Snapshot of the viewer's playback.

    Attributes:
        frames: Frame sequence being played (may be empty).
        current_frame: Index of the next frame to show.
        playing: True while frames are still being stepped through.
        last_update: Clock value (seconds) of the last frame change.
        image: Grid currently on screen, if any.
    """

    frames: FrameSequence = pvector()
    current_frame: int = 0
    playing: bool = False
    last_update: float = 0.0
    image: Optional[PixelGrid] = None


def start(frames: FrameSequence, now: float) -> Playback:
    """Begin playing ``frames`` from the first one."""
    frames = pvector(frames)
    return Playback(
        frames=frames,
        current_frame=0,
        playing=len(frames) > 0,
        last_update=now,
        image=None,
    )


def show(image: PixelGrid, now: float = 0.0) -> Playback:
    """A stopped playback that just displays ``image``."""
    return Playback(image=image, last_update=now)


def stop(playback: Playback) -> Playback:
    """Pause on the frame currently shown."""
    return replace(playback, playing=False)


def advance(
    playback: Playback, now: float, interval: float = DEFAULT_FRAME_INTERVAL
) -> Playback:
    """Step to the next frame once ``interval`` seconds have passed.

    After the last frame is shown the index wraps to 0 and playback stops,
    leaving the final frame on screen.
    """
    if not playback.playing or len(playback.frames) == 0:
        return playback
    if now - playback.last_update < interval:
        return playback

    image = playback.frames[playback.current_frame]
    next_frame = playback.current_frame + 1
    playing = True
    if next_frame >= len(playback.frames):
        next_frame = 0
        playing = False
    return replace(
        playback,
        current_frame=next_frame,
        playing=playing,
        last_update=now,
        image=image,
    )
