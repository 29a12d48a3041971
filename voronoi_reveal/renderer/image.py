"""Pillow conversion and export for pixel grids and frame sequences."""

import os
from typing import List, Sequence, Union

import structlog
from PIL import Image

from voronoi_reveal.types import PixelGrid

DEFAULT_FPS = 20

logger = structlog.get_logger()

PathLike = Union[str, "os.PathLike[str]"]


def to_image(grid: PixelGrid) -> Image.Image:
    """Wrap an RGBA grid as a Pillow ``RGBA`` image (pixel data is copied)."""
    if grid.ndim != 3 or grid.shape[2] != 4:
        raise ValueError(f"Expected a (height, width, 4) grid, got shape {grid.shape}")
    return Image.fromarray(grid).convert("RGBA")


def to_images(frames: Sequence[PixelGrid]) -> List[Image.Image]:
    """Convert every frame of a sequence to a Pillow image."""
    return [to_image(frame) for frame in frames]


def save_image(grid: PixelGrid, path: PathLike) -> None:
    """Write a single grid to ``path``; the format follows the extension."""
    to_image(grid).save(path)


def save_animation(
    frames: Sequence[PixelGrid], path: PathLike, fps: int = DEFAULT_FPS
) -> None:
    """Write a frame sequence as a looping animated GIF.

    Raises:
        ValueError: If ``frames`` is empty or ``fps`` is not positive.
    """
    if len(frames) == 0:
        raise ValueError("Cannot save an animation without frames")
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    images = [image.convert("RGB") for image in to_images(frames)]
    images[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=max(1, round(1000 / fps)),
        loop=0,
    )
    logger.debug("animation_saved", path=str(path), frames=len(images), fps=fps)
