"""
Preview rendering.

Turns packed pixel buffers into Pillow images so frames can be inspected
without a physical matrix attached.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

import numpy as np
from PIL import Image

from ledcanvas.core.buffer import unpack_channels


@dataclass
class PreviewConfig:
    """Preview output settings."""
    scale: int = 8  # Each buffer pixel becomes a scale x scale block
    fps: int = 30


def unpack_rgb(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Convert a packed buffer into an image array.

    Returns:
        (H, W, 3) uint8 RGB array.
    """
    buf = np.asarray(buffer)
    if buf.size != width * height:
        raise ValueError(f"Buffer length {buf.size} does not match {width}x{height}")
    r, g, b = unpack_channels(buf)
    rgb = np.stack([r, g, b], axis=-1).astype(np.uint8)
    return rgb.reshape(height, width, 3)


def to_image(buffer: np.ndarray, width: int, height: int, scale: int = 1) -> Image.Image:
    """Build a Pillow image, upscaled with nearest-neighbour blocks."""
    if scale < 1:
        raise ValueError(f"Scale must be >= 1, got {scale}")
    img = Image.fromarray(unpack_rgb(buffer, width, height))
    if scale > 1:
        img = img.resize((width * scale, height * scale), Image.NEAREST)
    return img


def save_gif(
    frames: Iterable[Image.Image],
    output_path: Union[str, Path],
    fps: int = 30,
) -> Path:
    """
    Write frames as a looping animated GIF.

    Pillow folds identical consecutive frames into one and adds up their
    durations, so the file may hold fewer frames than were passed in.
    Playback time is unchanged.

    Returns:
        Path to the written file.
    """
    images = list(frames)
    if not images:
        raise ValueError("No frames to write")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    images[0].save(
        output_path,
        save_all=True,
        append_images=images[1:],
        duration=max(1, int(1000 / fps)),
        loop=0,
    )
    return output_path
