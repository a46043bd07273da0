"""
Pixel buffer helpers.

A pixel buffer is a flat, row-major int32 array holding one packed
0xRRGGBB color per display cell. Generators own one, effects return new
ones, and the preview layer unpacks them into RGB images.
"""

from typing import Tuple

import numpy as np

PIXEL_DTYPE = np.int32


def allocate(width: int, height: int) -> np.ndarray:
    """
    Allocate a zero-filled (black) buffer for a width x height grid.

    Raises:
        ValueError: If either dimension is not positive.
    """
    check_resolution(width, height)
    return np.zeros(width * height, dtype=PIXEL_DTYPE)


def check_resolution(width: int, height: int) -> None:
    """Reject non-positive resolutions."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Resolution must be positive, got {width}x{height}")


def unpack_channels(buffer: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Split packed colors into their red, green and blue channels.

    Returns:
        Three int32 arrays with values in [0, 255].
    """
    buf = np.asarray(buffer, dtype=PIXEL_DTYPE)
    r = (buf >> 16) & 0xFF
    g = (buf >> 8) & 0xFF
    b = buf & 0xFF
    return r, g, b


def pack_rgb(r, g, b) -> np.ndarray:
    """Pack 8-bit channels (scalars or arrays) into 0xRRGGBB ints."""
    r = np.asarray(r, dtype=PIXEL_DTYPE) & 0xFF
    g = np.asarray(g, dtype=PIXEL_DTYPE) & 0xFF
    b = np.asarray(b, dtype=PIXEL_DTYPE) & 0xFF
    return (r << 16) | (g << 8) | b


def gray_to_packed(buffer: np.ndarray) -> np.ndarray:
    """Turn 0-255 gray intensities into packed gray colors (v, v, v)."""
    v = np.clip(np.asarray(buffer, dtype=PIXEL_DTYPE), 0, 255)
    return pack_rgb(v, v, v)


def nearest_index(i, board_size: int, display_size: int):
    """
    Map a display coordinate onto a smaller board by nearest-index
    downsampling.

    Boards narrower than the display are stretched with
    ``i * board_size // display_size``; an equal-sized board maps 1:1.
    Works on scalars and integer arrays alike.
    """
    if board_size > display_size:
        raise ValueError(
            f"Board size {board_size} exceeds display size {display_size}"
        )
    if board_size < display_size:
        return i * board_size // display_size
    return i


def board_index_map(
    board_width: int,
    board_height: int,
    display_width: int,
    display_height: int,
) -> np.ndarray:
    """
    Precompute, for every display pixel, the flat board index it samples.

    Returns:
        int array of length display_width * display_height.
    """
    xs = nearest_index(np.arange(display_width), board_width, display_width)
    ys = nearest_index(np.arange(display_height), board_height, display_height)
    return (ys[:, None] * board_width + xs[None, :]).ravel()
