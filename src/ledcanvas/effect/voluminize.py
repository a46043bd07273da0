"""
Loudness-driven brightness effect.

Scales every color channel by the current normalized loudness, so the
picture pulses with the music.
"""

from typing import Callable, Optional

import numpy as np

from ledcanvas.core.buffer import PIXEL_DTYPE, pack_rgb, unpack_channels
from ledcanvas.core.names import EffectName
from ledcanvas.effect.base import Effect

# Zero-argument callable returning the current loudness in [0, 1]
LoudnessSource = Callable[[], float]


class Voluminize(Effect):
    """
    Multiply red, green and blue by the current loudness.

    The loudness is polled once per ``apply`` so the whole frame is
    scaled by the same snapshot.
    """

    def __init__(self, loudness: LoudnessSource, buffer_size: Optional[int] = None):
        super().__init__(EffectName.VOLUMINIZE, buffer_size)
        self.loudness = loudness

    def apply(self, buffer: np.ndarray) -> np.ndarray:
        buf = self._check_buffer(buffer)
        # NaN reads as silence, +/-inf saturates
        volume = float(np.clip(np.nan_to_num(float(self.loudness()), nan=0.0), 0.0, 1.0))

        r, g, b = unpack_channels(buf)
        # astype truncates toward zero; channels stay within [0, 255]
        r = (r * volume).astype(PIXEL_DTYPE)
        g = (g * volume).astype(PIXEL_DTYPE)
        b = (b * volume).astype(PIXEL_DTYPE)

        return pack_rgb(r, g, b)
