"""
Base class for buffer effects.
"""

import abc
from typing import Optional

import numpy as np

from ledcanvas.core.names import EffectName, effect_id


class Effect(abc.ABC):
    """
    A transform from one pixel buffer to a new buffer of the same length.

    Effects never mutate their input.
    """

    def __init__(self, name: EffectName, buffer_size: Optional[int] = None):
        self.name = name
        self.buffer_size = buffer_size

    @property
    def id(self) -> int:
        return effect_id(self.name)

    def _check_buffer(self, buffer) -> np.ndarray:
        """Validate the input buffer and return it as a 1-D array."""
        if buffer is None:
            raise ValueError(f"{self.name.name}: buffer is None")
        buf = np.asarray(buffer)
        if buf.ndim != 1:
            raise ValueError(f"{self.name.name}: expected a flat buffer, got shape {buf.shape}")
        if self.buffer_size is not None and buf.size != self.buffer_size:
            raise ValueError(
                f"{self.name.name}: buffer length {buf.size} does not match {self.buffer_size}"
            )
        return buf

    @abc.abstractmethod
    def apply(self, buffer: np.ndarray) -> np.ndarray:
        """Return the transformed buffer."""
        pass
