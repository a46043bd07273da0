"""
Base class for all pixel generators.

A generator renders into an internal buffer that is usually much larger
than the physical LED matrix; the output layer resamples it every frame
according to the generator's resize option.
"""

import abc
import logging

import numpy as np

from ledcanvas.core.buffer import allocate
from ledcanvas.core.names import GeneratorName, ResizeName, generator_id

logger = logging.getLogger(__name__)


class Generator(abc.ABC):
    """
    Abstract pixel source.

    Subclasses implement ``update(amount)`` and write into ``self._buffer``
    in place. Everything else is lifecycle: activation hooks, shuffling
    and ``close``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        name: GeneratorName,
        resize_option: ResizeName,
    ):
        self._buffer = allocate(width, height)
        self._width = width
        self._height = height
        self._name = name
        self._resize_option = resize_option
        self._active = False

        logger.info(
            "Generator: internalBufferSize: %d (%d/%d), name: %s, resize option: %s",
            self._buffer.size, width, height, name.name, resize_option.name,
        )

    @abc.abstractmethod
    def update(self, amount: int):
        """
        Advance the animation by ``amount`` steps and re-render the buffer.

        ``amount == 0`` only re-renders the current state.
        """
        pass

    def close(self):
        """Release external resources. Safe to call repeatedly."""
        pass

    def shuffle(self):
        """Randomize internal state. No-op unless overridden."""
        pass

    def now_active(self):
        """Called when the generator gets selected."""
        pass

    def now_inactive(self):
        """Called when the generator gets deselected."""
        pass

    def set_active(self, active: bool):
        if active and not self._active:
            self.now_active()
        elif not active and self._active:
            self.now_inactive()
        self._active = active

    @property
    def active(self) -> bool:
        return self._active

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._buffer.size

    @property
    def name(self) -> GeneratorName:
        return self._name

    @property
    def id(self) -> int:
        return generator_id(self._name)

    @property
    def resize_option(self) -> ResizeName:
        return self._resize_option

    @property
    def buffer(self) -> np.ndarray:
        """Read-only view of the internal buffer."""
        view = self._buffer.view()
        view.flags.writeable = False
        return view

    def is_in_use(self) -> bool:
        return True

    def is_pass_through_mode_active(self) -> bool:
        """Pass-through generators bypass the mixer and effects entirely."""
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name.name}, "
            f"resize_option={self._resize_option.name}, "
            f"width={self._width}, height={self._height}, active={self._active})"
        )
