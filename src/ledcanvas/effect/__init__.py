"""Buffer effects."""

from ledcanvas.effect.base import Effect
from ledcanvas.effect.voluminize import Voluminize

__all__ = ["Effect", "Voluminize"]
