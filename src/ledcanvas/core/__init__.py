"""Pixel buffer and identity primitives shared by generators and effects."""

from ledcanvas.core.buffer import allocate, gray_to_packed, pack_rgb, unpack_channels
from ledcanvas.core.names import EffectName, GeneratorName, ResizeName, display_name

__all__ = [
    "allocate",
    "gray_to_packed",
    "pack_rgb",
    "unpack_channels",
    "EffectName",
    "GeneratorName",
    "ResizeName",
    "display_name",
]
