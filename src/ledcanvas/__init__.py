"""Pixel generators and audio-reactive effects for LED matrices."""

from ledcanvas.audio.loudness import FixedLoudness, ManifestLoudness
from ledcanvas.effect.voluminize import Voluminize
from ledcanvas.generator.base import Generator
from ledcanvas.generator.life import GameOfLife, LifeConfig, SeedMode

__version__ = "0.1.0"
__all__ = [
    "FixedLoudness",
    "ManifestLoudness",
    "Voluminize",
    "Generator",
    "GameOfLife",
    "LifeConfig",
    "SeedMode",
]
