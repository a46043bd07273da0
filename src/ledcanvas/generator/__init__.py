"""Pixel generators."""

from ledcanvas.generator.base import Generator
from ledcanvas.generator.life import GameOfLife, LifeBoard, LifeConfig, SeedMode

__all__ = ["Generator", "GameOfLife", "LifeBoard", "LifeConfig", "SeedMode"]
