"""
Conway's Game of Life generator.

A small toroidal board evolves under the B3/S23 rule and is stretched
onto the generator buffer by nearest-index sampling. When the board dies
out or freezes it is reseeded with a glider so the display never stalls.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Set, Tuple

import numpy as np

from ledcanvas.core.buffer import board_index_map
from ledcanvas.core.names import GeneratorName, ResizeName
from ledcanvas.generator.base import Generator

logger = logging.getLogger(__name__)

# Glider cells relative to the top-left of its 3x3 bounding box.
# Moves one cell right and one cell down every 4 generations.
GLIDER = ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2))


class SeedMode(Enum):
    RANDOM = auto()
    GLIDER = auto()


@dataclass
class LifeConfig:
    """Settings for the Game of Life generator."""
    board_width: int = 8
    board_height: int = 8

    # Initial population and what happens when the board stalls
    seed_mode: SeedMode = SeedMode.RANDOM
    reseed_on_stasis: bool = True
    random_density: float = 0.3

    # Gray level written for alive cells, colorized downstream
    alive_intensity: int = 180


class LifeBoard:
    """
    Two generations of a toroidal boolean grid.

    Cells are stored flat, addressed as ``y * width + x``. ``current`` is
    the last committed generation and ``next`` the one being computed;
    they are equal between steps.
    """

    MIN_SIZE = 3

    def __init__(self, width: int, height: int):
        if width < self.MIN_SIZE or height < self.MIN_SIZE:
            raise ValueError(
                f"Board must be at least {self.MIN_SIZE}x{self.MIN_SIZE}, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.current = np.zeros(width * height, dtype=bool)
        self.next = np.zeros(width * height, dtype=bool)
        self._neighbors = self._build_neighbor_table()

    def _build_neighbor_table(self) -> np.ndarray:
        """(W*H, 8) table of the flat indices of each cell's wrapped neighbors."""
        w, h = self.width, self.height
        ys, xs = np.divmod(np.arange(w * h), w)
        columns = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                # Python's modulo is non-negative, so -1 wraps to w - 1
                x_wrap = (xs + dx) % w
                y_wrap = (ys + dy) % h
                columns.append(y_wrap * w + x_wrap)
        return np.stack(columns, axis=1)

    def index(self, x: int, y: int) -> int:
        return (y % self.height) * self.width + (x % self.width)

    def cell(self, x: int, y: int) -> bool:
        return bool(self.current[self.index(x, y)])

    @property
    def alive_count(self) -> int:
        return int(np.count_nonzero(self.current))

    def alive_cells(self) -> Set[Tuple[int, int]]:
        """Coordinates of all alive cells in the current generation."""
        ys, xs = np.divmod(np.flatnonzero(self.current), self.width)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def alive_neighbors(self, x: int, y: int) -> int:
        return int(np.count_nonzero(self.current[self._neighbors[self.index(x, y)]]))

    def neighbor_counts(self) -> np.ndarray:
        """Alive neighbor count for every cell of the current generation."""
        return np.count_nonzero(self.current[self._neighbors], axis=1)

    def _check_generations(self):
        n = self.width * self.height
        if self.current.shape != (n,) or self.next.shape != (n,):
            raise RuntimeError(
                f"Board generations out of shape: {self.current.shape} / {self.next.shape}, expected ({n},)"
            )

    def evolve(self):
        """Compute ``next`` from ``current`` without touching ``current``."""
        self._check_generations()
        counts = self.neighbor_counts()
        # Birth on exactly 3, survival on 2 or 3
        self.next[:] = (counts == 3) | (self.current & (counts == 2))

    def is_stuck(self) -> bool:
        """True if ``next`` is empty or identical to ``current``."""
        if not self.next.any():
            return True
        return bool(np.array_equal(self.next, self.current))

    def commit(self):
        self._check_generations()
        self.current[:] = self.next

    def step(self, reseed_on_stasis: bool = True) -> bool:
        """
        Evolve one generation.

        Args:
            reseed_on_stasis: Replace a stalled board with a glider.

        Returns:
            Whether stasis was detected.
        """
        self.evolve()
        stuck = self.is_stuck()
        if stuck and reseed_on_stasis:
            logger.debug("Life board %dx%d stuck, reseeding glider", self.width, self.height)
            self.seed_glider()
        self.commit()
        return stuck

    def clear(self):
        self.current[:] = False
        self.next[:] = False

    def set_cells(self, cells: Iterable[Tuple[int, int]]):
        """Replace both generations with the given alive cells."""
        self.clear()
        for x, y in cells:
            self.current[self.index(x, y)] = True
        self.next[:] = self.current

    def seed_glider(self):
        """Place a single glider around the lower middle of the board."""
        x0 = self.width // 2 - 2
        y0 = self.height // 2 - 2
        self.set_cells((x0 + dx, y0 + dy) for dx, dy in GLIDER)

    def seed_random(self, rng: np.random.Generator, density: float = 0.3):
        """Fill each cell independently with probability ``density``."""
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be within [0, 1], got {density}")
        self.current[:] = rng.random(self.width * self.height) < density
        self.next[:] = self.current


class GameOfLife(Generator):
    """Game of Life rendered as a blocky gray pattern."""

    def __init__(
        self,
        width: int,
        height: int,
        config: Optional[LifeConfig] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(width, height, GeneratorName.GAME_OF_LIFE, ResizeName.QUALITY_RESIZE)
        self.cfg = config or LifeConfig()
        self.rng = np.random.default_rng(seed)

        if self.cfg.board_width > width or self.cfg.board_height > height:
            raise ValueError(
                f"Board {self.cfg.board_width}x{self.cfg.board_height} "
                f"exceeds display {width}x{height}"
            )
        if not 0 <= self.cfg.alive_intensity <= 0xFFFFFF:
            raise ValueError(f"Invalid alive intensity: {self.cfg.alive_intensity}")

        self.board = LifeBoard(self.cfg.board_width, self.cfg.board_height)
        self._index_map = board_index_map(
            self.cfg.board_width, self.cfg.board_height, width, height
        )
        self.reset(self.cfg.seed_mode)

    def reset(self, mode: SeedMode):
        if mode is SeedMode.RANDOM:
            self.board.seed_random(self.rng, self.cfg.random_density)
        elif mode is SeedMode.GLIDER:
            self.board.seed_glider()
        else:
            raise ValueError(f"Unknown seed mode: {mode}")

    def shuffle(self):
        self.reset(SeedMode.RANDOM)

    def update(self, amount: int):
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")

        # Speed dictates the number of generations per frame
        for _ in range(amount):
            self.board.step(self.cfg.reseed_on_stasis)

        self._render()

    def _render(self):
        alive = self.board.current[self._index_map]
        self._buffer[:] = np.where(alive, self.cfg.alive_intensity, 0)
