"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

# Glider seeded on an 8x8 board
GLIDER_8X8 = {(3, 2), (4, 3), (2, 4), (3, 4), (4, 4)}


@pytest.fixture
def rng() -> np.random.Generator:
    """Reproducible random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def glider_cells() -> set[tuple[int, int]]:
    return set(GLIDER_8X8)


@pytest.fixture
def random_buffer(rng) -> np.ndarray:
    """16x16 buffer of random packed colors."""
    return rng.integers(0, 0x1000000, size=256, dtype=np.int32)


@pytest.fixture
def manifest() -> dict:
    """
    Minimal audio-analysis manifest.

    Returns:
        Dict with a metadata header and five frames of loudness.
    """
    energies = [0.0, 0.25, 1.0, 0.5, 0.1]
    return {
        "metadata": {"bpm": 120.0, "duration": 5 / 60, "fps": 60, "n_frames": 5},
        "frames": [
            {"frame_index": i, "global_energy": e, "is_beat": i == 2}
            for i, e in enumerate(energies)
        ],
    }
