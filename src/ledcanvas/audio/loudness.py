"""
Loudness sources.

A loudness source is any zero-argument callable returning the current
normalized loudness in [0.0, 1.0]. Effects poll it once per frame.
"""

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

DEFAULT_FPS = 60


@dataclass
class EnvelopeParams:
    """Attack/Release envelope parameters in milliseconds."""

    attack_ms: float = 0.0  # Instant attack
    release_ms: float = 300.0


def _clamp(value: float) -> float:
    """Clip to [0, 1], treating NaN as silence."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def _ms_to_frames(ms: float, fps: int) -> int:
    return max(1, int((ms / 1000.0) * fps))


def apply_envelope(signal: np.ndarray, params: EnvelopeParams, fps: int = DEFAULT_FPS) -> np.ndarray:
    """
    Apply an attack/release envelope to a normalized signal.

    Values jump up at the attack rate and fade down at the release rate,
    which keeps the brightness from flickering on every transient.

    Args:
        signal: Per-frame values in [0, 1].
        params: Envelope attack/release parameters.
        fps: Frame rate the signal is sampled at.

    Returns:
        Smoothed signal, clipped to [0, 1].
    """
    attack_frames = _ms_to_frames(params.attack_ms, fps)
    release_frames = _ms_to_frames(params.release_ms, fps)

    signal = np.asarray(signal, dtype=np.float64)
    output = np.zeros_like(signal)
    current = 0.0

    for i, target in enumerate(signal):
        if target > current:
            if attack_frames <= 1:
                current = target
            else:
                current = current + (target - current) / attack_frames
        else:
            if release_frames <= 1:
                current = target
            else:
                current = current - (current - target) / release_frames
        output[i] = current

    return np.clip(output, 0.0, 1.0)


class FixedLoudness:
    """Constant loudness, adjustable at runtime (e.g. from a fader)."""

    def __init__(self, value: float = 1.0):
        self._value = _clamp(value)

    def set(self, value: float):
        self._value = _clamp(value)

    def __call__(self) -> float:
        return self._value


class ManifestLoudness:
    """
    Replays a per-frame loudness track.

    Call ``advance()`` once per track frame, or ``seek_time()`` when the
    renderer runs at a different frame rate than the track; calling the
    instance returns the value of the current frame.
    """

    def __init__(self, values, fps: int = DEFAULT_FPS, loop: bool = False):
        values = np.asarray(values, dtype=np.float64)
        if values.ndim != 1 or values.size == 0:
            raise ValueError("Loudness track must be a non-empty 1-D sequence")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.values = np.clip(np.nan_to_num(values, nan=0.0), 0.0, 1.0)
        self.fps = fps
        self.loop = loop
        self.position = 0

    @classmethod
    def from_manifest(
        cls,
        manifest: Union[dict[str, Any], str, Path],
        key: str = "global_energy",
        fps: Optional[int] = None,
        envelope: Optional[EnvelopeParams] = None,
        loop: bool = False,
    ) -> "ManifestLoudness":
        """
        Build a track from an audio-analysis manifest.

        Args:
            manifest: Manifest dict, or path to its JSON file.
            key: Per-frame field to read.
            fps: Frame rate of the track. Defaults to the manifest's
                ``metadata.fps``, or 60 when the manifest has none.
            envelope: Optional attack/release smoothing.
            loop: Restart from the first frame after the last.
        """
        if not isinstance(manifest, dict):
            with open(manifest, "r", encoding="utf-8") as f:
                manifest = json.load(f)
        if not isinstance(manifest, dict):
            raise ValueError("Manifest must be a JSON object")

        frames = manifest.get("frames")
        if not frames:
            raise ValueError("Manifest contains no frames")

        if fps is None:
            fps = int(manifest.get("metadata", {}).get("fps") or DEFAULT_FPS)

        if not all(isinstance(frame, dict) for frame in frames):
            raise ValueError("Manifest frames must be JSON objects")
        values = np.array([float(frame.get(key, 0.0)) for frame in frames])
        values = np.clip(np.nan_to_num(values, nan=0.0), 0.0, 1.0)
        if envelope is not None:
            values = apply_envelope(values, envelope, fps)
        return cls(values, fps=fps, loop=loop)

    def __len__(self) -> int:
        return self.values.size

    @property
    def duration(self) -> float:
        """Track length in seconds."""
        return self.values.size / self.fps

    def seek(self, frame: int):
        """Jump to a track frame, wrapping or holding the last frame."""
        if self.loop:
            self.position = frame % self.values.size
        else:
            self.position = min(max(frame, 0), self.values.size - 1)

    def seek_time(self, seconds: float):
        self.seek(int(round(seconds * self.fps)))

    def advance(self, frames: int = 1):
        self.seek(self.position + frames)

    def rewind(self):
        self.position = 0

    def __call__(self) -> float:
        return float(self.values[self.position])
