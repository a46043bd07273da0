"""Loudness sources feeding audio-reactive effects."""

from ledcanvas.audio.loudness import (
    EnvelopeParams,
    FixedLoudness,
    ManifestLoudness,
    apply_envelope,
)

__all__ = ["EnvelopeParams", "FixedLoudness", "ManifestLoudness", "apply_envelope"]
