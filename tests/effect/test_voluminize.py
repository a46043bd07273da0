"""Tests for the loudness-driven Voluminize effect."""

import numpy as np
import pytest

from ledcanvas.audio.loudness import FixedLoudness
from ledcanvas.core.buffer import unpack_channels
from ledcanvas.core.names import EffectName
from ledcanvas.effect.voluminize import Voluminize


class TestVoluminize:
    def test_identity_at_full_loudness(self, random_buffer):
        effect = Voluminize(FixedLoudness(1.0))
        result = effect.apply(random_buffer)
        np.testing.assert_array_equal(result, random_buffer)

    def test_black_at_zero_loudness(self, random_buffer):
        effect = Voluminize(FixedLoudness(0.0))
        result = effect.apply(random_buffer)
        assert result.shape == random_buffer.shape
        assert not result.any()

    def test_half_red_truncates(self):
        effect = Voluminize(lambda: 0.5)
        result = effect.apply(np.array([0xFF0000, 0xFFFFFF, 0x010101]))
        np.testing.assert_array_equal(result, [0x7F0000, 0x7F7F7F, 0x000000])

    @pytest.mark.parametrize("volume", [0.0, 0.1, 0.33, 0.5, 0.99, 1.0])
    def test_channels_stay_in_range(self, random_buffer, volume):
        result = Voluminize(lambda: volume).apply(random_buffer)
        assert result.min() >= 0
        assert result.max() <= 0xFFFFFF
        for scaled, original in zip(unpack_channels(result), unpack_channels(random_buffer)):
            assert np.all(scaled <= original)
            np.testing.assert_array_equal(scaled, (original * volume).astype(int))

    def test_input_not_mutated(self, random_buffer):
        before = random_buffer.copy()
        result = Voluminize(lambda: 0.3).apply(random_buffer)
        np.testing.assert_array_equal(random_buffer, before)
        assert result is not random_buffer

    def test_loudness_polled_once_per_call(self, random_buffer):
        calls = []

        def source():
            calls.append(1)
            return 0.5

        effect = Voluminize(source)
        effect.apply(random_buffer)
        assert len(calls) == 1
        effect.apply(random_buffer)
        assert len(calls) == 2

    def test_follows_source_changes(self):
        loudness = FixedLoudness(1.0)
        effect = Voluminize(loudness)
        pixel = np.array([0x808080])
        assert effect.apply(pixel)[0] == 0x808080
        loudness.set(0.0)
        assert effect.apply(pixel)[0] == 0

    def test_out_of_range_loudness_clamped(self, random_buffer):
        np.testing.assert_array_equal(Voluminize(lambda: 1.7).apply(random_buffer), random_buffer)
        assert not Voluminize(lambda: -0.5).apply(random_buffer).any()

    @pytest.mark.parametrize("value, expected", [(float("nan"), 0), (float("inf"), 0x808080), (float("-inf"), 0)])
    def test_non_finite_loudness(self, value, expected):
        result = Voluminize(lambda: value).apply(np.array([0x808080]))
        assert result[0] == expected

    def test_none_buffer(self):
        with pytest.raises(ValueError):
            Voluminize(lambda: 1.0).apply(None)

    def test_mismatched_length(self):
        effect = Voluminize(lambda: 1.0, buffer_size=256)
        with pytest.raises(ValueError):
            effect.apply(np.zeros(100, dtype=np.int32))

    def test_accepts_read_only_input(self):
        buf = np.array([0x00FF00], dtype=np.int32)
        buf.flags.writeable = False
        assert Voluminize(lambda: 1.0).apply(buf)[0] == 0x00FF00

    def test_identity(self):
        effect = Voluminize(lambda: 1.0)
        assert effect.name is EffectName.VOLUMINIZE
        assert effect.id == 0
