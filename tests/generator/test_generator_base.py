"""Tests for the Generator base class lifecycle."""

import numpy as np
import pytest

from ledcanvas.core.names import GeneratorName, ResizeName
from ledcanvas.generator.base import Generator


class CountingGenerator(Generator):
    """Fills the buffer with its frame counter and records hook calls."""

    def __init__(self, width=4, height=3):
        super().__init__(width, height, GeneratorName.NOISE, ResizeName.PIXEL_RESIZE)
        self.frame = 0
        self.activations = 0
        self.deactivations = 0

    def update(self, amount):
        self.frame += amount
        self._buffer[:] = self.frame

    def now_active(self):
        self.activations += 1

    def now_inactive(self):
        self.deactivations += 1


class TestGenerator:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Generator(4, 4, GeneratorName.NOISE, ResizeName.PIXEL_RESIZE)

    def test_buffer_allocated_black(self):
        gen = CountingGenerator(4, 3)
        assert gen.buffer.shape == (12,)
        assert gen.size == 12
        assert gen.width == 4
        assert gen.height == 3
        assert not gen.buffer.any()

    @pytest.mark.parametrize("w, h", [(0, 3), (4, 0), (-2, 3)])
    def test_non_positive_resolution(self, w, h):
        with pytest.raises(ValueError):
            CountingGenerator(w, h)

    def test_accessors(self):
        gen = CountingGenerator()
        assert gen.name == GeneratorName.NOISE
        assert gen.id == 18
        assert gen.resize_option == ResizeName.PIXEL_RESIZE
        assert gen.active is False
        assert gen.is_in_use()
        assert not gen.is_pass_through_mode_active()

    def test_buffer_is_read_only(self):
        gen = CountingGenerator()
        with pytest.raises(ValueError):
            gen.buffer[0] = 1

    def test_update_writes_in_place(self):
        gen = CountingGenerator()
        view = gen.buffer
        gen.update(2)
        np.testing.assert_array_equal(view, np.full(12, 2))
        gen.update(0)
        np.testing.assert_array_equal(gen.buffer, np.full(12, 2))

    def test_activation_hooks(self):
        gen = CountingGenerator()

        gen.set_active(True)
        assert gen.active
        assert gen.activations == 1

        gen.set_active(True)
        assert gen.activations == 1

        gen.set_active(False)
        assert not gen.active
        assert gen.deactivations == 1

        gen.set_active(False)
        assert gen.deactivations == 1
        assert gen.activations == 1

    def test_deactivating_inactive_fires_nothing(self):
        gen = CountingGenerator()
        gen.set_active(False)
        assert gen.activations == 0
        assert gen.deactivations == 0

    def test_default_shuffle_and_close_are_noops(self):
        gen = CountingGenerator()
        gen.update(1)
        before = gen.buffer.copy()
        gen.shuffle()
        gen.close()
        gen.close()
        np.testing.assert_array_equal(gen.buffer, before)

    def test_repr(self):
        text = repr(CountingGenerator())
        assert "CountingGenerator" in text
        assert "NOISE" in text
        assert "PIXEL_RESIZE" in text
        assert "active=False" in text
