"""
Tests for NumPy / PIL / OpenCV bridges
"""

import numpy as np
import pytest
from PIL import Image

from imgkernel.core.buffer import PixelBuffer
from imgkernel.core.exceptions import InvalidArgumentError
from imgkernel.core.image.converters import ImageConverters


class TestArrayConversion:
    def test_from_interleaved(self):
        array = np.zeros((2, 3, 3), dtype=np.float32)
        array[1, 2] = [0.1, 0.2, 0.3]
        im = ImageConverters.from_array(array)
        assert im.shape == (3, 2, 3)
        assert im.get(2, 1, 0) == pytest.approx(0.1)
        assert im.get(2, 1, 2) == pytest.approx(0.3)

    def test_from_2d(self):
        im = ImageConverters.from_array(np.arange(6, dtype=np.float64).reshape(2, 3))
        assert im.shape == (3, 2, 1)
        assert im.data.tolist() == [0, 1, 2, 3, 4, 5]

    def test_integer_scaled(self):
        im = ImageConverters.from_array(np.array([[0, 255]], dtype=np.uint8))
        assert im.data.tolist() == [0.0, 1.0]

    def test_bad_rank(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.from_array(np.zeros(5))

    def test_to_array_round_trip(self, rgb_image):
        array = ImageConverters.to_array(rgb_image)
        assert array.shape == (rgb_image.h, rgb_image.w, 3)
        back = ImageConverters.from_array(array)
        np.testing.assert_array_equal(back.data, rgb_image.data)


class TestPilConversion:
    def test_rgb(self):
        pil = Image.new("RGB", (2, 1), (255, 0, 51))
        im = ImageConverters.from_pil(pil)
        assert im.shape == (2, 1, 3)
        assert im.get(1, 0, 0) == pytest.approx(1.0)
        assert im.get(1, 0, 2) == pytest.approx(0.2)

    def test_palette_converted_to_rgb(self):
        pil = Image.new("P", (2, 2))
        assert ImageConverters.from_pil(pil).c == 3

    def test_to_pil_clamps(self):
        im = PixelBuffer(3, 1, 1)
        im.fill_from([-1.0, 0.5, 2.0])
        pil = ImageConverters.to_pil(im)
        assert pil.mode == "L"
        assert np.array(pil).ravel().tolist() == [0, 128, 255]
        assert im.data.tolist() == [-1.0, 0.5, 2.0]

    def test_to_pil_rgb(self, rgb_image):
        pil = ImageConverters.to_pil(rgb_image)
        assert pil.mode == "RGB"
        assert pil.size == (rgb_image.w, rgb_image.h)

    def test_to_pil_rejects_two_channels(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.to_pil(PixelBuffer(2, 2, 2))

    def test_save_and_load(self, rgb_image, tmp_path):
        path = tmp_path / "image.png"
        ImageConverters.save_image(rgb_image, path)
        loaded = ImageConverters.load_image(path)
        assert loaded.shape == rgb_image.shape
        np.testing.assert_allclose(loaded.data, rgb_image.data, atol=1 / 255)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImageConverters.load_image(tmp_path / "missing.png")


class TestBgrConversion:
    def test_from_bgr_swaps_channels(self):
        bgr = np.zeros((1, 1, 3), dtype=np.float32)
        bgr[0, 0] = [0.1, 0.2, 0.9]
        im = ImageConverters.from_bgr(bgr)
        assert im.get(0, 0, 0) == pytest.approx(0.9)
        assert im.get(0, 0, 2) == pytest.approx(0.1)

    def test_to_bgr(self, rgb_image):
        bgr = ImageConverters.to_bgr(rgb_image)
        np.testing.assert_array_equal(bgr[:, :, 0], rgb_image.planes[2])
        np.testing.assert_array_equal(bgr[:, :, 2], rgb_image.planes[0])

    def test_grayscale_passthrough(self):
        im = ImageConverters.from_bgr(np.full((2, 2), 0.5, dtype=np.float32))
        assert im.c == 1
        assert ImageConverters.to_bgr(im).shape == (2, 2, 1)
