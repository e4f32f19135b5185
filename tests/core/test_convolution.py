"""
Tests for the convolution engine
"""

import cv2
import numpy as np
import pytest

from imgkernel.core.buffer import PixelBuffer, make_ones_image
from imgkernel.core.exceptions import InvalidArgumentError
from imgkernel.core.image.convolution import convolve_image, get_conv
from imgkernel.core.image.filters import (
    make_box_filter,
    make_emboss_filter,
    make_gaussian_filter,
    make_highpass_filter,
)


class TestConvolveBox:
    """Averaging on the 3x3 grid"""

    def test_centre_is_mean(self, grid_image):
        result = convolve_image(grid_image, make_box_filter(3), True)
        assert result.get(1, 1, 0) == pytest.approx(5.0, abs=1e-5)

    def test_corner_replicates_edges(self, grid_image):
        """Top-left pixel is sampled four times under clamp-to-edge"""
        result = convolve_image(grid_image, make_box_filter(3), True)
        assert result.get(0, 0, 0) == pytest.approx((1 * 4 + 2 * 2 + 4 * 2 + 5) / 9, abs=1e-5)

    def test_box_one_is_identity(self, rgb_image):
        result = convolve_image(rgb_image, make_box_filter(1), True)
        assert result.shape == rgb_image.shape
        np.testing.assert_array_equal(result.data, rgb_image.data)

    def test_input_not_modified(self, rgb_image):
        before = rgb_image.data.copy()
        convolve_image(rgb_image, make_gaussian_filter(1.0), True)
        np.testing.assert_array_equal(rgb_image.data, before)


class TestConvolveChannels:
    """Channel broadcast and reduction rules"""

    def test_single_pixel_sum(self):
        """1x1 ones kernel over a 1x1 image returns the pixel"""
        im = PixelBuffer(1, 1, 1)
        im.set(0, 0, 0, 0.75)
        result = convolve_image(im, make_ones_image(1, 1, 1), False)
        assert result.shape == (1, 1, 1)
        assert result.get(0, 0, 0) == pytest.approx(0.75)

    def test_ones_kernel_sized_to_image(self, grid_image):
        """A 3x3 ones kernel centred on a 3x3 image sums every pixel"""
        result = convolve_image(grid_image, make_ones_image(3, 3, 1), False)
        assert result.get(1, 1, 0) == pytest.approx(45.0)

    def test_collapse_sums_channels(self, rgb_image):
        """preserve=False adds the per-channel responses"""
        result = convolve_image(rgb_image, make_ones_image(1, 1, 1), False)
        assert result.shape == (rgb_image.w, rgb_image.h, 1)
        np.testing.assert_allclose(result.planes[0], rgb_image.planes.sum(axis=0), rtol=1e-6)

    def test_broadcast_single_channel_kernel(self, rgb_image):
        """A 1-channel kernel filters each channel independently"""
        kernel = make_gaussian_filter(0.5)
        result = convolve_image(rgb_image, kernel, True)
        for k in range(3):
            plane = PixelBuffer.from_planar(rgb_image.planes[k : k + 1])
            alone = convolve_image(plane, kernel, True)
            np.testing.assert_allclose(result.planes[k], alone.planes[0], rtol=1e-6)

    def test_paired_channels(self, rgb_image):
        """A c-channel kernel pairs kernel channel k with image channel k"""
        kernel = PixelBuffer(1, 1, 3)
        kernel.planes[:, 0, 0] = [1.0, 2.0, 3.0]
        result = convolve_image(rgb_image, kernel, True)
        for k in range(3):
            np.testing.assert_allclose(result.planes[k], rgb_image.planes[k] * (k + 1), rtol=1e-6)

        collapsed = convolve_image(rgb_image, kernel, False)
        expected = sum(rgb_image.planes[k] * (k + 1) for k in range(3))
        np.testing.assert_allclose(collapsed.planes[0], expected, rtol=1e-5)

    @pytest.mark.parametrize("channels", [2, 4])
    def test_invalid_kernel_channels(self, rgb_image, channels):
        with pytest.raises(InvalidArgumentError):
            convolve_image(rgb_image, PixelBuffer(3, 3, channels), True)

    def test_empty_image(self):
        result = convolve_image(PixelBuffer(0, 4, 3), make_box_filter(3), True)
        assert result.shape == (0, 4, 3)
        result = convolve_image(PixelBuffer(0, 4, 3), make_box_filter(3), False)
        assert result.shape == (0, 4, 1)


class TestConvolveReference:
    """Cross-checks against scalar and OpenCV implementations"""

    def test_matches_scalar_reference(self, rgb_image):
        kernel = make_emboss_filter()
        result = convolve_image(rgb_image, kernel, True)
        for k in range(rgb_image.c):
            for y in range(rgb_image.h):
                for x in range(rgb_image.w):
                    expected = get_conv(rgb_image, x, y, k, kernel, 0)
                    assert result.get(x, y, k) == pytest.approx(expected, abs=1e-5)

    @pytest.mark.parametrize(
        "kernel_factory",
        [
            lambda: make_gaussian_filter(1.0),
            make_highpass_filter,
            make_emboss_filter,
        ],
    )
    def test_matches_opencv_replicate(self, rgb_image, kernel_factory):
        """cv2.filter2D is a correlation; BORDER_REPLICATE is clamp-to-edge"""
        kernel = kernel_factory()
        result = convolve_image(rgb_image, kernel, True)
        for k in range(rgb_image.c):
            expected = cv2.filter2D(
                np.ascontiguousarray(rgb_image.planes[k]),
                -1,
                kernel.planes[0],
                borderType=cv2.BORDER_REPLICATE,
            )
            np.testing.assert_allclose(result.planes[k], expected, atol=1e-5)

    def test_deterministic(self, rgb_image):
        kernel = make_gaussian_filter(1.0)
        first = convolve_image(rgb_image, kernel, False)
        second = convolve_image(rgb_image, kernel, False)
        np.testing.assert_array_equal(first.data, second.data)
