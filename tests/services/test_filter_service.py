"""
Tests for FilterService
"""

import logging

import numpy as np
import pytest
from pydantic import ValidationError

from imgkernel.core.enums import FilterType, InterpolationMethod
from imgkernel.schemas import FilterParams, ResizeParams
from imgkernel.services.filter_service import FilterService


@pytest.fixture
def service():
    return FilterService()


class TestApplyFilter:
    def test_defaults_to_box(self, service, rgb_image):
        result, elapsed_ms = service.apply_filter(rgb_image)
        assert result.shape == rgb_image.shape
        assert isinstance(elapsed_ms, int) and elapsed_ms >= 0

    def test_highpass_collapses_and_clamps(self, service, rgb_image):
        result, _ = service.apply_filter(rgb_image, FilterParams(filter_type=FilterType.HIGHPASS))
        assert result.c == 1
        assert result.data.min() >= 0.0
        assert result.data.max() <= 1.0

    def test_override_policy(self, service, rgb_image):
        params = {"filter_type": "highpass", "preserve": True, "clamp": False}
        result, _ = service.apply_filter(rgb_image, params)
        assert result.c == 3
        assert result.data.min() < 0.0

    def test_gaussian_uses_sigma(self, service):
        params = FilterParams(filter_type=FilterType.GAUSSIAN, sigma=2.0)
        assert service.build_kernel(params).shape == (13, 13, 1)

    def test_box_uses_size(self, service):
        params = FilterParams(filter_type=FilterType.BOX, size=5)
        kernel = service.build_kernel(params)
        assert kernel.shape == (5, 5, 1)
        np.testing.assert_allclose(kernel.data, 1 / 25, rtol=1e-6)

    def test_literal_kernels(self, service):
        kernel = service.build_kernel(FilterParams(filter_type=FilterType.SOBEL_Y))
        assert kernel.get(1, 2, 0) == 2.0

    def test_logs_operation(self, service, grid_image, caplog):
        caplog.set_level(logging.INFO, logger="imgkernel.services.filter_service")
        service.apply_filter(grid_image, {"filter_type": "sharpen"})
        assert "Applied sharpen filter" in caplog.text

    @pytest.mark.parametrize("params", [{"size": 0}, {"sigma": -1.0}, {"filter_type": "blur"}])
    def test_invalid_params(self, service, grid_image, params):
        with pytest.raises(ValidationError):
            service.apply_filter(grid_image, params)


class TestResize:
    def test_resize(self, service, rgb_image):
        result, elapsed_ms = service.resize(
            rgb_image, ResizeParams(width=3, height=2, method=InterpolationMethod.NEAREST)
        )
        assert result.shape == (3, 2, 3)
        assert elapsed_ms >= 0

    def test_resize_from_dict_keeps_aspect(self, service, rgb_image):
        result, _ = service.resize(rgb_image, {"width": 12})
        assert result.shape == (12, 10, 3)

    def test_size_required(self):
        with pytest.raises(ValidationError):
            ResizeParams()
