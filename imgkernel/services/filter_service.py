"""
Filter Service - applies named kernels and resampling with their usage policy.

The kernel factories only build coefficients; this service knows which
kernels keep channels apart and which need clamping afterwards.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from imgkernel.core.buffer import PixelBuffer
from imgkernel.core.enums import FilterType
from imgkernel.core.image.colorspace import clamp_image
from imgkernel.core.image.convolution import convolve_image
from imgkernel.core.image.filters import FILTER_FACTORIES, FILTER_POLICIES
from imgkernel.core.image.processors import resize_image
from imgkernel.core.utils.decorators import timer
from imgkernel.core.utils.enum_converter import convert_enums_to_strings
from imgkernel.schemas import FilterParams, ResizeParams

logger = logging.getLogger(__name__)


class FilterService:
    """Service for applying kernels and resampling to pixel buffers."""

    @staticmethod
    def build_kernel(params: FilterParams) -> PixelBuffer:
        """
        Build the kernel described by params.

        Args:
            params: Filter parameters

        Returns:
            New kernel buffer
        """
        factory = FILTER_FACTORIES[params.filter_type]
        if params.filter_type == FilterType.BOX:
            return factory(params.size)
        if params.filter_type == FilterType.GAUSSIAN:
            return factory(params.sigma)
        return factory()

    def apply_filter(
        self,
        image: PixelBuffer,
        params: Optional[Union[FilterParams, Dict[str, Any]]] = None,
    ) -> Tuple[PixelBuffer, int]:
        """
        Convolve image with a named kernel.

        Preserve and clamp default to the kernel's policy unless params
        override them.

        Args:
            image: Source image
            params: Filter parameters (model, dict, or None for defaults)

        Returns:
            Tuple of (filtered image, processing time in ms)
        """
        if params is None:
            params = FilterParams()
        elif isinstance(params, dict):
            params = FilterParams(**params)

        policy = FILTER_POLICIES[params.filter_type]
        preserve = policy.preserve if params.preserve is None else params.preserve
        clamp = policy.clamp if params.clamp is None else params.clamp

        with timer() as t:
            kernel = self.build_kernel(params)
            result = convolve_image(image, kernel, preserve)
            if clamp:
                clamp_image(result)

        logger.info(
            f"Applied {params.filter_type.value} filter to {image.w}x{image.h}x{image.c} "
            f"(preserve={preserve}, clamp={clamp}) in {t['ms']} ms"
        )
        logger.debug(f"Filter params: {convert_enums_to_strings(params.model_dump())}")
        return result, t["ms"]

    def resize(
        self,
        image: PixelBuffer,
        params: Union[ResizeParams, Dict[str, Any]],
    ) -> Tuple[PixelBuffer, int]:
        """
        Resample image.

        Args:
            image: Source image
            params: Resize parameters (model or dict)

        Returns:
            Tuple of (resized image, processing time in ms)
        """
        if isinstance(params, dict):
            params = ResizeParams(**params)

        with timer() as t:
            result = resize_image(image, params.width, params.height, params.method)

        logger.info(
            f"Resized {image.w}x{image.h} -> {result.w}x{result.h} "
            f"({params.method.value}) in {t['ms']} ms"
        )
        return result, t["ms"]
