"""
Kernel factories and pairwise image arithmetic.

Every factory returns a freshly allocated single-channel kernel.

Kernels whose coefficients sum to 1 (box, gaussian, sharpen, emboss) keep the
average brightness and are meant to be applied with channel preservation.
Kernels that sum to 0 (highpass, sobel) should be applied without it, and
their output clamped, since the response can leave [0, 1].
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

import numpy as np

from imgkernel.core.buffer import PixelBuffer, make_ones_image
from imgkernel.core.constants import ErrorMessages, KernelConstants
from imgkernel.core.enums import FilterType
from imgkernel.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def l1_normalize(im: PixelBuffer) -> None:
    """
    Scale the buffer in place so its samples sum to 1.

    A buffer summing to zero cannot be normalized and is zeroed.
    """
    total = float(im.data.sum(dtype=np.float64))
    if total == 0:
        logger.warning(f"l1_normalize: {im!r} sums to zero, zeroing buffer")
        im.data.fill(0)
        return
    np.divide(im.planes, total, out=im.planes)


def _literal_3x3(values: Sequence[float]) -> PixelBuffer:
    kernel = PixelBuffer(3, 3, 1)
    kernel.fill_from(values)
    return kernel


def make_box_filter(w: int) -> PixelBuffer:
    """Create a normalized w x w averaging kernel."""
    if w < 1:
        raise InvalidArgumentError(
            ErrorMessages.INVALID_SIZE.format(name="box filter size", value=w), argument="w"
        )
    kernel = make_ones_image(w, w, 1)
    l1_normalize(kernel)
    return kernel


def make_gaussian_filter(sigma: float) -> PixelBuffer:
    """
    Create a normalized Gaussian kernel.

    The kernel side is the smallest odd integer >= 6 * sigma, so it spans
    about three sigma on either side of the centre.

    Args:
        sigma: Standard deviation in pixels (must be positive)

    Returns:
        Square single-channel kernel summing to 1
    """
    if not sigma > 0:
        raise InvalidArgumentError(
            ErrorMessages.INVALID_PARAMETER.format(param="sigma", value=sigma), argument="sigma"
        )

    six_sigma = int(math.ceil(sigma * KernelConstants.GAUSSIAN_SIGMA_SPAN))
    size = six_sigma if six_sigma % 2 else six_sigma + 1
    mean = size // 2

    offsets = np.arange(size, dtype=np.float64) - mean
    dist2 = offsets[None, :] ** 2 + offsets[:, None] ** 2
    multiplier = 1.0 / (KernelConstants.TWO_PI * sigma * sigma)

    kernel = PixelBuffer(size, size, 1)
    kernel.planes[0] = multiplier * np.exp(-dist2 / (2 * sigma * sigma))
    l1_normalize(kernel)
    return kernel


def make_highpass_filter() -> PixelBuffer:
    #  0 -1  0
    # -1  4 -1
    #  0 -1  0
    return _literal_3x3(KernelConstants.HIGHPASS)


def make_sharpen_filter() -> PixelBuffer:
    #  0 -1  0
    # -1  5 -1
    #  0 -1  0
    return _literal_3x3(KernelConstants.SHARPEN)


def make_emboss_filter() -> PixelBuffer:
    # -2 -1  0
    # -1  1  1
    #  0  1  2
    return _literal_3x3(KernelConstants.EMBOSS)


def make_vemboss_filter() -> PixelBuffer:
    #  0  1  0
    #  0  1  0
    #  0 -1  0
    return _literal_3x3(KernelConstants.VEMBOSS)


def make_hemboss_filter() -> PixelBuffer:
    #  0  0  0
    # -1  1  1
    #  0  0  0
    return _literal_3x3(KernelConstants.HEMBOSS)


def make_gx_filter() -> PixelBuffer:
    # -1  0  1
    # -2  0  2
    # -1  0  1
    return _literal_3x3(KernelConstants.SOBEL_X)


def make_gy_filter() -> PixelBuffer:
    # -1 -2 -1
    #  0  0  0
    #  1  2  1
    return _literal_3x3(KernelConstants.SOBEL_Y)


def _require_same_shape(a: PixelBuffer, b: PixelBuffer) -> None:
    if not a.same_shape(b):
        raise InvalidArgumentError(ErrorMessages.SHAPE_MISMATCH.format(a=a.shape, b=b.shape))


def add_image(a: PixelBuffer, b: PixelBuffer) -> PixelBuffer:
    """Return a new image holding a + b. Shapes must match exactly."""
    _require_same_shape(a, b)
    return PixelBuffer.from_planar(a.planes + b.planes)


def sub_image(a: PixelBuffer, b: PixelBuffer) -> PixelBuffer:
    """Return a new image holding a - b. Shapes must match exactly."""
    _require_same_shape(a, b)
    return PixelBuffer.from_planar(a.planes - b.planes)


@dataclass(frozen=True)
class FilterPolicy:
    """How a kernel should be applied."""

    preserve: bool
    clamp: bool


FILTER_FACTORIES: Dict[FilterType, Callable[..., PixelBuffer]] = {
    FilterType.BOX: make_box_filter,
    FilterType.GAUSSIAN: make_gaussian_filter,
    FilterType.HIGHPASS: make_highpass_filter,
    FilterType.SHARPEN: make_sharpen_filter,
    FilterType.EMBOSS: make_emboss_filter,
    FilterType.VEMBOSS: make_vemboss_filter,
    FilterType.HEMBOSS: make_hemboss_filter,
    FilterType.SOBEL_X: make_gx_filter,
    FilterType.SOBEL_Y: make_gy_filter,
}

FILTER_POLICIES: Dict[FilterType, FilterPolicy] = {
    FilterType.BOX: FilterPolicy(preserve=True, clamp=False),
    FilterType.GAUSSIAN: FilterPolicy(preserve=True, clamp=False),
    FilterType.HIGHPASS: FilterPolicy(preserve=False, clamp=True),
    FilterType.SHARPEN: FilterPolicy(preserve=True, clamp=True),
    FilterType.EMBOSS: FilterPolicy(preserve=True, clamp=True),
    FilterType.VEMBOSS: FilterPolicy(preserve=True, clamp=True),
    FilterType.HEMBOSS: FilterPolicy(preserve=True, clamp=True),
    FilterType.SOBEL_X: FilterPolicy(preserve=False, clamp=False),
    FilterType.SOBEL_Y: FilterPolicy(preserve=False, clamp=False),
}
