"""
Image processing kernels - modular architecture.

This package provides focused image processing utilities:
- colorspace: RGB/HSV/grayscale conversion and per-channel adjustments
- filters: Kernel factories and pairwise arithmetic
- convolution: Clamp-to-edge 2D convolution
- processors: Nearest-neighbor and bilinear resampling
- converters: NumPy, PIL and OpenCV bridges
"""

from imgkernel.core.image.colorspace import (
    clamp_image,
    feature_normalize,
    hsv_to_rgb,
    rgb_to_grayscale,
    rgb_to_hsv,
    scale_image,
    shift_image,
)
from imgkernel.core.image.converters import ImageConverters
from imgkernel.core.image.convolution import convolve_image
from imgkernel.core.image.filters import (
    add_image,
    l1_normalize,
    make_box_filter,
    make_emboss_filter,
    make_gaussian_filter,
    make_gx_filter,
    make_gy_filter,
    make_hemboss_filter,
    make_highpass_filter,
    make_sharpen_filter,
    make_vemboss_filter,
    sub_image,
)
from imgkernel.core.image.processors import bilinear_resize, nn_resize, resize_image

__all__ = [
    "ImageConverters",
    "add_image",
    "bilinear_resize",
    "clamp_image",
    "convolve_image",
    "feature_normalize",
    "hsv_to_rgb",
    "l1_normalize",
    "make_box_filter",
    "make_emboss_filter",
    "make_gaussian_filter",
    "make_gx_filter",
    "make_gy_filter",
    "make_hemboss_filter",
    "make_highpass_filter",
    "make_sharpen_filter",
    "make_vemboss_filter",
    "nn_resize",
    "resize_image",
    "rgb_to_grayscale",
    "rgb_to_hsv",
    "scale_image",
    "shift_image",
    "sub_image",
]
