"""
Core modules for imgkernel
"""

from .buffer import PixelBuffer, image_info, make_image, make_ones_image
from .enums import BoundsPolicy, EdgeMethod, FilterType, InterpolationMethod
from .exceptions import (
    HueOverflowError,
    ImageKernelError,
    InternalInvariantError,
    InvalidArgumentError,
)

__all__ = [
    "PixelBuffer",
    "make_image",
    "make_ones_image",
    "image_info",
    "BoundsPolicy",
    "EdgeMethod",
    "FilterType",
    "InterpolationMethod",
    "ImageKernelError",
    "InvalidArgumentError",
    "InternalInvariantError",
    "HueOverflowError",
]
