"""
imgkernel - convolution, resampling and colorspace kernels on planar float images.
"""

from imgkernel.core import (
    BoundsPolicy,
    HueOverflowError,
    ImageKernelError,
    InternalInvariantError,
    InvalidArgumentError,
    PixelBuffer,
    image_info,
    make_image,
    make_ones_image,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "PixelBuffer",
    "make_image",
    "make_ones_image",
    "image_info",
    "BoundsPolicy",
    "ImageKernelError",
    "InvalidArgumentError",
    "InternalInvariantError",
    "HueOverflowError",
]
