"""
Centralized enums for imgkernel.
"""

from enum import Enum


class BoundsPolicy(str, Enum):
    """How PixelBuffer.set treats coordinates equal to a dimension."""

    STRICT = "strict"  # accept [0, dim)
    LENIENT = "lenient"  # accept [0, dim], write through the flat index


class InterpolationMethod(str, Enum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"


class FilterType(str, Enum):
    """Named kernels available from the filter factories."""

    BOX = "box"
    GAUSSIAN = "gaussian"
    HIGHPASS = "highpass"
    SHARPEN = "sharpen"
    EMBOSS = "emboss"
    VEMBOSS = "vemboss"
    HEMBOSS = "hemboss"
    SOBEL_X = "sobel_x"
    SOBEL_Y = "sobel_y"


class EdgeMethod(str, Enum):
    SOBEL = "sobel"
