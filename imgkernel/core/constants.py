"""
Constants and configuration values for imgkernel.
Centralizes all magic numbers and message templates.
"""

import math


# Pixel buffer constants
class ImageConstants:
    """Constants related to pixel buffers."""

    # Number of samples dumped by image_info
    INFO_SAMPLE_COUNT = 10

    # Channel counts
    GRAYSCALE_CHANNELS = 1
    RGB_CHANNELS = 3

    # Sample domain after clamping
    SAMPLE_MIN = 0.0
    SAMPLE_MAX = 1.0

    # 8-bit conversion at the I/O boundary
    UINT8_MAX = 255.0


# Colorspace constants
class ColorConstants:
    """Constants for colorspace conversions."""

    # Y' = 0.299 R' + 0.587 G' + 0.114 B'
    LUMA_RED = 0.299
    LUMA_GREEN = 0.587
    LUMA_BLUE = 0.114

    HUE_DEGREES = 360.0
    HUE_SECTOR_DEGREES = 60.0
    HUE_SECTORS = 6.0


# Kernel constants
class KernelConstants:
    """Constants for kernel factories."""

    TWO_PI = 2.0 * math.pi

    # Gaussian kernel covers +/- 3 sigma
    GAUSSIAN_SIGMA_SPAN = 6

    HIGHPASS = [0, -1, 0, -1, 4, -1, 0, -1, 0]
    SHARPEN = [0, -1, 0, -1, 5, -1, 0, -1, 0]
    EMBOSS = [-2, -1, 0, -1, 1, 1, 0, 1, 2]
    VEMBOSS = [0, 1, 0, 0, 1, 0, 0, -1, 0]
    HEMBOSS = [0, 0, 0, -1, 1, 1, 0, 0, 0]
    SOBEL_X = [-1, 0, 1, -2, 0, 2, -1, 0, 1]
    SOBEL_Y = [-1, -2, -1, 0, 0, 0, 1, 2, 1]


# Edge detection default parameters
class EdgeDetectionDefaults:
    """Default parameters for edge detection."""

    GRAYSCALE_FIRST = False
    BLUR_ENABLED = False
    BLUR_SIGMA = 1.0
    THRESHOLD = 0.5
    NORMALIZE_MAGNITUDE = False


# System constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ENV_PREFIX = "IMGKERNEL_"


# Error messages
class ErrorMessages:
    """Standard error messages."""

    NEGATIVE_DIMENSION = "Image dimensions must be non-negative, got {w}x{h}x{c}"
    EMPTY_IMAGE = "Cannot read a pixel from an empty {w}x{h}x{c} image"
    SIZE_MISMATCH = "Bulk load expects {expected} values (w*h), got {actual}"
    VALUES_TOO_SHORT = "Bulk load count {count} exceeds the {available} values supplied"
    SHAPE_MISMATCH = "Image shapes differ: {a} vs {b}"
    CHANNEL_COUNT = "{operation} requires a {expected}-channel image, got {actual}"
    KERNEL_CHANNELS = "Kernel channel count {kernel} must be 1 or match the image ({image})"
    INVALID_SIZE = "Invalid {name}: {value}"
    INVALID_PARAMETER = "Invalid parameter {param}: {value}"
