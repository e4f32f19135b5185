"""
Colorspace conversions and per-channel adjustments.

In-place mutators (rgb_to_hsv, hsv_to_rgb, shift_image, scale_image,
clamp_image, feature_normalize) modify the buffer they receive and return
None. rgb_to_grayscale allocates a new buffer.
"""

import logging
from typing import Optional

import numpy as np

from imgkernel.core.buffer import DTYPE, PixelBuffer
from imgkernel.core.constants import ColorConstants, ErrorMessages, ImageConstants
from imgkernel.core.exceptions import HueOverflowError, InvalidArgumentError

logger = logging.getLogger(__name__)


def three_way_max(a: float, b: float, c: float) -> float:
    return (a if a > c else c) if a > b else (b if b > c else c)


def three_way_min(a: float, b: float, c: float) -> float:
    return (a if a < c else c) if a < b else (b if b < c else c)


def _require_rgb(im: PixelBuffer, operation: str) -> None:
    if im.c != ImageConstants.RGB_CHANNELS:
        raise InvalidArgumentError(
            ErrorMessages.CHANNEL_COUNT.format(
                operation=operation, expected=ImageConstants.RGB_CHANNELS, actual=im.c
            ),
            argument="im",
        )


def rgb_to_grayscale(im: PixelBuffer) -> PixelBuffer:
    """
    Reduce an RGB image to luma.

    Args:
        im: 3-channel RGB image

    Returns:
        New single-channel image with Y' = 0.299 R + 0.587 G + 0.114 B
    """
    _require_rgb(im, "rgb_to_grayscale")
    r, g, b = (plane.astype(np.float64) for plane in im.planes)

    gray = PixelBuffer(im.w, im.h, ImageConstants.GRAYSCALE_CHANNELS)
    gray.planes[0] = (
        ColorConstants.LUMA_RED * r + ColorConstants.LUMA_GREEN * g + ColorConstants.LUMA_BLUE * b
    )
    return gray


def rgb_to_hsv(im: PixelBuffer) -> None:
    """
    Convert an RGB image to HSV in place.

    Hue is stored as a fraction of a full turn in [0, 1). Inputs are not
    clamped, so values outside [0, 1] produce out-of-range V (and possibly S).
    Grey pixels (zero chroma) get hue 0; black pixels get saturation 0.
    """
    _require_rgb(im, "rgb_to_hsv")
    r, g, b = im.planes[0].copy(), im.planes[1].copy(), im.planes[2].copy()

    value = np.maximum(np.maximum(r, g), b)
    minimum = np.minimum(np.minimum(r, g), b)
    chroma = value - minimum

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(value > 0, chroma / np.where(value > 0, value, 1), 0)

        safe_chroma = np.where(chroma != 0, chroma, 1)
        # Blue takes precedence over green, green over red, when maxima tie
        sector = np.select(
            [value == b, value == g, value == r],
            [
                (r - g) / safe_chroma + 4,
                (b - r) / safe_chroma + 2,
                (g - b) / safe_chroma,
            ],
            default=0,
        )
    sector = np.where(chroma != 0, sector, 0)

    hue = sector / ColorConstants.HUE_SECTORS
    hue = np.where(sector < 0, hue + 1, hue)

    im.planes[0] = hue
    im.planes[1] = saturation
    im.planes[2] = value


def hsv_to_rgb(im: PixelBuffer, wrap_hue: Optional[bool] = None) -> None:
    """
    Convert an HSV image back to RGB in place.

    Args:
        im: 3-channel HSV image with hue as a fraction of a turn
        wrap_hue: Reduce hue modulo 1 first. Defaults to the configured
            processing.hue_wrap setting.

    Raises:
        HueOverflowError: if a hue of 360 degrees or more (or NaN) reaches the
            sector dispatch. The image is left untouched in that case.
    """
    _require_rgb(im, "hsv_to_rgb")
    if wrap_hue is None:
        from imgkernel.config import get_settings

        wrap_hue = get_settings().processing.hue_wrap

    hue = im.planes[0].astype(np.float64)
    if wrap_hue:
        hue = np.mod(hue, 1.0)
        hue[hue >= 1.0] = 0.0

    h = hue * ColorConstants.HUE_DEGREES
    overflow = ~(h < ColorConstants.HUE_DEGREES)
    if overflow.any():
        bad = float(h[overflow][0])
        logger.error(f"hue overflow! {bad} degrees in {np.count_nonzero(overflow)} pixel(s)")
        raise HueOverflowError(bad)

    s = im.planes[1].astype(np.float64)
    v = im.planes[2].astype(np.float64)

    c = s * v
    x = c * (1 - np.abs(np.fmod(h / ColorConstants.HUE_SECTOR_DEGREES, 2) - 1))
    m = v - c
    zero = np.zeros_like(c)

    bounds = [h < 60, h < 120, h < 180, h < 240, h < 300]
    r = np.select(bounds, [c, x, zero, zero, x], default=c)
    g = np.select(bounds, [x, c, c, x, zero], default=zero)
    b = np.select(bounds, [zero, zero, x, c, c], default=x)

    im.planes[0] = r + m
    im.planes[1] = g + m
    im.planes[2] = b + m


def shift_image(im: PixelBuffer, c: int, v: float) -> None:
    """Add v to every sample of channel c in place. Unknown channels are ignored."""
    if 0 <= c < im.c:
        im.planes[c] += DTYPE(v)
    else:
        logger.debug(f"shift_image: channel {c} not in image with {im.c} channels")


def scale_image(im: PixelBuffer, c: int, v: float) -> None:
    """Multiply every sample of channel c by v in place. Unknown channels are ignored."""
    if 0 <= c < im.c:
        im.planes[c] *= DTYPE(v)
    else:
        logger.debug(f"scale_image: channel {c} not in image with {im.c} channels")


def clamp_image(im: PixelBuffer) -> None:
    """Force every sample into [0, 1] in place."""
    np.clip(im.planes, ImageConstants.SAMPLE_MIN, ImageConstants.SAMPLE_MAX, out=im.planes)


def feature_normalize(im: PixelBuffer) -> None:
    """
    Min-max normalize the whole buffer (all channels together) into [0, 1].

    A constant buffer has no range and is zeroed instead.
    """
    if im.size == 0:
        return

    data = im.data
    low = data.min()
    high = data.max()
    value_range = high - low

    if value_range == 0:
        data.fill(0)
    else:
        data -= low
        data /= value_range
