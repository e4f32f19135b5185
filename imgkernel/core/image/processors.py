"""
Image resampling operations.

Handles geometric resizing via inverse coordinate mapping:
- Nearest-neighbor
- Bilinear

A target pixel (X2, Y2) maps back into the source as

    X1 = a * X2 + b,   a = w1 / w2,   b = 0.5 * a - 0.5

which aligns pixel centres rather than pixel corners.
"""

import logging
import math
from typing import Optional, Tuple, Union

import numpy as np

from imgkernel.core.buffer import PixelBuffer
from imgkernel.core.constants import ErrorMessages
from imgkernel.core.enums import InterpolationMethod
from imgkernel.core.exceptions import InvalidArgumentError
from imgkernel.core.utils.enum_converter import parse_enum

logger = logging.getLogger(__name__)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to nearest integer, ties away from zero (C roundf semantics)."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def _source_coordinates(src_dim: int, dst_dim: int) -> np.ndarray:
    scale = src_dim / dst_dim
    offset = 0.5 * scale - 0.5
    return np.arange(dst_dim, dtype=np.float64) * scale + offset


def _require_target(w: int, h: int) -> None:
    if w <= 0 or h <= 0:
        raise InvalidArgumentError(
            ErrorMessages.INVALID_SIZE.format(name="target size", value=f"{w}x{h}"),
            argument="size",
        )


def _require_source(im: PixelBuffer) -> None:
    if im.size == 0:
        raise InvalidArgumentError(
            ErrorMessages.INVALID_SIZE.format(name="source size", value=f"{im.w}x{im.h}x{im.c}"),
            argument="im",
        )


def nn_interpolate(im: PixelBuffer, x: float, y: float, c: int) -> float:
    """Sample the pixel nearest to (x, y), clamped to the image."""
    return im.get(
        int(round_half_away(np.float64(x))), int(round_half_away(np.float64(y))), c
    )


def bilinear_interpolate(im: PixelBuffer, x: float, y: float, c: int) -> float:
    """
    Blend the four pixels around (x, y).

        (x1,y1)-----*-----(x2,y1)
           |        |        |
           q1-----(x,y)------q2
           |        |        |
        (x1,y2)-----*-----(x2,y2)
    """
    x1, x2 = math.floor(x), math.ceil(x)
    y1, y2 = math.floor(y), math.ceil(y)
    fx = x - x1
    fy = y - y1

    q1 = im.get(x1, y1, c) * (1 - fy) + im.get(x1, y2, c) * fy
    q2 = im.get(x2, y1, c) * (1 - fy) + im.get(x2, y2, c) * fy
    return q1 * (1 - fx) + q2 * fx


def nn_resize(im: PixelBuffer, w: int, h: int) -> PixelBuffer:
    """
    Resize with nearest-neighbor sampling.

    Args:
        im: Source image
        w: Target width
        h: Target height

    Returns:
        New w x h image with im.c channels
    """
    _require_target(w, h)
    _require_source(im)
    result = PixelBuffer(w, h, im.c)

    xs = np.clip(round_half_away(_source_coordinates(im.w, w)).astype(np.intp), 0, im.w - 1)
    ys = np.clip(round_half_away(_source_coordinates(im.h, h)).astype(np.intp), 0, im.h - 1)

    result.planes[...] = im.planes[:, ys[:, None], xs[None, :]]
    logger.debug(f"nn_resize: {im.w}x{im.h} -> {w}x{h}")
    return result


def bilinear_resize(im: PixelBuffer, w: int, h: int) -> PixelBuffer:
    """
    Resize with bilinear interpolation.

    Args:
        im: Source image
        w: Target width
        h: Target height

    Returns:
        New w x h image with im.c channels
    """
    _require_target(w, h)
    _require_source(im)
    result = PixelBuffer(w, h, im.c)

    x = _source_coordinates(im.w, w)
    y = _source_coordinates(im.h, h)

    x1, x2 = np.floor(x), np.ceil(x)
    y1, y2 = np.floor(y), np.ceil(y)
    fx = (x - x1)[None, None, :]
    fy = (y - y1)[None, :, None]

    def clamp(coords: np.ndarray, dim: int) -> np.ndarray:
        return np.clip(coords.astype(np.intp), 0, dim - 1)

    cx1, cx2 = clamp(x1, im.w)[None, :], clamp(x2, im.w)[None, :]
    cy1, cy2 = clamp(y1, im.h)[:, None], clamp(y2, im.h)[:, None]

    planes = im.planes.astype(np.float64)
    q1 = planes[:, cy1, cx1] * (1 - fy) + planes[:, cy2, cx1] * fy
    q2 = planes[:, cy1, cx2] * (1 - fy) + planes[:, cy2, cx2] * fy

    result.planes[...] = q1 * (1 - fx) + q2 * fx
    logger.debug(f"bilinear_resize: {im.w}x{im.h} -> {w}x{h}")
    return result


def _target_size(
    im: PixelBuffer, width: Optional[int], height: Optional[int]
) -> Tuple[int, int]:
    if width and not height:
        # Scale by width, maintain aspect
        height = max(1, int(im.h * width / im.w))
    elif height and not width:
        # Scale by height, maintain aspect
        width = max(1, int(im.w * height / im.h))
    elif not width and not height:
        return im.w, im.h
    return width, height


def resize_image(
    im: PixelBuffer,
    width: Optional[int] = None,
    height: Optional[int] = None,
    method: Union[InterpolationMethod, str] = InterpolationMethod.BILINEAR,
) -> PixelBuffer:
    """
    Resize image with various options.

    Args:
        im: Source image
        width: Target width (if height not specified, maintains aspect)
        height: Target height (if width not specified, maintains aspect)
        method: Interpolation method or its name; unknown names fall back to bilinear

    Returns:
        New resized image (a copy when no size is given)
    """
    method = parse_enum(method, InterpolationMethod, InterpolationMethod.BILINEAR, normalize=True)

    _require_source(im)

    width, height = _target_size(im, width, height)
    if method == InterpolationMethod.NEAREST:
        return nn_resize(im, width, height)
    return bilinear_resize(im, width, height)
