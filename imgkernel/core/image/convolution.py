"""
2D convolution with clamp-to-edge padding.

The kernel is applied as a correlation (no flip), centred at (kw // 2, kh // 2).
"""

import logging

import numpy as np

from imgkernel.core.buffer import PixelBuffer
from imgkernel.core.constants import ErrorMessages
from imgkernel.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _pad_edges(planes: np.ndarray, kw: int, kh: int) -> np.ndarray:
    """Pad (c, h, w) planes so every kernel tap has a clamp-to-edge sample."""
    left, top = kw // 2, kh // 2
    return np.pad(
        planes,
        ((0, 0), (top, kh - 1 - top), (left, kw - 1 - left)),
        mode="edge",
    )


def _correlate(padded: np.ndarray, taps: np.ndarray, w: int, h: int) -> np.ndarray:
    """
    Weighted sum of shifted windows.

    Args:
        padded: (c, h + kh - 1, w + kw - 1) edge-padded planes
        taps: (c or 1, kh, kw) kernel planes, broadcast over image channels
        w: Output width
        h: Output height

    Returns:
        (c, h, w) float32 response
    """
    kh, kw = taps.shape[1:]
    out = np.zeros((padded.shape[0], h, w), dtype=np.float32)
    for i in range(kw):
        for j in range(kh):
            out += taps[:, j, i, None, None] * padded[:, j : j + h, i : i + w]
    return out


def get_conv(im: PixelBuffer, col: int, row: int, chn: int, f: PixelBuffer, f_chn: int) -> float:
    """Kernel channel f_chn applied at a single pixel of image channel chn."""
    value = 0.0
    for i in range(f.w):
        for j in range(f.h):
            value += f.get(i, j, f_chn) * im.get(col - f.w // 2 + i, row - f.h // 2 + j, chn)
    return value


def convolve_image(im: PixelBuffer, kernel: PixelBuffer, preserve: bool) -> PixelBuffer:
    """
    Convolve an image with a kernel.

    A single-channel kernel is applied to every image channel; a kernel with
    as many channels as the image pairs channel k with channel k.

    Args:
        im: Source image
        kernel: Kernel with 1 or im.c channels
        preserve: Keep one output channel per image channel. When False the
            per-channel responses are summed into a single channel.

    Returns:
        New image of shape (im.w, im.h, im.c if preserve else 1)
    """
    if kernel.c != 1 and kernel.c != im.c:
        raise InvalidArgumentError(
            ErrorMessages.KERNEL_CHANNELS.format(kernel=kernel.c, image=im.c), argument="kernel"
        )

    out_channels = im.c if preserve else 1
    result = PixelBuffer(im.w, im.h, out_channels)
    if im.size == 0 or kernel.size == 0:
        return result

    logger.debug(
        f"convolve_image: {im.w}x{im.h}x{im.c} with {kernel.w}x{kernel.h}x{kernel.c} "
        f"kernel, preserve={preserve}"
    )

    padded = _pad_edges(im.planes, kernel.w, kernel.h)
    response = _correlate(padded, kernel.planes, im.w, im.h)

    if preserve:
        result.planes[...] = response
    else:
        result.planes[0] = response.sum(axis=0)
    return result
