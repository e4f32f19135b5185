"""
Image format conversion utilities.

Bridges PixelBuffer with the formats used by decoders and encoders:
- NumPy arrays in interleaved (H, W, C) layout
- PIL Images (8-bit, normalized to [0, 1])
- OpenCV BGR arrays
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image

from imgkernel.core.buffer import DTYPE, PixelBuffer
from imgkernel.core.constants import ErrorMessages, ImageConstants
from imgkernel.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

_MODES_BY_CHANNELS = {1: "L", 3: "RGB", 4: "RGBA"}


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def from_array(array: np.ndarray) -> PixelBuffer:
        """
        Convert an interleaved NumPy array to a PixelBuffer.

        Args:
            array: (H, W) or (H, W, C) array. Integer arrays are scaled by
                their dtype maximum into [0, 1]; float arrays are copied as is.

        Returns:
            New PixelBuffer
        """
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, None]
        if array.ndim != 3:
            raise InvalidArgumentError(
                ErrorMessages.INVALID_SIZE.format(name="array shape", value=array.shape),
                argument="array",
            )

        if np.issubdtype(array.dtype, np.integer):
            samples = array.astype(DTYPE) / np.iinfo(array.dtype).max
        else:
            samples = array.astype(DTYPE)

        return PixelBuffer.from_planar(np.transpose(samples, (2, 0, 1)))

    @staticmethod
    def to_array(im: PixelBuffer) -> np.ndarray:
        """
        Convert a PixelBuffer to an interleaved (H, W, C) float32 array.
        """
        return np.ascontiguousarray(np.transpose(im.planes, (1, 2, 0)))

    @staticmethod
    def from_pil(image: Image.Image) -> PixelBuffer:
        """
        Convert PIL Image to PixelBuffer with samples in [0, 1].

        Modes other than L, RGB and RGBA are converted to RGB first.
        """
        if image.mode not in _MODES_BY_CHANNELS.values():
            image = image.convert("RGB")
        return ImageConverters.from_array(np.array(image, dtype=np.uint8))

    @staticmethod
    def to_pil(im: PixelBuffer) -> Image.Image:
        """
        Convert PixelBuffer to an 8-bit PIL Image.

        Samples are clamped into [0, 1] before quantization; the buffer itself
        is not modified.
        """
        mode = _MODES_BY_CHANNELS.get(im.c)
        if mode is None:
            raise InvalidArgumentError(
                ErrorMessages.CHANNEL_COUNT.format(
                    operation="to_pil", expected="1, 3 or 4", actual=im.c
                ),
                argument="im",
            )

        array = ImageConverters.to_array(im)
        array = np.clip(array, ImageConstants.SAMPLE_MIN, ImageConstants.SAMPLE_MAX)
        array = np.rint(array * ImageConstants.UINT8_MAX).astype(np.uint8)
        if im.c == 1:
            array = array[:, :, 0]
        return Image.fromarray(array)

    @staticmethod
    def from_bgr(image: np.ndarray) -> PixelBuffer:
        """
        Convert an OpenCV BGR (or grayscale) array to an RGB PixelBuffer.
        """
        if image.ndim == 3 and image.shape[2] == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        return ImageConverters.from_array(image)

    @staticmethod
    def to_bgr(im: PixelBuffer) -> np.ndarray:
        """
        Convert an RGB PixelBuffer to an OpenCV BGR float32 array.
        """
        array = ImageConverters.to_array(im)
        if im.c == ImageConstants.RGB_CHANNELS:
            return cv2.cvtColor(array, cv2.COLOR_RGB2BGR)
        return array

    @staticmethod
    def load_image(path: Union[str, Path]) -> PixelBuffer:
        """
        Decode an image file into a PixelBuffer.

        Args:
            path: Image file path

        Returns:
            PixelBuffer with samples in [0, 1]
        """
        try:
            with Image.open(path) as image:
                im = ImageConverters.from_pil(image)
        except Exception as e:
            logger.error(f"Failed to load image {path}: {e}")
            raise

        logger.info(f"Loaded {path}: {im.w}x{im.h}x{im.c}")
        return im

    @staticmethod
    def save_image(im: PixelBuffer, path: Union[str, Path], format: str = None) -> None:
        """
        Encode a PixelBuffer to an image file.

        Args:
            im: Image to save (1, 3 or 4 channels)
            path: Destination path
            format: Optional Pillow format name (inferred from the suffix otherwise)
        """
        try:
            ImageConverters.to_pil(im).save(path, format=format)
        except Exception as e:
            logger.error(f"Failed to save image {path}: {e}")
            raise

        logger.info(f"Saved {im.w}x{im.h}x{im.c} image to {path}")


# Module-level aliases
from_array = ImageConverters.from_array
to_array = ImageConverters.to_array
from_pil = ImageConverters.from_pil
to_pil = ImageConverters.to_pil
from_bgr = ImageConverters.from_bgr
to_bgr = ImageConverters.to_bgr
load_image = ImageConverters.load_image
save_image = ImageConverters.save_image
