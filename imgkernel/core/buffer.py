"""
Planar float pixel buffer.

A PixelBuffer owns a C-contiguous float32 array of shape (c, h, w). Flattened,
the sample at (x, y, k) lives at index ``x + w*y + w*h*k``.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from imgkernel.core.constants import ErrorMessages, ImageConstants
from imgkernel.core.enums import BoundsPolicy
from imgkernel.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DTYPE = np.float32


class PixelBuffer:
    """Dense planar float image with clamp-to-edge reads and bounds-checked writes."""

    def __init__(
        self,
        w: int,
        h: int,
        c: int,
        bounds_policy: Optional[BoundsPolicy] = None,
    ):
        """
        Initialize a zero-filled buffer.

        Args:
            w: Width in pixels
            h: Height in pixels
            c: Number of channels
            bounds_policy: Write-bounds policy for set(); defaults to the configured policy
        """
        if w < 0 or h < 0 or c < 0:
            raise InvalidArgumentError(ErrorMessages.NEGATIVE_DIMENSION.format(w=w, h=h, c=c))

        if bounds_policy is None:
            from imgkernel.config import get_settings

            bounds_policy = get_settings().processing.bounds_policy

        self.w = int(w)
        self.h = int(h)
        self.c = int(c)
        self.bounds_policy = BoundsPolicy(bounds_policy)
        self._planes = np.zeros((self.c, self.h, self.w), dtype=DTYPE)

    @classmethod
    def from_planar(
        cls, array: np.ndarray, bounds_policy: Optional[BoundsPolicy] = None
    ) -> "PixelBuffer":
        """
        Create a buffer from a (c, h, w) array. The data is copied.

        Args:
            array: Planar array of shape (c, h, w)
            bounds_policy: Optional write-bounds policy

        Returns:
            New PixelBuffer
        """
        array = np.asarray(array)
        if array.ndim != 3:
            raise InvalidArgumentError(
                ErrorMessages.INVALID_SIZE.format(name="planar array shape", value=array.shape),
                argument="array",
            )
        c, h, w = array.shape
        buffer = cls(w, h, c, bounds_policy=bounds_policy)
        buffer._planes[...] = array
        return buffer

    # ------------------------------------------------------------------
    # Shape helpers
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int, int]:
        """(w, h, c) triple."""
        return (self.w, self.h, self.c)

    @property
    def size(self) -> int:
        return self.w * self.h * self.c

    @property
    def planes(self) -> np.ndarray:
        """The backing (c, h, w) array."""
        return self._planes

    @property
    def data(self) -> np.ndarray:
        """Flat view of the backing array in planar order."""
        return self._planes.reshape(-1)

    def same_shape(self, other: "PixelBuffer") -> bool:
        return self.shape == other.shape

    def __repr__(self) -> str:
        return f"PixelBuffer(w={self.w}, h={self.h}, c={self.c})"

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def get(self, x: int, y: int, k: int) -> float:
        """
        Read a sample with clamp-to-edge padding.

        Coordinates outside the image are clamped to [0, dim-1], so any
        (x, y, k) is valid on a non-empty buffer.
        """
        if self.size == 0:
            raise InvalidArgumentError(
                ErrorMessages.EMPTY_IMAGE.format(w=self.w, h=self.h, c=self.c)
            )
        x = min(max(int(x), 0), self.w - 1)
        y = min(max(int(y), 0), self.h - 1)
        k = min(max(int(k), 0), self.c - 1)
        return float(self._planes[k, y, x])

    def set(self, x: int, y: int, k: int, v: float) -> None:
        """
        Write a sample. Writes outside the accepted range are silently ignored.

        STRICT accepts [0, dim) on every axis. LENIENT accepts [0, dim] and
        writes through the flat planar index, so x == w lands on the first
        pixel of the next row; writes whose flat index is past the end are
        dropped.
        """
        x, y, k = int(x), int(y), int(k)

        if self.bounds_policy == BoundsPolicy.STRICT:
            if 0 <= x < self.w and 0 <= y < self.h and 0 <= k < self.c:
                self._planes[k, y, x] = v
            return

        if x > self.w or x < 0 or y > self.h or y < 0 or k > self.c or k < 0:
            return
        index = x + self.w * y + self.w * self.h * k
        if index < self.size:
            self.data[index] = v

    def fill_from(self, values: Union[Sequence[float], np.ndarray], count: Optional[int] = None):
        """
        Bulk-load the first ``count`` samples of the buffer.

        Args:
            values: Source samples
            count: Number of samples to load; must equal w*h (defaults to len(values))
        """
        values = np.asarray(values, dtype=DTYPE).reshape(-1)
        if count is None:
            count = values.size

        if count != self.w * self.h:
            raise InvalidArgumentError(
                ErrorMessages.SIZE_MISMATCH.format(expected=self.w * self.h, actual=count),
                argument="count",
            )
        if count > values.size:
            raise InvalidArgumentError(
                ErrorMessages.VALUES_TOO_SHORT.format(count=count, available=values.size),
                argument="values",
            )

        self.data[:count] = values[:count]

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def copy(self) -> "PixelBuffer":
        """Return an independent copy with identical contents."""
        return PixelBuffer.from_planar(self._planes, bounds_policy=self.bounds_policy)

    def copy_region(self, width: int, height: int) -> "PixelBuffer":
        """
        Copy into a width x height buffer anchored at the origin.

        Smaller sizes crop; larger sizes pad by replicating the edge pixels.
        """
        region = PixelBuffer(width, height, self.c, bounds_policy=self.bounds_policy)
        if region.size == 0:
            return region
        if self.size == 0:
            raise InvalidArgumentError(
                ErrorMessages.EMPTY_IMAGE.format(w=self.w, h=self.h, c=self.c)
            )

        xs = np.clip(np.arange(width), 0, self.w - 1)
        ys = np.clip(np.arange(height), 0, self.h - 1)
        region.planes[...] = self._planes[:, ys[:, None], xs[None, :]]
        return region

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Log and return a one-line summary of shape and leading samples."""
        count = ImageConstants.INFO_SAMPLE_COUNT
        samples = ", ".join(f"{v:f}" for v in self.data[:count])
        if self.size >= count:
            message = (
                f"image size: {self.w}x{self.h}x{self.c}, first {count} pixels: {samples}"
            )
        else:
            message = f"image size: {self.w}x{self.h}x{self.c}, pixels: {samples}"
        logger.info(message)
        return message


def make_image(w: int, h: int, c: int, bounds_policy: Optional[BoundsPolicy] = None) -> PixelBuffer:
    """Create a zero-filled w x h x c buffer."""
    return PixelBuffer(w, h, c, bounds_policy=bounds_policy)


def make_ones_image(
    w: int, h: int, c: int, bounds_policy: Optional[BoundsPolicy] = None
) -> PixelBuffer:
    """Create a w x h x c buffer filled with ones."""
    im = PixelBuffer(w, h, c, bounds_policy=bounds_policy)
    im.planes.fill(1.0)
    return im


def image_info(im: PixelBuffer) -> str:
    """Log the shape and leading samples of an image."""
    return im.describe()
