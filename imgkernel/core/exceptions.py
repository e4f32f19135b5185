"""
Exception hierarchy for the image kernel library.

Two families of failures are distinguished:
- InvalidArgumentError: the caller broke a contract (bad shapes, bad sizes)
- InternalInvariantError: the library reached a state it promises never to reach
"""

from typing import Optional


class ImageKernelError(Exception):
    """Base class for all errors raised by imgkernel."""


class InvalidArgumentError(ImageKernelError, ValueError):
    """Raised when an operation receives arguments that violate its contract."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class InternalInvariantError(ImageKernelError, RuntimeError):
    """Raised when an internal invariant is broken during processing."""


class HueOverflowError(InternalInvariantError):
    """Hue reached the HSV sector dispatch outside of [0, 360) degrees."""

    def __init__(self, hue_degrees: float):
        super().__init__(f"hue overflow: {hue_degrees} degrees is outside [0, 360)")
        self.hue_degrees = hue_degrees
