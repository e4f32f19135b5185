"""
Vision algorithms built on the imgkernel core.
"""

from .edge_detection import EdgeDetectionParams, EdgeDetector, colorize_sobel, sobel_image

__all__ = ["EdgeDetector", "EdgeDetectionParams", "sobel_image", "colorize_sobel"]
