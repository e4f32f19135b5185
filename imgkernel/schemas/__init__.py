"""
Schemas Package

Pydantic models for validating processing parameters. Detection parameter
models live next to their detectors (e.g. vision.edge_detection) and are
not re-exported here.
"""

# Re-export enums from centralized location for convenience
from imgkernel.core.enums import EdgeMethod, FilterType, InterpolationMethod

# Base schemas
from .base import BaseProcessingParams

# Processing models
from .processing import FilterParams, ResizeParams

__all__ = [
    "BaseProcessingParams",
    "FilterParams",
    "ResizeParams",
    "EdgeMethod",
    "FilterType",
    "InterpolationMethod",
]
