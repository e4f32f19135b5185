"""
Filtering and resampling parameter models.
"""

from typing import Optional

from pydantic import Field, model_validator

from imgkernel.core.enums import FilterType, InterpolationMethod

from .base import BaseProcessingParams


class FilterParams(BaseProcessingParams):
    """Parameters for applying a named kernel."""

    filter_type: FilterType = Field(default=FilterType.BOX, description="Kernel to apply")
    size: int = Field(default=3, ge=1, description="Box filter side length")
    sigma: float = Field(default=1.0, gt=0, description="Gaussian standard deviation")
    preserve: Optional[bool] = Field(
        default=None,
        description="Keep per-channel output (defaults to the kernel's policy)",
    )
    clamp: Optional[bool] = Field(
        default=None,
        description="Clamp output into [0, 1] (defaults to the kernel's policy)",
    )


class ResizeParams(BaseProcessingParams):
    """Parameters for resampling."""

    width: Optional[int] = Field(default=None, gt=0, description="Target width")
    height: Optional[int] = Field(default=None, gt=0, description="Target height")
    method: InterpolationMethod = Field(
        default=InterpolationMethod.BILINEAR, description="Interpolation method"
    )

    @model_validator(mode="after")
    def check_size(self) -> "ResizeParams":
        if self.width is None and self.height is None:
            raise ValueError("ResizeParams requires width, height or both")
        return self
