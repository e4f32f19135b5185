"""
Service layer for imgkernel.
"""

from .filter_service import FilterService

__all__ = ["FilterService"]
