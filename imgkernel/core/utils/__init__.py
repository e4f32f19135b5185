"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers
- enum_converter: Enum parsing and conversion
"""

from .decorators import timer
from .enum_converter import convert_enums_to_strings, enum_to_string, parse_enum

__all__ = [
    "timer",
    "parse_enum",
    "enum_to_string",
    "convert_enums_to_strings",
]
