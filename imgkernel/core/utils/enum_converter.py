"""
Enum conversion utilities.

Option names arrive as enum members or as loosely formatted strings
("Nearest", " bilinear "). These helpers resolve them, falling back to a
default with a warning, and flatten enums back to plain values for logging.
"""

import logging
from enum import Enum
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def parse_enum(value: Any, enum_class: Type[E], default: E, normalize: bool = False) -> E:
    """
    Resolve value to a member of enum_class.

    Args:
        value: Member, member value, or None
        enum_class: Target enum
        default: Returned for None or unrecognized values
        normalize: Strip and lowercase strings before lookup

    Returns:
        Matching member or default

    Example:
        >>> parse_enum("Nearest", InterpolationMethod, InterpolationMethod.BILINEAR, normalize=True)
        <InterpolationMethod.NEAREST: 'nearest'>
    """
    if isinstance(value, enum_class):
        return value
    if value is None:
        return default

    lookup = value
    if normalize and isinstance(lookup, str):
        lookup = lookup.strip().lower()

    try:
        return enum_class(lookup)
    except ValueError:
        logger.warning(
            f"Unknown {enum_class.__name__} value {value!r}, using {default.value!r}"
        )
        return default


def enum_to_string(value: Any) -> Any:
    """Plain value of an enum member; anything else passes through."""
    return value.value if isinstance(value, Enum) else value


def convert_enums_to_strings(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of data with enum members replaced by their values.

    Nested dictionaries (e.g. a dumped settings model) are converted too.

    Example:
        >>> convert_enums_to_strings({"filter_type": FilterType.BOX, "size": 3})
        {'filter_type': 'box', 'size': 3}
    """
    return {
        key: convert_enums_to_strings(value) if isinstance(value, dict) else enum_to_string(value)
        for key, value in data.items()
    }
