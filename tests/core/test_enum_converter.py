"""
Tests for enum parsing helpers
"""

import logging

from imgkernel.core.enums import BoundsPolicy, FilterType, InterpolationMethod
from imgkernel.core.utils.enum_converter import (
    convert_enums_to_strings,
    enum_to_string,
    parse_enum,
)


class TestParseEnum:
    def test_member_passthrough(self):
        value = parse_enum(FilterType.SOBEL_X, FilterType, FilterType.BOX)
        assert value is FilterType.SOBEL_X

    def test_none_gives_default(self):
        assert parse_enum(None, FilterType, FilterType.BOX) is FilterType.BOX

    def test_normalized_string(self):
        value = parse_enum(" Nearest ", InterpolationMethod, InterpolationMethod.BILINEAR, True)
        assert value is InterpolationMethod.NEAREST

    def test_case_sensitive_without_normalize(self):
        value = parse_enum("Nearest", InterpolationMethod, InterpolationMethod.BILINEAR)
        assert value is InterpolationMethod.BILINEAR

    def test_unknown_value_warns(self, caplog):
        caplog.set_level(logging.WARNING)
        value = parse_enum("bicubic", InterpolationMethod, InterpolationMethod.BILINEAR)
        assert value is InterpolationMethod.BILINEAR
        assert "Unknown InterpolationMethod value 'bicubic'" in caplog.text


class TestEnumToString:
    def test_member(self):
        assert enum_to_string(BoundsPolicy.LENIENT) == "lenient"

    def test_passthrough(self):
        assert enum_to_string(3) == 3

    def test_nested_dict(self):
        data = {"filter_type": FilterType.HIGHPASS, "processing": {"policy": BoundsPolicy.STRICT}}
        assert convert_enums_to_strings(data) == {
            "filter_type": "highpass",
            "processing": {"policy": "strict"},
        }
