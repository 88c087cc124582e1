"""Unit tests for size override attribute parsing"""

import math

import pytest

from twimg.common.errors import ErrorKind, ResponsiveImageError
from twimg.common.types import PixelCount, ViewportFraction
from twimg.responsive.overrides import decimal_parse, sizeOverride_classify, sizeOverrides_parse


class TestDecimalParse:
    """Test invariant-culture decimal parsing"""

    @pytest.mark.parametrize(
        "raw, expected",
        [("0.5", 0.5), ("300", 300.0), (" 0.25 ", 0.25), (".5", 0.5), ("3e2", 300.0), ("+2", 2.0), ("1,000", 1000.0), ("1,024.5", 1024.5)],
    )
    def test_valid(self, raw, expected):
        """Test accepted decimal forms"""
        assert decimal_parse(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", ",5", "1_000", "inf", "50%", "1.2.3", "0.5,0"])
    def test_invalid(self, raw):
        """Test rejected forms return None"""
        assert decimal_parse(raw) is None

    def test_infinity_and_nan_symbols(self):
        """Test invariant infinity and NaN symbols parse as non-finite numbers"""
        assert decimal_parse("Infinity") == math.inf
        assert decimal_parse("-infinity") == -math.inf
        assert math.isnan(decimal_parse("NaN"))


class TestSizeOverrideClassify:
    """Test pixel / fraction classification"""

    def test_fraction(self):
        """Test values below 1 are viewport fractions"""
        assert sizeOverride_classify(0.5) == ViewportFraction(0.5)

    def test_whole_number_is_pixels(self):
        """Test whole numbers other than 1 are pixel counts"""
        assert sizeOverride_classify(300.0) == PixelCount(300)
        assert sizeOverride_classify(2.0) == PixelCount(2)

    def test_one_is_fraction(self):
        """Test exactly 1 means the full viewport, not one pixel"""
        assert sizeOverride_classify(1.0) == ViewportFraction(1.0)

    def test_out_of_range(self):
        """Test non-integers above 1 and non-positive values are rejected"""
        assert sizeOverride_classify(1.5) is None
        assert sizeOverride_classify(0.0) is None
        assert sizeOverride_classify(-3.0) is None

    def test_non_finite_out_of_range(self):
        """Test infinity and NaN are out of range rather than fractions"""
        assert sizeOverride_classify(math.inf) is None
        assert sizeOverride_classify(math.nan) is None


class TestSizeOverridesParse:
    """Test parsing attribute pairs into an override mapping"""

    def test_mixed_overrides(self):
        """Test fractions and pixel counts keyed by breakpoint"""
        result = sizeOverrides_parse([("size-md", "0.5"), ("size-sm", "300")])
        assert result.isOk()
        assert result.value == {"md": ViewportFraction(0.5), "sm": PixelCount(300)}

    def test_one_stays_fraction(self):
        """Test size-lg="1" becomes a full-viewport fraction"""
        result = sizeOverrides_parse([("size-lg", "1")])
        assert result.value == {"lg": ViewportFraction(1.0)}

    def test_last_occurrence_wins(self):
        """Test repeated breakpoint keeps the later value"""
        result = sizeOverrides_parse([("size-md", "0.5"), ("size-md", "400")])
        assert result.value == {"md": PixelCount(400)}

    def test_group_separator_pixels(self):
        """Test "1,000" is read with an invariant thousands separator"""
        result = sizeOverrides_parse([("size-md", "1,000")])
        assert result.value == {"md": PixelCount(1000)}

    def test_infinity_out_of_range(self):
        """Test "Infinity" parses but is rejected as out of range"""
        result = sizeOverrides_parse([("size-md", "Infinity")])
        assert result.error.kind is ErrorKind.OUT_OF_RANGE_VALUE

    def test_hyphenated_breakpoint_name(self):
        """Test everything after the prefix is the breakpoint name"""
        result = sizeOverrides_parse([("size-screen-md", "0.5")])
        assert result.value == {"screen-md": ViewportFraction(0.5)}

    def test_empty_input(self):
        """Test no attributes gives an empty mapping"""
        assert sizeOverrides_parse([]).value == {}

    def test_malformed_name(self):
        """Test names without the prefix are rejected"""
        result = sizeOverrides_parse([("md", "0.5")])
        assert not result.isOk()
        assert result.error.kind is ErrorKind.MALFORMED_ATTRIBUTE_NAME
        assert result.error.attribute_name == "md"

    def test_non_numeric(self):
        """Test non-decimal values are rejected"""
        result = sizeOverrides_parse([("size-md", "half")])
        assert result.error.kind is ErrorKind.NON_NUMERIC_VALUE
        assert result.error.attribute_value == "half"

    def test_out_of_range(self):
        """Test 1.5 is neither a fraction nor a whole number"""
        result = sizeOverrides_parse([("size-lg", "1.5")])
        assert result.error.kind is ErrorKind.OUT_OF_RANGE_VALUE
        assert "between 0 and 1" in result.error.message

    def test_first_error_aborts(self):
        """Test parsing stops at the first invalid attribute"""
        result = sizeOverrides_parse([("size-sm", "0.5"), ("size-md", "x"), ("size-lg", "1.5")])
        assert result.value is None
        assert result.error.attribute_name == "size-md"

    def test_unwrap_raises(self):
        """Test unwrapping a failure raises ResponsiveImageError"""
        result = sizeOverrides_parse([("size-lg", "1.5")])
        with pytest.raises(ResponsiveImageError) as excinfo:
            result.value_unwrap()
        assert excinfo.value.error.kind is ErrorKind.OUT_OF_RANGE_VALUE
