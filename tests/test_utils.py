"""Tests for utility functions."""

import pytest

from edl_chapter_converter.errors import ParseError
from edl_chapter_converter.utils import TimeParser


class TestTimeParser:
    """Test TimeParser utility class."""

    def test_to_milliseconds_valid(self):
        """Test converting valid decimal seconds."""
        test_cases = [
            ("12.345", 12345),
            ("0.1", 100),
            ("10", 10000),
            ("0", 0),
            ("0.000", 0),
            ("1380.120", 1380120),
            ("5.", 5000),
            (".5", 500),
            ("  7.25\n", 7250),
        ]

        for value, expected in test_cases:
            assert TimeParser.to_milliseconds(value) == expected

    def test_to_milliseconds_truncates(self):
        """Test that sub-millisecond digits are truncated, not rounded."""
        assert TimeParser.to_milliseconds("1.23456") == 1234
        assert TimeParser.to_milliseconds("0.0009") == 0
        assert TimeParser.to_milliseconds("2.9999") == 2999

    def test_to_milliseconds_exact_for_float_unfriendly_values(self):
        """Test values that binary floats cannot represent exactly."""
        # float("1.005") * 1000 == 1004.9999999999999
        assert TimeParser.to_milliseconds("1.005") == 1005
        assert TimeParser.to_milliseconds("4.35") == 4350
        assert TimeParser.to_milliseconds("1234567.891") == 1234567891

    def test_to_milliseconds_invalid(self):
        """Test invalid values raise ParseError."""
        invalid_values = [
            "",
            "   ",
            "abc",
            "N/A",
            "-1.5",
            "1,5",
            "1.2.3",
            "nan",
            "inf",
            "1e3",
            "0:00:05.151",
        ]

        for value in invalid_values:
            with pytest.raises(ParseError) as exc_info:
                TimeParser.to_milliseconds(value)
            assert "Invalid time value" in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        """Test ParseError can be handled as ValueError."""
        with pytest.raises(ValueError):
            TimeParser.to_milliseconds("bogus")

    def test_format_milliseconds(self):
        """Test formatting milliseconds for display."""
        test_cases = [
            (0, "0:00:00.000"),
            (5151, "0:00:05.151"),
            (330500, "0:05:30.500"),
            (5445500, "1:30:45.500"),
            (93600000, "26:00:00.000"),
        ]

        for ms, expected in test_cases:
            assert TimeParser.format_milliseconds(ms) == expected

    def test_to_milliseconds_long_values_truncate(self):
        """Test values with more digits than the default precision."""
        value = "1." + "9" * 40
        assert TimeParser.to_milliseconds(value) == 1999

        value = "12345678901234567890123456789.9999"
        assert TimeParser.to_milliseconds(value) == 12345678901234567890123456789999
