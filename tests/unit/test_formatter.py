"""Tests for formatter module."""

import math

from calc_fixture.formatter import format_number, format_result


class TestFormatResult:
    """Test suite for format_result() function."""

    def test_format_add(self) -> None:
        """Test formatting addition operations."""
        assert format_result("add", 2, 3, 5) == "2 + 3 = 5"

    def test_format_subtract(self) -> None:
        """Test formatting subtraction operations."""
        assert format_result("subtract", 10, 4, 6) == "10 - 4 = 6"

    def test_format_multiply(self) -> None:
        """Test formatting multiplication operations."""
        assert format_result("multiply", 3, 7, 21) == "3 × 7 = 21"

    def test_format_with_floats(self) -> None:
        """Test fractional floats keep their decimals."""
        assert format_result("add", 2.5, 3.7, 6.2) == "2.5 + 3.7 = 6.2"

    def test_integral_floats_drop_decimal_point(self) -> None:
        """Test that floats like 4.0 are displayed as 4."""
        assert format_result("add", 2.5, 1.5, 4.0) == "2.5 + 1.5 = 4"

    def test_format_negative_operand(self) -> None:
        """Test formatting with negative numbers."""
        assert format_result("subtract", 5, -3, 8) == "5 - -3 = 8"

    def test_case_insensitive(self) -> None:
        """Test that operation names are case-insensitive."""
        assert format_result("ADD", 2, 3, 5) == format_result("add", 2, 3, 5)

    def test_unknown_operation_used_verbatim(self) -> None:
        """Test unknown operations appear as their own symbol."""
        assert format_result("custom_op", 5, 3, 8) == "5 custom_op 3 = 8"


class TestFormatNumber:
    """Tests for format_number()."""

    def test_int(self) -> None:
        assert format_number(42) == "42"

    def test_special_floats(self) -> None:
        """Test NaN and infinity render as Python spells them."""
        assert format_number(math.inf) == "inf"
        assert format_number(math.nan) == "nan"
