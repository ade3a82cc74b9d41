"""Tests for the integer arithmetic utilities."""

import pytest

from calc_fixture.errors import CalcFixtureError, InvalidWidthError
from calc_fixture.utils import add_numbers, multiply_numbers, wrap_integer

INT_PAIRS = [
    (0, 0),
    (10, 20),
    (-5, 3),
    (7, -7),
    (-12, -30),
    (2**40, 2**40),
    (123456789, 987654321),
]


class TestAddNumbers:
    """Tests for add_numbers()."""

    def test_concrete_sum(self) -> None:
        """Test the sum used by the demo routine."""
        assert add_numbers(10, 20) == 30

    @pytest.mark.parametrize("a,b", INT_PAIRS)
    def test_matches_native_addition(self, a: int, b: int) -> None:
        """Test the result equals a + b."""
        assert add_numbers(a, b) == a + b

    def test_commutative(self) -> None:
        """Test argument order does not matter."""
        assert add_numbers(3, 5) == add_numbers(5, 3)

    def test_returns_int(self) -> None:
        """Test integer inputs give an integer result."""
        assert isinstance(add_numbers(1, 2), int)

    def test_no_overflow_without_width(self) -> None:
        """Test Python ints do not wrap by default."""
        assert add_numbers(2**31 - 1, 1) == 2**31

    def test_wraps_with_width(self) -> None:
        """Test a 32-bit width wraps like a C int."""
        assert add_numbers(2**31 - 1, 1, bits=32) == -(2**31)
        assert add_numbers(-(2**31), -1, bits=32) == 2**31 - 1

    @pytest.mark.parametrize("a,b", INT_PAIRS)
    def test_wrapped_sum_is_congruent(self, a: int, b: int) -> None:
        """Test the wrapped sum agrees with a + b modulo 2**32."""
        result = add_numbers(a, b, bits=32)
        assert -(2**31) <= result < 2**31
        assert (result - (a + b)) % 2**32 == 0


class TestMultiplyNumbers:
    """Tests for multiply_numbers()."""

    def test_concrete_product(self) -> None:
        """Test a simple product."""
        assert multiply_numbers(6, 7) == 42

    @pytest.mark.parametrize("a,b", INT_PAIRS)
    def test_matches_native_multiplication(self, a: int, b: int) -> None:
        """Test the result equals a * b."""
        assert multiply_numbers(a, b) == a * b

    def test_multiply_by_zero(self) -> None:
        """Test anything times zero is zero."""
        assert multiply_numbers(0, 99) == 0
        assert multiply_numbers(-99, 0) == 0

    def test_wraps_with_width(self) -> None:
        """Test the product wraps to the requested width."""
        assert multiply_numbers(2**31, 2, bits=32) == 0
        assert multiply_numbers(16, 16, bits=8) == 0
        assert multiply_numbers(65536, 32768, bits=32) == -(2**31)

    @pytest.mark.parametrize("a,b", INT_PAIRS)
    def test_wrapped_product_is_congruent(self, a: int, b: int) -> None:
        """Test the wrapped product agrees with a * b modulo 2**64."""
        result = multiply_numbers(a, b, bits=64)
        assert -(2**63) <= result < 2**63
        assert (result - a * b) % 2**64 == 0


class TestWrapInteger:
    """Tests for wrap_integer()."""

    @pytest.mark.parametrize(
        "value,bits,expected",
        [
            (127, 8, 127),
            (128, 8, -128),
            (255, 8, -1),
            (256, 8, 0),
            (-129, 8, 127),
            (2**31, 32, -(2**31)),
            (-1, 64, -1),
            (1, 1, -1),
            (0, 1, 0),
        ],
    )
    def test_wrap(self, value: int, bits: int, expected: int) -> None:
        """Test values land in the signed range of the width."""
        assert wrap_integer(value, bits) == expected

    def test_in_range_value_unchanged(self) -> None:
        """Test values already in range pass through."""
        for value in (-(2**15), -1, 0, 1, 2**15 - 1):
            assert wrap_integer(value, 16) == value

    @pytest.mark.parametrize("bits", [0, -1, -32])
    def test_invalid_width(self, bits: int) -> None:
        """Test non-positive widths are rejected."""
        with pytest.raises(InvalidWidthError, match="positive number of bits"):
            wrap_integer(5, bits)

    def test_invalid_width_is_value_error(self) -> None:
        """Test the width error fits both hierarchies."""
        with pytest.raises(ValueError):
            add_numbers(1, 2, bits=0)
        with pytest.raises(CalcFixtureError):
            multiply_numbers(1, 2, bits=-8)
