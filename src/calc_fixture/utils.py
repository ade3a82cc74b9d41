"""Integer arithmetic utilities."""

from __future__ import annotations

from calc_fixture.errors import InvalidWidthError


def wrap_integer(value: int, bits: int) -> int:
    """Wrap an integer into the signed two's-complement range of a width.

    Args:
        value: Integer to wrap
        bits: Width in bits (32 reproduces a C ``int``)

    Returns:
        The value reduced into ``[-2**(bits-1), 2**(bits-1))``

    Raises:
        InvalidWidthError: If bits is not positive

    Examples:
        >>> wrap_integer(2**31, 32)
        -2147483648
        >>> wrap_integer(-1, 8)
        -1
    """
    if bits <= 0:
        raise InvalidWidthError(bits)

    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def add_numbers(a: int, b: int, *, bits: int | None = None) -> int:
    """Add two integers together.

    Args:
        a: First integer
        b: Second integer
        bits: Optional fixed width; the sum wraps around like a native
            signed integer of that many bits

    Returns:
        Sum of a and b

    Examples:
        >>> add_numbers(10, 20)
        30
    """
    result = a + b
    if bits is not None:
        result = wrap_integer(result, bits)
    return result


def multiply_numbers(a: int, b: int, *, bits: int | None = None) -> int:
    """Multiply two integers.

    Args:
        a: First integer
        b: Second integer
        bits: Optional fixed width, as for add_numbers()

    Returns:
        Product of a and b

    Examples:
        >>> multiply_numbers(6, 7)
        42
    """
    result = a * b
    if bits is not None:
        result = wrap_integer(result, bits)
    return result
