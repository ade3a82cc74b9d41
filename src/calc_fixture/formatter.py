"""Formatting of calculation results for console output."""

from __future__ import annotations

OPERATION_SYMBOLS: dict[str, str] = {
    "add": "+",
    "subtract": "-",
    "multiply": "×",
}


def format_number(n: int | float) -> str:
    """Render a number, dropping the decimal point from integral floats."""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def format_result(operation: str, a: int | float, b: int | float, result: int | float) -> str:
    """Format a calculation result as a human-readable string.

    Args:
        operation: The operation performed ('add', 'subtract' or 'multiply')
        a: First operand
        b: Second operand
        result: The calculation result

    Returns:
        A string such as ``"2 + 3 = 5"``. Unknown operation names are
        used verbatim in place of a symbol.

    Examples:
        >>> format_result('add', 2, 3, 5)
        '2 + 3 = 5'
        >>> format_result('subtract', 2.5, 1.5, 1.0)
        '2.5 - 1.5 = 1'
    """
    symbol = OPERATION_SYMBOLS.get(operation.lower(), operation)
    return f"{format_number(a)} {symbol} {format_number(b)} = {format_number(result)}"
