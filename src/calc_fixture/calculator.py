"""Calculator accumulator tracking the most recent result."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Calculator:
    """A simple calculator that remembers its last result.

    The accumulator starts at 0.0 and is overwritten by every add() or
    subtract() call; operations never combine with the previous value.
    """

    def __init__(self) -> None:
        self._last_result = 0.0

    @property
    def last_result(self) -> float:
        """Get the result of the most recent operation."""
        return self._last_result

    def add(self, a: float, b: float) -> float:
        """Add two numbers and remember the sum.

        Args:
            a: First operand
            b: Second operand

        Returns:
            The sum of a and b

        Examples:
            >>> Calculator().add(2.5, 1.5)
            4.0
        """
        self._last_result = float(a + b)
        logger.debug("add(%r, %r) -> %r", a, b, self._last_result)
        return self._last_result

    def subtract(self, a: float, b: float) -> float:
        """Subtract b from a and remember the difference.

        Args:
            a: Number to subtract from
            b: Number to subtract

        Returns:
            The difference a - b
        """
        self._last_result = float(a - b)
        logger.debug("subtract(%r, %r) -> %r", a, b, self._last_result)
        return self._last_result

    def get_last_result(self) -> float:
        """Get the last result without changing it."""
        return self._last_result

    def __repr__(self) -> str:
        return f"Calculator(last_result={self._last_result!r})"
