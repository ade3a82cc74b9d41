"""Structural interface for calculator implementations."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CalculatorProtocol(Protocol):
    """Protocol defining the calculator interface."""

    def add(self, a: float, b: float) -> float:
        """Add two numbers and return the result."""
        ...

    def subtract(self, a: float, b: float) -> float:
        """Subtract b from a and return the result."""
        ...

    def get_last_result(self) -> float:
        """Return the result of the most recent operation."""
        ...
