"""Exceptions raised by the fixture's demo and command-line layer."""

from __future__ import annotations


class CalcFixtureError(Exception):
    """Base class for all calc-fixture errors."""

    pass


class InvalidWidthError(CalcFixtureError, ValueError):
    """Error raised when an integer width is not a positive bit count."""

    def __init__(self, bits: int):
        self.bits = bits
        super().__init__(f"Integer width must be a positive number of bits, got {bits}")


class UnknownOperationError(CalcFixtureError, ValueError):
    """Error raised when a calculator operation name is not recognized."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unknown operation: {operation}")


class ConfigError(CalcFixtureError):
    """Error raised when a configuration file cannot be loaded."""

    pass
