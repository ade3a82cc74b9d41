"""Calculator fixture for language-tooling servers.

A handful of free arithmetic functions and a small accumulator class that
give hover, completion and cross-reference features something to resolve.
"""

from calc_fixture.calculator import Calculator
from calc_fixture.utils import add_numbers, multiply_numbers

__version__ = "0.1.0"

__all__ = ["Calculator", "add_numbers", "multiply_numbers"]
