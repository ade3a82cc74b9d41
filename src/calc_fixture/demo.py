"""Demonstration routine exercising the fixture's APIs.

Each step gives a language server something to look at: a string and a
list from the standard library, calls into the arithmetic utilities, and
a Calculator instance whose methods show up in completion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console

from calc_fixture.calculator import Calculator
from calc_fixture.config import FixtureConfig
from calc_fixture.formatter import format_result
from calc_fixture.utils import add_numbers, multiply_numbers

logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
    """Values computed by a demo run."""

    message: str
    message_length: int
    numbers: list[int] = field(default_factory=list)
    numbers_size: int = 0
    addition_result: int = 0
    product: int = 0
    calculator_results: list[float] = field(default_factory=list)
    completion: str = ""


def run_demo(config: FixtureConfig | None = None, console: Console | None = None) -> DemoReport:
    """Run the demonstration and print its results.

    Args:
        config: Configuration with the demo inputs (defaults if omitted)
        console: Console to print to (a new one if omitted)

    Returns:
        DemoReport with every value the demo computed
    """
    config = config or FixtureConfig()
    console = console or Console()
    settings = config.demo
    bits = config.arithmetic.integer_bits

    message = settings.message
    numbers = list(settings.numbers)

    console.print(message, markup=False)

    result = add_numbers(*settings.addends, bits=bits)
    console.print(f"Addition result: {result}")

    product = multiply_numbers(*settings.factors, bits=bits)
    console.print(f"Multiplication result: {product}")

    numbers.append(settings.append_value)
    size = len(numbers)
    logger.debug("numbers now %r (size %d)", numbers, size)

    if message:
        console.print(f"Message length: {len(message)}")

    calc = Calculator()
    a, b = settings.calculator_operands
    total = calc.add(a, b)
    console.print(format_result("add", a, b, total))
    difference = calc.subtract(a, b)
    console.print(format_result("subtract", a, b, difference))

    another_message = settings.completion_text
    completion = another_message[: settings.completion_length]
    logger.debug("completion substring %r", completion)

    return DemoReport(
        message=message,
        message_length=len(message),
        numbers=numbers,
        numbers_size=size,
        addition_result=result,
        product=product,
        calculator_results=[total, difference],
        completion=completion,
    )


def main() -> int:
    """Main entry point running the demo with default inputs."""
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
