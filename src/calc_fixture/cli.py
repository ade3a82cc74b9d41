"""CLI interface for the calculator fixture."""

from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from calc_fixture import __version__
from calc_fixture.calculator import Calculator
from calc_fixture.config import DEFAULT_CONFIG_FILE, FixtureConfig
from calc_fixture.demo import run_demo
from calc_fixture.errors import CalcFixtureError, UnknownOperationError
from calc_fixture.formatter import format_result
from calc_fixture.utils import add_numbers, multiply_numbers

console = Console()

CALCULATOR_OPERATIONS = ("add", "subtract")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(error: CalcFixtureError) -> NoReturn:
    console.print(f"[red]✗[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    sys.exit(1)


def _json_number(value: float) -> float | str:
    """Keep finite floats; spell NaN and infinities as strings."""
    return value if math.isfinite(value) else str(value)


def _load_config(path: str | None) -> FixtureConfig:
    return FixtureConfig.load(Path(path) if path else Path(DEFAULT_CONFIG_FILE))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Calculator fixture for language-tooling servers.

    Exercises the arithmetic utilities and the Calculator class.
    """
    _configure_logging(verbose)


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help=f"Path to config file ({DEFAULT_CONFIG_FILE})",
)
def demo(config: str | None) -> None:
    """Run the demonstration routine."""
    try:
        cfg = _load_config(config)
    except CalcFixtureError as e:
        _fail(e)

    run_demo(cfg, console)


@main.command(name="add")
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.option("--bits", type=int, default=None, help="Wrap the result to a signed width")
def add_command(a: int, b: int, bits: int | None) -> None:
    """Add two integers."""
    try:
        result = add_numbers(a, b, bits=bits)
    except CalcFixtureError as e:
        _fail(e)

    click.echo(format_result("add", a, b, result))


@main.command(name="multiply")
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.option("--bits", type=int, default=None, help="Wrap the result to a signed width")
def multiply_command(a: int, b: int, bits: int | None) -> None:
    """Multiply two integers."""
    try:
        result = multiply_numbers(a, b, bits=bits)
    except CalcFixtureError as e:
        _fail(e)

    click.echo(format_result("multiply", a, b, result))


def run_steps(steps: list[tuple[str, float, float]]) -> tuple[Calculator, list[dict]]:
    """Run a sequence of operations on a single Calculator.

    Args:
        steps: (operation, a, b) triples

    Returns:
        The calculator and one record per step

    Raises:
        UnknownOperationError: If an operation is not add or subtract
    """
    calc = Calculator()
    records: list[dict] = []

    for operation, a, b in steps:
        name = operation.lower()
        if name not in CALCULATOR_OPERATIONS:
            raise UnknownOperationError(operation)

        result = getattr(calc, name)(a, b)
        records.append({"operation": name, "a": a, "b": b, "result": result})

    return calc, records


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calc(tokens: tuple[str, ...], as_json: bool) -> None:
    """Run OP A B [OP A B ...] on one Calculator.

    OP is add or subtract. Each step overwrites the last result.
    """
    if len(tokens) % 3 != 0:
        raise click.UsageError("Expected groups of OP A B")

    steps: list[tuple[str, float, float]] = []
    for i in range(0, len(tokens), 3):
        operation, a, b = tokens[i : i + 3]
        try:
            steps.append((operation, float(a), float(b)))
        except ValueError:
            raise click.BadParameter(f"not a number in step {i // 3 + 1}: {a} {b}") from None

    try:
        calculator, records = run_steps(steps)
    except CalcFixtureError as e:
        _fail(e)

    if as_json:
        steps_json = [
            {
                "operation": record["operation"],
                "a": _json_number(record["a"]),
                "b": _json_number(record["b"]),
                "result": _json_number(record["result"]),
            }
            for record in records
        ]
        click.echo(
            json.dumps(
                {
                    "steps": steps_json,
                    "last_result": _json_number(calculator.get_last_result()),
                },
                indent=2,
                allow_nan=False,
            )
        )
        return

    table = Table(title="Calculator")
    table.add_column("Step", style="dim")
    table.add_column("Expression", style="cyan")

    for index, record in enumerate(records, start=1):
        table.add_row(
            str(index),
            format_result(record["operation"], record["a"], record["b"], record["result"]),
        )

    console.print(table)
    console.print(f"Last result: {calculator.get_last_result()}")


@main.command()
@click.argument("output", type=click.Path(), default=DEFAULT_CONFIG_FILE)
def init(output: str) -> None:
    """Initialize a new configuration file."""
    output_path = Path(output)

    if output_path.exists():
        if not click.confirm(f"{output} already exists. Overwrite?"):
            return

    FixtureConfig().save(output_path)
    console.print(f"[green]Created:[/green] {output}")


@main.command()
def version() -> None:
    """Show version information."""
    console.print(f"calc-fixture v{__version__}")


if __name__ == "__main__":
    main()
