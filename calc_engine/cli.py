"""CLI for calc_engine — терминальный рендерер калькулятора.

Usage:
    calc-engine press 2 + 3 '*' 4 Enter          # Feed keys, print final buffer
    calc-engine press 8 / 0 Enter 5 --trace      # Print buffer after every key
    calc-engine eval "2+3*4"                     # Evaluate an expression text
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from calc_engine.core.domain.evaluation import EvaluationOutcome
from calc_engine.core.domain.symbols import OPERATOR_GLYPHS, Operator
from calc_engine.core.math.evaluator import evaluate_expression
from calc_engine.core.math.numerical_safeguards import format_result
from calc_engine.session.controller import CalculatorSession
from calc_engine.state_machine.buffer_machine import CalculatorConfig

app = typer.Typer(
    name="calc-engine",
    help="Interactive arithmetic calculator core",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# ASCII операторы → глифы буфера
_ASCII_OPERATORS = str.maketrans({
    "+": OPERATOR_GLYPHS[Operator.ADD],
    "-": OPERATOR_GLYPHS[Operator.SUBTRACT],
    "*": OPERATOR_GLYPHS[Operator.MULTIPLY],
    "/": OPERATOR_GLYPHS[Operator.DIVIDE],
})


def _to_buffer_text(expression: str) -> str:
    text = expression.replace(" ", "")
    # ведущий ASCII минус остаётся знаком операнда
    if text.startswith("-"):
        return "-" + text[1:].translate(_ASCII_OPERATORS)
    return text.translate(_ASCII_OPERATORS)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(..., help="Key names (e.g. 7, +, NumpadMultiply, Enter, Escape)"),
    initial: Optional[str] = typer.Option(None, "--initial", "-i", help="Initial display value"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Print the buffer after every key"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Feed keys into a calculator session and print the display."""
    _configure_logging(verbose)
    try:
        session = CalculatorSession(initial_display=initial)
    except ValidationError as e:
        err_console.print(
            f"Invalid initial display {initial!r}: {e.errors()[0]['msg']}",
            style="red",
            markup=False,
        )
        raise typer.Exit(1)
    if trace:
        session.add_renderer(lambda buffer: console.print(buffer, highlight=False))

    for key in keys:
        if session.press(key) is None:
            err_console.print(f"[yellow]Ignored unmapped key: {key!r}[/yellow]")

    if not trace:
        console.print(session.buffer, highlight=False)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(..., help="Expression, e.g. '2+3*4' or '2+3×4'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Evaluate an expression text and print the formatted result."""
    _configure_logging(verbose)
    config = CalculatorConfig()
    result = evaluate_expression(_to_buffer_text(expression))

    if result.outcome == EvaluationOutcome.DIVISION_BY_ZERO:
        err_console.print(f"[red]{config.divide_by_zero_message}[/red]")
        raise typer.Exit(1)
    if result.outcome == EvaluationOutcome.EVALUATION_FAILURE:
        err_console.print(f"[red]{config.error_message}[/red]")
        raise typer.Exit(1)

    console.print(format_result(result.value, config.max_fraction_digits), highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
