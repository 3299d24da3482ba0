"""
Core math modules для calc_engine

Численные примитивы и вычислитель выражений.
"""

# Numerical Safeguards
from calc_engine.core.math.numerical_safeguards import (
    # Constants
    MAX_FRACTION_DIGITS,
    PERCENT_FACTOR,
    # Operand parsing
    is_numeral,
    parse_operand,
    # NaN/Inf checks
    is_integral,
    is_valid_float,
    is_zero,
    # Formatting
    format_result,
    number_to_text,
    percent_of,
    round_fraction,
)

# Expression Evaluator
from calc_engine.core.math.evaluator import (
    DivisionByZeroError,
    EvaluationError,
    MalformedExpressionError,
    NonFiniteResultError,
    compute,
    evaluate_expression,
    fold_additive,
    reduce_multiplicative,
    tokenize,
)

__all__ = [
    # Numerical Safeguards
    "MAX_FRACTION_DIGITS",
    "PERCENT_FACTOR",
    "is_numeral",
    "parse_operand",
    "is_integral",
    "is_valid_float",
    "is_zero",
    "format_result",
    "number_to_text",
    "percent_of",
    "round_fraction",
    # Expression Evaluator
    "EvaluationError",
    "DivisionByZeroError",
    "MalformedExpressionError",
    "NonFiniteResultError",
    "tokenize",
    "reduce_multiplicative",
    "fold_additive",
    "compute",
    "evaluate_expression",
]
