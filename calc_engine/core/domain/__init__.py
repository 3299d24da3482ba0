"""
Domain models and value objects.

Contains the calculator entities: CanonicalSymbol, CalculatorState, EvaluationResult.
"""

from calc_engine.core.domain.calculator_state import (
    DECIMAL_OPERAND_START,
    INITIAL_BUFFER,
    CalcMode,
    CalculatorState,
)
from calc_engine.core.domain.evaluation import EvaluationOutcome, EvaluationResult
from calc_engine.core.domain.symbols import (
    DECIMAL_POINT,
    GLYPH_OPERATORS,
    OPERATOR_GLYPHS,
    CanonicalSymbol,
    Operator,
    SymbolKind,
    is_operator_glyph,
)

__all__ = [
    # Symbols
    "Operator",
    "SymbolKind",
    "CanonicalSymbol",
    "OPERATOR_GLYPHS",
    "GLYPH_OPERATORS",
    "DECIMAL_POINT",
    "is_operator_glyph",
    # State
    "CalcMode",
    "CalculatorState",
    "INITIAL_BUFFER",
    "DECIMAL_OPERAND_START",
    # Evaluation
    "EvaluationOutcome",
    "EvaluationResult",
]
