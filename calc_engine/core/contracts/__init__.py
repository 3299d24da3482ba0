"""
Contract Validation Module

Модуль для валидации JSON контрактов calc_engine.
"""

from .validators import (
    CALCULATOR_STATE,
    CANONICAL_SYMBOL,
    SCHEMA_PACKAGE,
    available_schemas,
    contract_errors,
    get_validator,
    load_schema,
    validate_calculator_state,
    validate_canonical_symbol,
)

__all__ = [
    # Schema resources
    "SCHEMA_PACKAGE",
    "CANONICAL_SYMBOL",
    "CALCULATOR_STATE",
    "available_schemas",
    "load_schema",
    "get_validator",
    # Validation
    "validate_canonical_symbol",
    "validate_calculator_state",
    "contract_errors",
]
