"""
EvaluationResult — Результат вычисления выражения

Number(value) | DivisionByZero | EvaluationFailure
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EvaluationOutcome(str, Enum):
    """Классификация результата вычисления."""

    NUMBER = "NUMBER"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    EVALUATION_FAILURE = "EVALUATION_FAILURE"


@dataclass(frozen=True)
class EvaluationResult:
    """Результат Expression Evaluator."""

    outcome: EvaluationOutcome
    value: Optional[float] = None

    # Диагностика
    details: str = ""

    @classmethod
    def number(cls, value: float) -> "EvaluationResult":
        return cls(outcome=EvaluationOutcome.NUMBER, value=value)

    @classmethod
    def division_by_zero(cls, details: str = "") -> "EvaluationResult":
        return cls(outcome=EvaluationOutcome.DIVISION_BY_ZERO, details=details)

    @classmethod
    def failure(cls, details: str = "") -> "EvaluationResult":
        return cls(outcome=EvaluationOutcome.EVALUATION_FAILURE, details=details)

    @property
    def is_number(self) -> bool:
        return self.outcome == EvaluationOutcome.NUMBER
