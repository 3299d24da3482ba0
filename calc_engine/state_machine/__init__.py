"""Buffer State Machine — автомат буфера ввода калькулятора.

- Переходы NORMAL/ERROR по каноническим символам
- Equals делегируется в Expression Evaluator
"""

from .buffer_machine import (
    BufferStateMachine,
    BufferTransitionResult,
    CalculatorConfig,
)

__all__ = [
    "BufferStateMachine",
    "BufferTransitionResult",
    "CalculatorConfig",
]
