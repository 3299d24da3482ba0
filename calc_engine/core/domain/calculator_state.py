"""
CalculatorState — Модель состояния калькулятора

Снапшот пары Buffer + ErrorFlag. Одна immutable модель вместо
глобальных переменных: автомат получает состояние на вход и
возвращает новое, владеет состоянием только CalculatorSession.

Совместима с JSON Schema (calc_engine/contracts/schema/calculator_state.json).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .symbols import DECIMAL_POINT, is_operator_glyph


# =============================================================================
# ENUMS
# =============================================================================


class CalcMode(str, Enum):
    """
    Состояние автомата буфера.

    NORMAL: буфер содержит выражение
    ERROR: буфер содержит сообщение об ошибке
    """

    NORMAL = "NORMAL"
    ERROR = "ERROR"


INITIAL_BUFFER = "0"

# DecimalPoint, начинающий новый операнд, вводит ведущий ноль
DECIMAL_OPERAND_START = "0" + DECIMAL_POINT


# =============================================================================
# STATE MODEL
# =============================================================================


class CalculatorState(BaseModel):
    """
    Состояние калькулятора.

    Инварианты:
    - buffer никогда не пуст (минимальное значение "0")
    - buffer никогда не начинается с глифа оператора
    """

    buffer: str = Field(INITIAL_BUFFER, min_length=1, description="Текст выражения")
    is_error: bool = Field(False, description="ErrorFlag: буфер содержит сообщение об ошибке")

    model_config = {"frozen": True}

    @field_validator("buffer")
    @classmethod
    def validate_buffer(cls, v: str) -> str:
        """Буфер не может начинаться с оператора."""
        if is_operator_glyph(v[0]):
            raise ValueError(f"buffer must not start with an operator: {v!r}")
        return v

    @classmethod
    def initial(cls) -> "CalculatorState":
        return cls(buffer=INITIAL_BUFFER, is_error=False)

    @property
    def mode(self) -> CalcMode:
        return CalcMode.ERROR if self.is_error else CalcMode.NORMAL

    @property
    def last_char(self) -> str:
        return self.buffer[-1]

    @property
    def ends_with_operator(self) -> bool:
        return is_operator_glyph(self.last_char)

    @property
    def last_segment(self) -> str:
        """
        Последний операнд: подстрока после последнего оператора
        (или весь буфер, если операторов нет).
        """
        for idx in range(len(self.buffer) - 1, -1, -1):
            if is_operator_glyph(self.buffer[idx]):
                return self.buffer[idx + 1:]
        return self.buffer

    @property
    def last_segment_has_decimal(self) -> bool:
        return DECIMAL_POINT in self.last_segment
