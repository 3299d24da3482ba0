"""
CanonicalSymbol — Модель канонического символа ввода

Нормализованный логический токен ввода (цифра, оператор и т.д.),
не зависящий от физического источника (кнопка, клавиатура, numpad).

Immutable Pydantic модель. Совместима с JSON Schema
(calc_engine/contracts/schema/canonical_symbol.json).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """
    Бинарный арифметический оператор.

    Типизированный тег переносится до границы рендеринга,
    в глиф превращается только при записи в буфер.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def glyph(self) -> str:
        """Глиф оператора для отображения в буфере."""
        return OPERATOR_GLYPHS[self]

    @property
    def is_multiplicative(self) -> bool:
        return self in (Operator.MULTIPLY, Operator.DIVIDE)

    @classmethod
    def from_glyph(cls, glyph: str) -> "Operator":
        """
        Обратное преобразование глифа в оператор.

        Raises:
            ValueError: Если символ не является глифом оператора
        """
        try:
            return GLYPH_OPERATORS[glyph]
        except KeyError:
            raise ValueError(f"Not an operator glyph: {glyph!r}") from None


OPERATOR_GLYPHS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}

GLYPH_OPERATORS: dict[str, Operator] = {g: op for op, g in OPERATOR_GLYPHS.items()}

DECIMAL_POINT = "."


def is_operator_glyph(ch: str) -> bool:
    """True если символ является глифом оператора (+ − × ÷)."""
    return ch in GLYPH_OPERATORS


class SymbolKind(str, Enum):
    """Вариант канонического символа."""

    DIGIT = "DIGIT"
    DECIMAL_POINT = "DECIMAL_POINT"
    OPERATOR = "OPERATOR"
    PERCENT = "PERCENT"
    EQUALS = "EQUALS"
    CLEAR = "CLEAR"
    BACKSPACE = "BACKSPACE"


# =============================================================================
# CANONICAL SYMBOL MODEL
# =============================================================================


class CanonicalSymbol(BaseModel):
    """
    Канонический символ ввода.

    Tagged value:
    - DIGIT: digit обязателен (0-9), operator отсутствует
    - OPERATOR: operator обязателен, digit отсутствует
    - остальные варианты: без payload
    """

    kind: SymbolKind = Field(..., description="Вариант символа")
    digit: Optional[int] = Field(None, ge=0, le=9, description="Цифра для DIGIT")
    operator: Optional[Operator] = Field(None, description="Оператор для OPERATOR")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_payload(self) -> "CanonicalSymbol":
        """Payload должен соответствовать варианту."""
        if self.kind == SymbolKind.DIGIT:
            if self.digit is None:
                raise ValueError("DIGIT symbol requires digit")
        elif self.digit is not None:
            raise ValueError(f"{self.kind.value} symbol must not carry digit")

        if self.kind == SymbolKind.OPERATOR:
            if self.operator is None:
                raise ValueError("OPERATOR symbol requires operator")
        elif self.operator is not None:
            raise ValueError(f"{self.kind.value} symbol must not carry operator")
        return self

    # Конструкторы вариантов

    @classmethod
    def of_digit(cls, digit: int) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.DIGIT, digit=digit)

    @classmethod
    def of_operator(cls, operator: Operator) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.OPERATOR, operator=operator)

    @classmethod
    def decimal_point(cls) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.DECIMAL_POINT)

    @classmethod
    def percent(cls) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.PERCENT)

    @classmethod
    def equals(cls) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.EQUALS)

    @classmethod
    def clear(cls) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.CLEAR)

    @classmethod
    def backspace(cls) -> "CanonicalSymbol":
        return cls(kind=SymbolKind.BACKSPACE)

    @property
    def text(self) -> str:
        """Текст, который символ добавляет в буфер (для DIGIT/OPERATOR)."""
        if self.kind == SymbolKind.DIGIT:
            return str(self.digit)
        if self.kind == SymbolKind.OPERATOR:
            return self.operator.glyph
        return ""
