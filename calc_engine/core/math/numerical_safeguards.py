"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную корректность операций калькулятора:
- Разбор операндов строго как десятичных литералов (без "inf", "nan", экспоненты)
- NaN/Inf проверки для классификации результата
- Проверка на ноль для делителя
- Округление результата и текстовое представление числа для буфера

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Текст числа никогда не содержит экспоненту и разделители тысяч
2. Текст числа никогда не содержит глифов операторов (знак минус — ASCII "-")
3. Все операции детерминированы и воспроизводимы (IEEE-754 double)
"""

import math
import re
from decimal import Decimal
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимум дробных цифр в отображаемом результате
MAX_FRACTION_DIGITS: Final[int] = 10

# Множитель для Percent
PERCENT_FACTOR: Final[float] = 0.01

# Десятичный литерал операнда: "12", "12.", "12.5", ".5", опциональный ASCII минус
_NUMERAL_RE: Final[re.Pattern[str]] = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


# =============================================================================
# РАЗБОР ОПЕРАНДОВ
# =============================================================================


def is_numeral(text: str) -> bool:
    """
    Проверка, является ли текст десятичным литералом операнда.

    Examples:
        >>> is_numeral("3.5")
        True
        >>> is_numeral("5.")
        True
        >>> is_numeral("")
        False
        >>> is_numeral("inf")
        False
    """
    return _NUMERAL_RE.fullmatch(text) is not None


def parse_operand(text: str) -> float:
    """
    Разбор операнда в float.

    В отличие от float(), принимает только десятичные литералы.

    Args:
        text: Текст операнда

    Returns:
        Значение операнда (double)

    Raises:
        ValueError: Если текст не является десятичным литералом
    """
    if not is_numeral(text):
        raise ValueError(f"Not a decimal numeral: {text!r}")
    return float(text)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float) -> bool:
    """
    Точная проверка на ноль (включая -0.0).

    Делитель сравнивается без толерантности: 1÷0.0000000001 — валидное
    деление, а не деление на ноль.
    """
    return value == 0.0


def is_integral(value: float) -> bool:
    """True если значение конечно и не имеет дробной части."""
    return is_valid_float(value) and float(value).is_integer()


# =============================================================================
# ОКРУГЛЕНИЕ И ФОРМАТИРОВАНИЕ
# =============================================================================


def round_fraction(value: float, digits: int = MAX_FRACTION_DIGITS) -> float:
    """
    Округление до заданного числа дробных цифр.

    Args:
        value: Исходное значение
        digits: Число дробных цифр (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если digits < 0 или value NaN/Inf

    Examples:
        >>> round_fraction(1 / 3)
        0.3333333333
        >>> round_fraction(0.1 + 0.2)
        0.3
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")
    return round(value, digits)


def number_to_text(value: float) -> str:
    """
    Текстовое представление числа для буфера.

    Кратчайшее десятичное представление double, без экспоненты,
    без разделителей тысяч, без хвостовых нулей. Целые значения
    рендерятся без дробной части, -0.0 рендерится как "0".

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> number_to_text(2.0)
        '2'
        >>> number_to_text(0.5)
        '0.5'
        >>> number_to_text(1e-07)
        '0.0000001'
        >>> number_to_text(-2.5)
        '-2.5'
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if float(value).is_integer():
        return str(int(value))

    # repr даёт кратчайшее представление, Decimal убирает экспоненту
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_result(value: float, digits: int = MAX_FRACTION_DIGITS) -> str:
    """
    Форматирование финального результата вычисления.

    Проверка на целое выполняется на финальном значении:
    - целое → целый десятичный текст
    - иначе → округление до digits дробных цифр, хвостовые нули убраны

    Examples:
        >>> format_result(14.0)
        '14'
        >>> format_result(1 / 3)
        '0.3333333333'
        >>> format_result(0.1 + 0.2)
        '0.3'
    """
    if is_integral(value):
        return number_to_text(value)
    return number_to_text(round_fraction(value, digits))


def percent_of(value: float, factor: float = PERCENT_FACTOR) -> float:
    """
    Процентное значение операнда: value × factor.

    Examples:
        >>> percent_of(200.0)
        2.0
    """
    return value * factor
