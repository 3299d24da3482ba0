"""
Expression Evaluator — вычисление текста буфера

Чистая функция без состояния: текст буфера → EvaluationResult.

Алгоритм (двухпроходный, без eval):
1. tokenize: разбиение на [operand, op, operand, ..., operand]
2. reduce_multiplicative: слева направо свёртка × и ÷ в один операнд
3. fold_additive: свёртка оставшихся + и − слева направо

Классификация:
- деление на ноль (правый операнд ÷ равен 0) → DIVISION_BY_ZERO,
  сразу при попытке деления, независимо от последующих операторов
- неразбираемый текст (пустой операнд и т.п.) → EVALUATION_FAILURE
- NaN/Inf итог, не являющийся делением на ноль → EVALUATION_FAILURE
"""

from typing import List, Union

from calc_engine.core.domain.evaluation import EvaluationResult
from calc_engine.core.domain.symbols import Operator, is_operator_glyph
from calc_engine.core.math.numerical_safeguards import (
    is_valid_float,
    is_zero,
    parse_operand,
)

Token = Union[float, Operator]


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class EvaluationError(ValueError):
    """Базовая ошибка вычисления выражения."""


class DivisionByZeroError(EvaluationError):
    """Правый операнд деления равен нулю."""


class MalformedExpressionError(EvaluationError):
    """Текст не разбирается в чередование операнд/оператор."""


class NonFiniteResultError(EvaluationError):
    """Итог вычисления NaN или Inf (переполнение)."""


# =============================================================================
# ПРОХОДЫ
# =============================================================================


def tokenize(expression: str) -> List[Token]:
    """
    Разбиение текста на чередующуюся последовательность операндов и операторов.

    Raises:
        MalformedExpressionError: Пустой текст, пустой операнд
            или операнд, не являющийся десятичным литералом
    """
    if not expression:
        raise MalformedExpressionError("empty expression")

    tokens: List[Token] = []
    segment_start = 0
    for idx, ch in enumerate(expression):
        if not is_operator_glyph(ch):
            continue
        tokens.append(_operand(expression[segment_start:idx]))
        tokens.append(Operator.from_glyph(ch))
        segment_start = idx + 1
    tokens.append(_operand(expression[segment_start:]))
    return tokens


def _operand(text: str) -> float:
    try:
        return parse_operand(text)
    except ValueError as e:
        raise MalformedExpressionError(str(e)) from e


def _apply(left: float, op: Operator, right: float) -> float:
    if op == Operator.ADD:
        return left + right
    if op == Operator.SUBTRACT:
        return left - right
    if op == Operator.MULTIPLY:
        return left * right
    if is_zero(right):
        raise DivisionByZeroError(f"{left} ÷ {right}")
    return left / right


def reduce_multiplicative(tokens: List[Token]) -> List[Token]:
    """
    Первый проход: каждая тройка (operand, ×|÷, operand) заменяется
    на один операнд, аддитивные операторы остаются на местах.

    Raises:
        DivisionByZeroError: При делении на ноль
    """
    reduced: List[Token] = [tokens[0]]
    for i in range(1, len(tokens), 2):
        op = tokens[i]
        right = tokens[i + 1]
        if op.is_multiplicative:
            reduced[-1] = _apply(reduced[-1], op, right)
        else:
            reduced.append(op)
            reduced.append(right)
    return reduced


def fold_additive(tokens: List[Token]) -> float:
    """Второй проход: свёртка + и − слева направо."""
    result = tokens[0]
    for i in range(1, len(tokens), 2):
        result = _apply(result, tokens[i], tokens[i + 1])
    return result


def compute(expression: str) -> float:
    """
    Вычисление выражения с исключениями.

    Raises:
        DivisionByZeroError: Деление на ноль
        MalformedExpressionError: Неразбираемый текст
        NonFiniteResultError: NaN/Inf итог
    """
    value = fold_additive(reduce_multiplicative(tokenize(expression)))
    if not is_valid_float(value):
        raise NonFiniteResultError(f"non-finite result: {value}")
    return value


def evaluate_expression(expression: str) -> EvaluationResult:
    """
    Вычисление текста буфера с классификацией результата.

    Никогда не выбрасывает исключений.

    Examples:
        >>> evaluate_expression("2+3×4").value
        14.0
        >>> evaluate_expression("8÷0").outcome.value
        'DIVISION_BY_ZERO'
    """
    try:
        return EvaluationResult.number(compute(expression))
    except DivisionByZeroError as e:
        return EvaluationResult.division_by_zero(details=str(e))
    except EvaluationError as e:
        return EvaluationResult.failure(details=str(e))
