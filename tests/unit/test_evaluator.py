"""Тесты для Expression Evaluator.

Coverage:
- Токенизация в чередование операнд/оператор
- Приоритет × ÷ над + −
- Деление на ноль
- Неразбираемые выражения
- Переполнение (NaN/Inf итог)
"""

import pytest

from calc_engine.core.domain import EvaluationOutcome, Operator
from calc_engine.core.math.evaluator import (
    DivisionByZeroError,
    MalformedExpressionError,
    NonFiniteResultError,
    compute,
    evaluate_expression,
    fold_additive,
    reduce_multiplicative,
    tokenize,
)


class TestTokenize:
    """Тесты токенизации."""

    def test_single_operand(self):
        assert tokenize("42") == [42.0]

    def test_alternating_sequence(self):
        assert tokenize("2+3×4") == [2.0, Operator.ADD, 3.0, Operator.MULTIPLY, 4.0]

    def test_all_operators(self):
        tokens = tokenize("1+2−3×4÷5")
        assert tokens[1::2] == [
            Operator.ADD,
            Operator.SUBTRACT,
            Operator.MULTIPLY,
            Operator.DIVIDE,
        ]

    def test_decimal_operands(self):
        assert tokenize("0.5×2.") == [0.5, Operator.MULTIPLY, 2.0]

    def test_leading_sign_operand(self):
        """Отрицательный результат предыдущего вычисления начинается с ASCII минуса."""
        assert tokenize("-5+3") == [-5.0, Operator.ADD, 3.0]

    @pytest.mark.parametrize("expression", ["", "5+", "+5", "5+×3", "5..2", "abc", "5−−2", "-"])
    def test_malformed(self, expression):
        with pytest.raises(MalformedExpressionError):
            tokenize(expression)


class TestPasses:
    """Тесты двух проходов."""

    def test_reduce_multiplicative_keeps_additive(self):
        tokens = tokenize("2+3×4−6÷2")
        assert reduce_multiplicative(tokens) == [2.0, Operator.ADD, 12.0, Operator.SUBTRACT, 3.0]

    def test_reduce_multiplicative_left_to_right(self):
        assert reduce_multiplicative(tokenize("8÷2÷2")) == [2.0]
        assert reduce_multiplicative(tokenize("7÷2×3")) == [10.5]

    def test_reduce_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            reduce_multiplicative(tokenize("5÷0"))

    def test_fold_additive_left_to_right(self):
        assert fold_additive(tokenize("10−2−3")) == 5.0
        assert fold_additive(tokenize("1+2−4")) == -1.0


class TestCompute:
    """Тесты compute (с исключениями)."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2+3×4", 14.0),
            ("2×3+4×5", 26.0),
            ("10−2×3", 4.0),
            ("8÷2÷2", 2.0),
            ("1.5×2", 3.0),
            ("10÷4", 2.5),
            ("2−3", -1.0),
            ("-1+4", 3.0),
            ("5", 5.0),
            ("5.", 5.0),
        ],
    )
    def test_precedence_and_folding(self, expression, expected):
        assert compute(expression) == expected

    def test_overflow_is_non_finite(self):
        big = "1" + "0" * 200
        with pytest.raises(NonFiniteResultError):
            compute(f"{big}×{big}")


class TestEvaluateExpression:
    """Тесты классификации результата."""

    def test_number(self):
        result = evaluate_expression("2+3×4")
        assert result.outcome == EvaluationOutcome.NUMBER
        assert result.is_number
        assert result.value == 14.0

    @pytest.mark.parametrize("expression", ["8÷0", "0÷0", "5÷0.0", "5+8÷0−1", "1÷0×0"])
    def test_division_by_zero(self, expression):
        result = evaluate_expression(expression)
        assert result.outcome == EvaluationOutcome.DIVISION_BY_ZERO
        assert result.value is None

    def test_division_by_zero_independent_of_later_operators(self):
        """Деление на ноль классифицируется сразу, последующие операторы не влияют."""
        result = evaluate_expression("1÷0−1÷0")
        assert result.outcome == EvaluationOutcome.DIVISION_BY_ZERO

    def test_small_divisor_is_not_zero(self):
        result = evaluate_expression("1÷0.0000000001")
        assert result.outcome == EvaluationOutcome.NUMBER

    @pytest.mark.parametrize("expression", ["", "5+", "5++3", ".", "-", "1.2.3"])
    def test_failure(self, expression):
        result = evaluate_expression(expression)
        assert result.outcome == EvaluationOutcome.EVALUATION_FAILURE
        assert result.details

    def test_overflow_is_failure(self):
        big = "1" + "0" * 200
        result = evaluate_expression(f"{big}×{big}")
        assert result.outcome == EvaluationOutcome.EVALUATION_FAILURE

    def test_stateless_repeated_calls(self):
        """Повторные вызовы не оставляют следов."""
        first = evaluate_expression("1÷3")
        evaluate_expression("8÷0")
        evaluate_expression("5++")
        assert evaluate_expression("1÷3") == first
