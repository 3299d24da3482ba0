"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Разбор операндов как десятичных литералов
2. NaN/Inf проверки
3. Округление результата
4. Текстовое представление числа для буфера
"""

import math

import pytest

from calc_engine.core.math.numerical_safeguards import (
    MAX_FRACTION_DIGITS,
    PERCENT_FACTOR,
    format_result,
    is_integral,
    is_numeral,
    is_valid_float,
    is_zero,
    number_to_text,
    parse_operand,
    percent_of,
    round_fraction,
)

# =============================================================================
# РАЗБОР ОПЕРАНДОВ
# =============================================================================


class TestParseOperand:
    """Тесты для is_numeral / parse_operand"""

    @pytest.mark.parametrize("text", ["0", "12", "12.", "12.5", ".5", "-3", "-0.25", "007"])
    def test_valid_numerals(self, text: str) -> None:
        """Десятичные литералы принимаются"""
        assert is_numeral(text)
        assert parse_operand(text) == float(text)

    @pytest.mark.parametrize("text", ["", ".", "-", "inf", "nan", "1e5", "1_000", " 3", "3 ", "+3", "1.2.3"])
    def test_invalid_numerals(self, text: str) -> None:
        """Всё, что не является десятичным литералом, отклоняется"""
        assert not is_numeral(text)
        with pytest.raises(ValueError, match="Not a decimal numeral"):
            parse_operand(text)

    def test_operator_glyph_not_a_sign(self) -> None:
        """Глиф вычитания не является знаком операнда"""
        assert not is_numeral("−3")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


class TestFloatChecks:
    """Тесты для is_valid_float / is_zero / is_integral"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.5)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)
        assert not is_valid_float(math.nan)

    def test_is_zero_is_exact(self) -> None:
        """Сравнение с нулём без толерантности"""
        assert is_zero(0.0)
        assert is_zero(-0.0)
        assert not is_zero(1e-300)

    def test_is_integral(self) -> None:
        assert is_integral(14.0)
        assert is_integral(-3.0)
        assert not is_integral(2.5)
        assert not is_integral(math.inf)
        assert not is_integral(math.nan)


# =============================================================================
# ОКРУГЛЕНИЕ И ФОРМАТИРОВАНИЕ
# =============================================================================


class TestRoundFraction:
    """Тесты для round_fraction"""

    def test_default_digits(self) -> None:
        assert MAX_FRACTION_DIGITS == 10
        assert round_fraction(1 / 3) == 0.3333333333

    def test_custom_digits(self) -> None:
        assert round_fraction(2 / 3, 3) == 0.667

    def test_negative_digits_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            round_fraction(1.0, -1)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError, match="valid float"):
            round_fraction(math.inf)


class TestNumberToText:
    """Тесты для number_to_text"""

    def test_integer_values_without_fraction(self) -> None:
        assert number_to_text(2.0) == "2"
        assert number_to_text(-14.0) == "-14"

    def test_negative_zero(self) -> None:
        assert number_to_text(-0.0) == "0"

    def test_fractions(self) -> None:
        assert number_to_text(0.5) == "0.5"
        assert number_to_text(-2.5) == "-2.5"
        assert number_to_text(0.25) == "0.25"

    def test_no_exponent_notation(self) -> None:
        """Маленькие и большие значения без экспоненты"""
        assert number_to_text(1e-07) == "0.0000001"
        assert number_to_text(1e21) == "1000000000000000000000"

    def test_no_thousands_separators(self) -> None:
        assert number_to_text(1234567.5) == "1234567.5"

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            number_to_text(math.nan)


class TestFormatResult:
    """Тесты для format_result"""

    def test_integer_result(self) -> None:
        assert format_result(14.0) == "14"

    def test_repeating_fraction_rounded(self) -> None:
        assert format_result(1 / 3) == "0.3333333333"
        assert format_result(2 / 3) == "0.6666666667"

    def test_binary_noise_removed(self) -> None:
        assert format_result(0.1 + 0.2) == "0.3"

    def test_rounding_to_integer(self) -> None:
        """Округление может дать целое значение"""
        assert format_result(0.99999999999999) == "1"

    def test_custom_digits(self) -> None:
        assert format_result(1 / 3, 3) == "0.333"


class TestPercentOf:
    """Тесты для percent_of"""

    def test_default_factor(self) -> None:
        assert PERCENT_FACTOR == 0.01
        assert percent_of(200.0) == 2.0
        assert percent_of(50.0) == 0.5

    def test_custom_factor(self) -> None:
        assert percent_of(3.0, factor=2.0) == 6.0
