"""Buffer State Machine — управление буфером ввода калькулятора.

- Переходы NORMAL/ERROR на основе канонических символов
- Грамматика ввода: без ведущего оператора, одна точка на операнд,
  замена оператора, процент, backspace по одному символу
- Делегирование Equals в Expression Evaluator
"""

from dataclasses import dataclass
from typing import Any, Optional

from calc_engine.core.domain.calculator_state import (
    DECIMAL_OPERAND_START,
    INITIAL_BUFFER,
    CalcMode,
    CalculatorState,
)
from calc_engine.core.domain.evaluation import EvaluationOutcome, EvaluationResult
from calc_engine.core.domain.symbols import (
    DECIMAL_POINT,
    CanonicalSymbol,
    SymbolKind,
    is_operator_glyph,
)
from calc_engine.core.math.evaluator import evaluate_expression
from calc_engine.core.math.numerical_safeguards import (
    MAX_FRACTION_DIGITS,
    PERCENT_FACTOR,
    format_result,
    is_numeral,
    is_valid_float,
    number_to_text,
    parse_operand,
    percent_of,
)


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    - initial_buffer: минимальное значение буфера
    - max_fraction_digits: округление нецелого результата
    - percent_factor: множитель для Percent
    - divide_by_zero_message / error_message: тексты ошибок в буфере
    """
    initial_buffer: str = INITIAL_BUFFER
    max_fraction_digits: int = MAX_FRACTION_DIGITS
    percent_factor: float = PERCENT_FACTOR
    divide_by_zero_message: str = "Cannot divide by zero"
    error_message: str = "Error"

    def __post_init__(self):
        if not is_numeral(self.initial_buffer):
            raise ValueError(f"initial_buffer must be a numeral, got {self.initial_buffer!r}")
        if self.max_fraction_digits < 0:
            raise ValueError(
                f"max_fraction_digits must be non-negative, got {self.max_fraction_digits}"
            )
        for name in ("divide_by_zero_message", "error_message"):
            message = getattr(self, name)
            if not message or is_operator_glyph(message[0]):
                raise ValueError(f"{name} must be non-empty and not start with an operator")


@dataclass(frozen=True)
class BufferTransitionResult:
    """Результат перехода автомата буфера."""

    new_state: CalculatorState
    previous_state: CalculatorState

    # Диагностика
    transition_occurred: bool
    transition_reason: str

    # Результат вычисления (только для Equals)
    evaluation: Optional[EvaluationResult] = None

    # Для отладки
    details: str = ""

    @property
    def buffer(self) -> str:
        return self.new_state.buffer

    @property
    def mode(self) -> CalcMode:
        return self.new_state.mode


class BufferStateMachine:
    """Buffer State Machine: (state, symbol) → (new state).

    Тотальная чистая функция: никогда не выбрасывает исключений,
    любой символ либо меняет состояние, либо является no-op.

    States:
    - NORMAL: буфер содержит выражение
    - ERROR: буфер содержит сообщение об ошибке; принимаются только
      Digit, DecimalPoint, Backspace, Clear (восстановление)
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()

    def apply(self, state: CalculatorState, symbol: Any) -> BufferTransitionResult:
        """Применение одного символа к состоянию.

        Args:
            state: текущее состояние (Buffer + ErrorFlag)
            symbol: канонический символ; всё остальное игнорируется

        Returns:
            BufferTransitionResult с новым состоянием
        """
        if not isinstance(symbol, CanonicalSymbol):
            return self._no_change(state, "unmapped_symbol", f"Ignored: {symbol!r}")

        if state.is_error:
            return self._apply_error(state, symbol)
        return self._apply_normal(state, symbol)

    # -------------------------------------------------------------------------
    # ERROR
    # -------------------------------------------------------------------------

    def _apply_error(self, state: CalculatorState, symbol: CanonicalSymbol) -> BufferTransitionResult:
        kind = symbol.kind

        if kind == SymbolKind.DIGIT:
            return self._change(state, symbol.text, "error_recovery_digit")
        if kind == SymbolKind.DECIMAL_POINT:
            return self._change(state, DECIMAL_OPERAND_START, "error_recovery_decimal")
        if kind == SymbolKind.BACKSPACE:
            return self._change(state, self.config.initial_buffer, "error_recovery_backspace")
        if kind == SymbolKind.CLEAR:
            return self._change(state, self.config.initial_buffer, "error_recovery_clear")

        # Operator, Percent, Equals: ошибка сохраняется
        return self._no_change(state, "ignored_in_error", f"{kind.value} ignored in ERROR")

    # -------------------------------------------------------------------------
    # NORMAL
    # -------------------------------------------------------------------------

    def _apply_normal(self, state: CalculatorState, symbol: CanonicalSymbol) -> BufferTransitionResult:
        kind = symbol.kind
        buffer = state.buffer
        is_initial = buffer == self.config.initial_buffer

        if kind == SymbolKind.CLEAR:
            if is_initial:
                return self._no_change(state, "already_clear")
            return self._change(state, self.config.initial_buffer, "cleared")

        if kind == SymbolKind.BACKSPACE:
            if is_initial:
                return self._no_change(state, "already_clear")
            return self._change(state, buffer[:-1] or self.config.initial_buffer, "backspace")

        if kind == SymbolKind.EQUALS:
            if state.ends_with_operator:
                return self._no_change(state, "equals_trailing_operator")
            return self._apply_equals(state)

        if kind == SymbolKind.PERCENT:
            if is_initial or state.ends_with_operator:
                return self._no_change(state, "percent_guard")
            return self._apply_percent(state)

        if kind == SymbolKind.DECIMAL_POINT:
            if state.last_segment_has_decimal:
                return self._no_change(state, "decimal_guard")
            if state.ends_with_operator:
                return self._change(state, buffer + DECIMAL_OPERAND_START, "decimal_operand_started")
            return self._change(state, buffer + DECIMAL_POINT, "decimal_appended")

        if kind == SymbolKind.OPERATOR:
            if is_initial:
                return self._no_change(state, "leading_operator")
            if state.ends_with_operator:
                return self._change(state, buffer[:-1] + symbol.text, "operator_replaced")
            return self._change(state, buffer + symbol.text, "operator_appended")

        # DIGIT
        if is_initial:
            return self._change(state, symbol.text, "digit_replaced_zero")
        return self._change(state, buffer + symbol.text, "digit_appended")

    def _apply_equals(self, state: CalculatorState) -> BufferTransitionResult:
        """Вычисление буфера и применение результата."""
        evaluation = evaluate_expression(state.buffer)

        if evaluation.outcome == EvaluationOutcome.DIVISION_BY_ZERO:
            return self._change(
                state,
                self.config.divide_by_zero_message,
                "division_by_zero",
                is_error=True,
                evaluation=evaluation,
                details=evaluation.details,
            )
        if evaluation.outcome == EvaluationOutcome.EVALUATION_FAILURE:
            return self._change(
                state,
                self.config.error_message,
                "evaluation_failure",
                is_error=True,
                evaluation=evaluation,
                details=evaluation.details,
            )

        text = format_result(evaluation.value, self.config.max_fraction_digits)
        return self._change(
            state,
            text,
            "evaluated",
            evaluation=evaluation,
            details=f"{state.buffer} = {text}",
        )

    def _apply_percent(self, state: CalculatorState) -> BufferTransitionResult:
        """Замена последнего операнда на его процентное значение."""
        segment = state.last_segment
        try:
            value = parse_operand(segment)
        except ValueError:
            return self._no_change(state, "percent_guard", f"Operand not numeric: {segment!r}")

        percentage = percent_of(value, self.config.percent_factor)
        if not is_valid_float(percentage):
            return self._no_change(state, "percent_guard", f"Non-finite percentage of {segment!r}")

        prefix = state.buffer[: len(state.buffer) - len(segment)]
        return self._change(
            state,
            prefix + number_to_text(percentage),
            "percent_applied",
            details=f"{segment} → {percentage}",
        )

    # -------------------------------------------------------------------------
    # RESULTS
    # -------------------------------------------------------------------------

    def _change(
        self,
        state: CalculatorState,
        new_buffer: str,
        reason: str,
        is_error: bool = False,
        evaluation: Optional[EvaluationResult] = None,
        details: str = "",
    ) -> BufferTransitionResult:
        new_state = CalculatorState(buffer=new_buffer, is_error=is_error)
        return BufferTransitionResult(
            new_state=new_state,
            previous_state=state,
            transition_occurred=new_state != state,
            transition_reason=reason,
            evaluation=evaluation,
            details=details,
        )

    def _no_change(self, state: CalculatorState, reason: str, details: str = "") -> BufferTransitionResult:
        return BufferTransitionResult(
            new_state=state,
            previous_state=state,
            transition_occurred=False,
            transition_reason=reason,
            details=details,
        )
