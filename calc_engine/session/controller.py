"""CalculatorSession — единственный владелец состояния калькулятора.

- Хранит CalculatorState (Buffer + ErrorFlag) на время сессии
- Сериализует обработку символов (single-writer под lock)
- Публикует текст буфера рендерерам после каждого обработанного символа
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

from jsonschema import ValidationError

from calc_engine.core.contracts import validate_calculator_state, validate_canonical_symbol
from calc_engine.core.domain.calculator_state import CalculatorState
from calc_engine.core.domain.symbols import CanonicalSymbol
from calc_engine.input.key_map import normalize_key
from calc_engine.state_machine.buffer_machine import (
    BufferStateMachine,
    BufferTransitionResult,
    CalculatorConfig,
)

logger = logging.getLogger(__name__)

Renderer = Callable[[str], None]


class CalculatorSession:
    """Сессия калькулятора.

    Состояние меняется только через process(); рендереры получают
    текст буфера и не имеют доступа к состоянию.
    """

    def __init__(
        self,
        initial_display: Optional[str] = None,
        config: Optional[CalculatorConfig] = None,
        renderers: Iterable[Renderer] = (),
    ):
        """
        Args:
            initial_display: существующее значение дисплея ("0" если пусто)
            config: конфигурация калькулятора
            renderers: callbacks, получающие текст буфера
        """
        self.config = config or CalculatorConfig()
        self.machine = BufferStateMachine(self.config)
        self._state = CalculatorState(
            buffer=initial_display or self.config.initial_buffer,
            is_error=False,
        )
        self._renderers: List[Renderer] = list(renderers)
        self._lock = threading.Lock()

    @classmethod
    def restore(
        cls,
        payload: Dict[str, Any],
        config: Optional[CalculatorConfig] = None,
        renderers: Iterable[Renderer] = (),
    ) -> "CalculatorSession":
        """Восстановление сессии из снапшота calculator_state.

        Raises:
            ValidationError: Если снапшот не соответствует контракту
        """
        validate_calculator_state(payload)
        session = cls(config=config, renderers=renderers)
        session._state = CalculatorState(**payload)
        return session

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def buffer(self) -> str:
        return self._state.buffer

    @property
    def is_error(self) -> bool:
        return self._state.is_error

    def snapshot(self) -> Dict[str, Any]:
        """Снапшот состояния по контракту calculator_state."""
        payload = self._state.model_dump(mode="json")
        validate_calculator_state(payload)
        return payload

    def add_renderer(self, renderer: Renderer) -> None:
        self._renderers.append(renderer)

    # -------------------------------------------------------------------------
    # INPUT
    # -------------------------------------------------------------------------

    def process(self, symbol: Any) -> BufferTransitionResult:
        """Обработка одного символа до завершения.

        Returns:
            BufferTransitionResult перехода
        """
        # Рендереры вызываются под lock: порядок публикаций совпадает с порядком переходов
        with self._lock:
            result = self.machine.apply(self._state, symbol)
            self._state = result.new_state

            logger.debug(
                "transition %s: %r -> %r",
                result.transition_reason,
                result.previous_state.buffer,
                result.new_state.buffer,
            )
            if result.new_state.is_error and not result.previous_state.is_error:
                logger.info("Entered ERROR state: %s (%s)", result.transition_reason, result.details)

            self._publish(result.new_state.buffer)
        return result

    def press(self, key: Optional[str], code: Optional[str] = None) -> Optional[BufferTransitionResult]:
        """Нормализация физического ввода и обработка.

        Returns:
            BufferTransitionResult, либо None если ввод не отображается в символ
        """
        symbol = normalize_key(key, code)
        if symbol is None:
            logger.debug("Unmapped input: key=%r code=%r", key, code)
            return None
        return self.process(symbol)

    def process_payload(self, payload: Dict[str, Any]) -> BufferTransitionResult:
        """Обработка символа из JSON payload (контракт canonical_symbol).

        Невалидный payload обрабатывается как неизвестный символ (no-op).
        """
        try:
            validate_canonical_symbol(payload)
        except ValidationError as e:
            logger.debug("Invalid symbol payload %r: %s", payload, e.message)
            return self.process(payload)
        return self.process(CanonicalSymbol(**payload))

    def feed(self, symbols: Iterable[Any]) -> List[BufferTransitionResult]:
        """Последовательная обработка символов."""
        return [self.process(symbol) for symbol in symbols]

    def _publish(self, buffer: str) -> None:
        for renderer in self._renderers:
            try:
                renderer(buffer)
            except Exception:
                logger.exception("Renderer %r failed", renderer)
