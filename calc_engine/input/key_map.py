"""
Input Normalizer — физический ввод → CanonicalSymbol

Таблица соответствия клавиш клавиатуры (event key / code) и подписей
кнопок каноническим символам. Неизвестный ввод не даёт символа (None).
"""

from typing import Dict, Optional

from calc_engine.core.domain.symbols import OPERATOR_GLYPHS, CanonicalSymbol, Operator

# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

DIGIT_KEYS: Dict[str, CanonicalSymbol] = {}
for _digit in range(10):
    DIGIT_KEYS[str(_digit)] = CanonicalSymbol.of_digit(_digit)
    DIGIT_KEYS[f"Numpad{_digit}"] = CanonicalSymbol.of_digit(_digit)

OPERATOR_KEYS: Dict[str, CanonicalSymbol] = {
    "+": CanonicalSymbol.of_operator(Operator.ADD),
    "-": CanonicalSymbol.of_operator(Operator.SUBTRACT),
    "*": CanonicalSymbol.of_operator(Operator.MULTIPLY),
    "/": CanonicalSymbol.of_operator(Operator.DIVIDE),
    "NumpadAdd": CanonicalSymbol.of_operator(Operator.ADD),
    "NumpadSubtract": CanonicalSymbol.of_operator(Operator.SUBTRACT),
    "NumpadMultiply": CanonicalSymbol.of_operator(Operator.MULTIPLY),
    "NumpadDivide": CanonicalSymbol.of_operator(Operator.DIVIDE),
}
# Подписи кнопок (глифы)
for _op, _glyph in OPERATOR_GLYPHS.items():
    OPERATOR_KEYS[_glyph] = CanonicalSymbol.of_operator(_op)

EQUALS_KEYS: Dict[str, CanonicalSymbol] = {
    "Enter": CanonicalSymbol.equals(),
    "NumpadEnter": CanonicalSymbol.equals(),
    "=": CanonicalSymbol.equals(),
}

CONTROL_KEYS: Dict[str, CanonicalSymbol] = {
    "Backspace": CanonicalSymbol.backspace(),
    "Delete": CanonicalSymbol.backspace(),
    "⌫": CanonicalSymbol.backspace(),
    "Escape": CanonicalSymbol.clear(),
    "C": CanonicalSymbol.clear(),
}

SPECIAL_KEYS: Dict[str, CanonicalSymbol] = {
    "%": CanonicalSymbol.percent(),
    ".": CanonicalSymbol.decimal_point(),
    "Period": CanonicalSymbol.decimal_point(),
    "NumpadDecimal": CanonicalSymbol.decimal_point(),
}

# Плоская таблица для поиска
KEY_MAP: Dict[str, CanonicalSymbol] = {
    **DIGIT_KEYS,
    **OPERATOR_KEYS,
    **CONTROL_KEYS,
    **EQUALS_KEYS,
    **SPECIAL_KEYS,
}


def normalize_key(key: Optional[str], code: Optional[str] = None) -> Optional[CanonicalSymbol]:
    """
    Нормализация физического ввода.

    Сначала ищется key (символ клавиши / подпись кнопки), затем code
    (физический код клавиши, например "Numpad5").

    Examples:
        >>> normalize_key("Enter").kind.value
        'EQUALS'
        >>> normalize_key("Unidentified", "NumpadAdd").operator.value
        'add'
        >>> normalize_key("F1") is None
        True
    """
    if key is not None and key in KEY_MAP:
        return KEY_MAP[key]
    if code is not None:
        return KEY_MAP.get(code)
    return None
