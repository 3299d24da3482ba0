"""Input Normalizer — отображение клавиш и кнопок в канонические символы."""

from .key_map import KEY_MAP, normalize_key

__all__ = [
    "KEY_MAP",
    "normalize_key",
]
