"""Calculator session — владелец состояния и публикация буфера."""

from .controller import CalculatorSession, Renderer

__all__ = [
    "CalculatorSession",
    "Renderer",
]
