"""
calc_engine — интерактивный арифметический калькулятор.

Ядро: конечный автомат буфера ввода и вычислитель выражений.
Рендеринг и привязка физических клавиш находятся снаружи ядра.
"""

__version__ = "0.3.0"
