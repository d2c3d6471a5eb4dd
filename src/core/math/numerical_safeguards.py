"""
Numerical Safeguards — Float Primitives для векторных операций

Модуль содержит скалярные примитивы, на которых строятся векторные операции:
- Epsilon-параметры для толерантных сравнений float
- Epsilon-сравнение двух float
- Валидация длины вектора

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное сравнение (==) и толерантное (is_close) разделены явно
2. Длина вектора всегда целое >= 0
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close и all_close по умолчанию
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Нужен для сравнений около нуля, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если rel_tol или abs_tol отрицательные (из math.isclose)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.1 + 0.2, 0.3)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_length(length: int, name: str = "length") -> None:
    """
    Валидация длины вектора: целое число >= 0.

    bool отклоняется явно, хотя формально является int.

    Args:
        length: Проверяемая длина
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если length не int
        ValueError: Если length < 0
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"{name} must be an int, got {type(length).__name__}")

    if length < 0:
        raise ValueError(f"{name} must be non-negative, got {length}")
