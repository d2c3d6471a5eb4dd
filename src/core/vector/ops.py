"""
Vector Ops — элементарные операции над 1D векторами float

Функции либо чистые (возвращают новый список, не связанный с аргументами),
либо явно помечены как in-place (пишут в переданный список и возвращают None).

Группы:
- Конструкторы: ones, inc
- Сравнение: equal (точное), all_close (с толерантностью)
- Поэлементная арифметика: mul, add, sub, div
- Отображение: apply, apply_in_place, reset
- Редукции: sum, dot, norm

Имя sum намеренно повторяет builtin: модуль используется как пространство
имён (`from src.core.vector import ops as vec; vec.sum(v)`).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовпадение длин операндов → LengthMismatchError, без усечения и дополнения
2. div делит (v1[i] / v2[i]); любой 0.0 в делителе → ZeroDivisorError
3. Накопление в sum/dot идёт строго по возрастанию индекса
"""

import math

from src.core.domain.vector import ElementalFn, Vector
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)
from src.core.vector.preconditions import (
    require_nonzero_divisors,
    require_same_length,
    require_valid_length,
)

# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def ones(length: int) -> Vector:
    """
    Новый вектор длины length, все элементы равны 1.0.

    Raises:
        InvalidLengthError: Если length < 0

    Examples:
        >>> ones(3)
        [1.0, 1.0, 1.0]
        >>> ones(0)
        []
    """
    require_valid_length("ones", length)
    o = [0.0] * length
    apply_in_place(lambda _: 1.0, o)
    return o


def inc(length: int) -> Vector:
    """
    Новый вектор [0.0, 1.0, ..., length - 1], отсчёт с нуля.

    Raises:
        InvalidLengthError: Если length < 0

    Examples:
        >>> inc(3)
        [0.0, 1.0, 2.0]
    """
    require_valid_length("inc", length)
    return [float(i) for i in range(length)]


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def equal(v1: Vector, v2: Vector) -> bool:
    """
    Точное сравнение: одинаковая длина и v1[i] == v2[i] для всех i.

    Несовпадение длин — не ошибка, а False. NaN не равен ничему, поэтому
    вектор с NaN не равен даже самому себе.
    """
    if len(v1) != len(v2):
        return False
    for a, b in zip(v1, v2):
        if a != b:
            return False
    return True


def all_close(
    v1: Vector,
    v2: Vector,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение с толерантностью: одинаковая длина и is_close для всех пар.

    Args:
        v1: Первый вектор
        v2: Второй вектор
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        False при несовпадении длин или если хотя бы одна пара не близка

    Examples:
        >>> all_close([0.1 + 0.2], [0.3])
        True
    """
    if len(v1) != len(v2):
        return False
    for a, b in zip(v1, v2):
        if not is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
            return False
    return True


# =============================================================================
# ПОЭЛЕМЕНТНАЯ АРИФМЕТИКА
# =============================================================================


def mul(v1: Vector, v2: Vector) -> Vector:
    """Поэлементное произведение: o[i] = v1[i] * v2[i]."""
    n = require_same_length("mul", v1, v2)
    return [v1[i] * v2[i] for i in range(n)]


def add(v1: Vector, v2: Vector) -> Vector:
    """
    Поэлементная сумма: o[i] = v1[i] + v2[i].

    Examples:
        >>> add([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        [5.0, 7.0, 9.0]
    """
    n = require_same_length("add", v1, v2)
    return [v1[i] + v2[i] for i in range(n)]


def sub(v1: Vector, v2: Vector) -> Vector:
    """Поэлементная разность: o[i] = v1[i] - v2[i]."""
    n = require_same_length("sub", v1, v2)
    return [v1[i] - v2[i] for i in range(n)]


def div(v1: Vector, v2: Vector) -> Vector:
    """
    Поэлементное деление: o[i] = v1[i] / v2[i].

    Все делители проверяются до вычисления результата.

    Raises:
        LengthMismatchError: Если len(v1) != len(v2)
        ZeroDivisorError: Если какой-либо v2[i] == 0.0

    Examples:
        >>> div([10.0, 20.0], [2.0, 5.0])
        [5.0, 4.0]
    """
    n = require_same_length("div", v1, v2)
    require_nonzero_divisors("div", v2)
    return [v1[i] / v2[i] for i in range(n)]


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def apply_in_place(f: ElementalFn, v: Vector) -> None:
    """
    v[i] = f(v[i]) для всех i, по возрастанию индекса.

    Модифицирует переданный список. Если v нужно сохранить, используйте apply.
    """
    for i in range(len(v)):
        v[i] = f(v[i])


def apply(f: ElementalFn, v: Vector) -> Vector:
    """Новый вектор o[i] = f(v[i]); v не модифицируется."""
    return [f(x) for x in v]


def reset(v: Vector) -> None:
    """Обнуление всех элементов v на месте."""
    apply_in_place(lambda _: 0.0, v)


# =============================================================================
# РЕДУКЦИИ
# =============================================================================


def sum(v: Vector) -> float:
    """
    Сумма элементов, накопление слева направо начиная с 0.0.

    Для пустого вектора возвращает 0.0.
    """
    o = 0.0
    for x in v:
        o += x
    return o


def dot(v1: Vector, v2: Vector) -> float:
    """
    Скалярное произведение: Σ v1[i] * v2[i].

    Raises:
        LengthMismatchError: Если len(v1) != len(v2)

    Examples:
        >>> dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        32.0
    """
    n = require_same_length("dot", v1, v2)
    o = 0.0
    for i in range(n):
        o += v1[i] * v2[i]
    return o


def norm(v: Vector) -> float:
    """
    Евклидова норма: sqrt(Σ v[i]^2).

    Examples:
        >>> norm([3.0, 4.0])
        5.0
    """
    return math.sqrt(sum(apply(lambda x: x * x, v)))
