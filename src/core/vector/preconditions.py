"""
Preconditions — единая точка проверки предусловий векторных операций

Все бинарные операции и редукции проверяют совпадение длин через
require_same_length. Каждое нарушение логируется на уровне ERROR перед
выбросом исключения.
"""

import logging
from typing import NoReturn

from src.core.domain.vector import Vector
from src.core.math.numerical_safeguards import validate_length
from src.core.vector.errors import (
    InvalidLengthError,
    LengthMismatchError,
    VectorPreconditionError,
    ZeroDivisorError,
)

logger = logging.getLogger(__name__)


def _fail(error: VectorPreconditionError) -> NoReturn:
    details = error.details
    logger.error(
        "operation=%s | kind=%s | %s",
        details.operation,
        details.kind.value,
        details.describe(),
    )
    raise error


def require_same_length(operation: str, v1: Vector, v2: Vector) -> int:
    """
    Проверка совпадения длин двух векторов.

    Args:
        operation: Имя операции для диагностики
        v1: Первый операнд
        v2: Второй операнд

    Returns:
        Общая длина

    Raises:
        LengthMismatchError: Если len(v1) != len(v2)
    """
    n = len(v1)
    if n != len(v2):
        _fail(LengthMismatchError(operation, n, len(v2)))
    return n


def require_nonzero_divisors(operation: str, divisors: Vector) -> None:
    """
    Проверка, что ни один делитель не равен 0.0 (точное сравнение, -0.0 тоже ноль).

    Raises:
        ZeroDivisorError: С индексом первого нулевого элемента
    """
    for i, d in enumerate(divisors):
        if d == 0.0:
            _fail(ZeroDivisorError(operation, i))


def require_valid_length(operation: str, length: int) -> None:
    """
    Проверка запрошенной длины конструктора.

    Raises:
        TypeError: Если length не int
        InvalidLengthError: Если length < 0
    """
    try:
        validate_length(length)
    except ValueError:
        _fail(InvalidLengthError(operation, length))
