"""
Vector — базовые типы векторного слоя

Vector: упорядоченный список float фиксированной длины, индексация с нуля.
Список (а не tuple) нужен, чтобы in-place операции могли писать в контейнер
вызывающей стороны.

ElementalFn: чистая функция float -> float для apply/apply_in_place.
"""

from collections.abc import Callable, Iterable
from typing import Annotated, Any, Union

from pydantic import AfterValidator, StrictFloat, StrictInt, TypeAdapter, ValidationError

# =============================================================================
# TYPES
# =============================================================================

Vector = list[float]

ElementalFn = Callable[[float], float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorValidationError(ValueError):
    """
    Входные данные не являются последовательностью чисел.

    Оборачивает pydantic.ValidationError; исходная ошибка доступна через
    атрибут validation_error и __cause__.
    """

    def __init__(self, validation_error: ValidationError):
        self.validation_error = validation_error
        super().__init__(
            f"values must be a sequence of int/float: "
            f"{validation_error.error_count()} invalid element(s)"
        )


# =============================================================================
# COERCION
# =============================================================================


def _as_float(value: Union[int, float]) -> float:
    try:
        return float(value)
    except OverflowError:
        # int за пределами диапазона double
        raise ValueError("integer is too large to convert to float") from None


# Strict: строки, bool и None отклоняются, без lax-конвертации "1.5" -> 1.5
_VECTOR_ADAPTER: TypeAdapter[list[float]] = TypeAdapter(
    list[Annotated[Union[StrictInt, StrictFloat], AfterValidator(_as_float)]]
)


def to_vector(values: Iterable[Any]) -> Vector:
    """
    Построение нового Vector из произвольной итерируемой коллекции чисел.

    int приводится к float; результат всегда свежий список, не связанный
    с входной коллекцией.

    Args:
        values: Итерируемая коллекция int/float

    Returns:
        Новый Vector

    Raises:
        VectorValidationError: Если хотя бы один элемент не int/float
            или int не представим как float

    Examples:
        >>> to_vector([1, 2.5, 3])
        [1.0, 2.5, 3.0]
        >>> to_vector(range(3))
        [0.0, 1.0, 2.0]
    """
    try:
        validated = _VECTOR_ADAPTER.validate_python(list(values))
    except ValidationError as e:
        raise VectorValidationError(e) from e

    return validated
