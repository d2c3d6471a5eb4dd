"""
Vector Errors — исключения нарушения предусловий

Нарушение предусловия (несовпадение длин, нулевой делитель, отрицательная
длина) не завершает процесс: операция бросает исключение, несущее
PreconditionDetails. Решение об аварийной остановке принимает вызывающий код.

Иерархия:
    ValueError
    └── VectorPreconditionError
        ├── LengthMismatchError
        ├── ZeroDivisorError (также ZeroDivisionError)
        └── InvalidLengthError
"""

from src.core.domain.violation import PreconditionDetails, ViolationKind


def _rebuild(cls: type, details: PreconditionDetails) -> "VectorPreconditionError":
    error = cls.__new__(cls)
    VectorPreconditionError.__init__(error, details)
    return error


class VectorPreconditionError(ValueError):
    """
    Базовое исключение нарушения предусловия векторной операции.

    Attributes:
        details: Структурированные подробности нарушения
    """

    def __init__(self, details: PreconditionDetails):
        self.details = details
        super().__init__(details.describe())

    def __reduce__(self):
        # подклассы принимают не details, а свои аргументы
        return _rebuild, (type(self), self.details)

    @property
    def operation(self) -> str:
        return self.details.operation

    @property
    def kind(self) -> ViolationKind:
        return self.details.kind


class LengthMismatchError(VectorPreconditionError):
    """Длины операндов бинарной операции не совпадают."""

    def __init__(self, operation: str, expected: int, actual: int):
        super().__init__(
            PreconditionDetails(
                operation=operation,
                kind=ViolationKind.LENGTH_MISMATCH,
                expected=expected,
                actual=actual,
            )
        )


class ZeroDivisorError(VectorPreconditionError, ZeroDivisionError):
    """Делитель содержит элемент, точно равный 0.0."""

    def __init__(self, operation: str, index: int):
        super().__init__(
            PreconditionDetails(
                operation=operation,
                kind=ViolationKind.ZERO_DIVISOR,
                index=index,
            )
        )


class InvalidLengthError(VectorPreconditionError):
    """Запрошена отрицательная длина вектора."""

    def __init__(self, operation: str, length: int):
        super().__init__(
            PreconditionDetails(
                operation=operation,
                kind=ViolationKind.INVALID_LENGTH,
                actual=length,
            )
        )
