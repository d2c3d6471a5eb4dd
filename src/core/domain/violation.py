"""
PreconditionDetails — структурированное описание нарушения предусловия

Immutable Pydantic модель, которую несёт каждое исключение векторных операций.
Вместо текста с адресом вызывающего кода хост-приложение получает поля:
имя операции, вид нарушения и числовые подробности.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ViolationKind(str, Enum):
    """Вид нарушения предусловия"""

    LENGTH_MISMATCH = "length_mismatch"
    ZERO_DIVISOR = "zero_divisor"
    INVALID_LENGTH = "invalid_length"


# =============================================================================
# MODEL
# =============================================================================


class PreconditionDetails(BaseModel):
    """
    Подробности нарушения предусловия.

    Заполнение полей по виду нарушения:
    - LENGTH_MISMATCH: expected (длина v1), actual (длина v2)
    - ZERO_DIVISOR: index первого нулевого делителя
    - INVALID_LENGTH: actual (запрошенная длина)
    """

    operation: str = Field(..., min_length=1, description="Имя операции (например, 'add')")
    kind: ViolationKind = Field(..., description="Вид нарушения")
    expected: Optional[int] = Field(None, ge=0, description="Ожидаемая длина")
    actual: Optional[int] = Field(None, description="Фактическая длина")
    index: Optional[int] = Field(None, ge=0, description="Индекс элемента-нарушителя")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fields_for_kind(self) -> "PreconditionDetails":
        """Проверка, что заполнены поля, обязательные для данного вида нарушения"""
        if self.kind == ViolationKind.LENGTH_MISMATCH:
            if self.expected is None or self.actual is None:
                raise ValueError("length_mismatch requires expected and actual")
        elif self.kind == ViolationKind.ZERO_DIVISOR:
            if self.index is None:
                raise ValueError("zero_divisor requires index")
        elif self.kind == ViolationKind.INVALID_LENGTH:
            if self.actual is None:
                raise ValueError("invalid_length requires actual")
        return self

    def describe(self) -> str:
        """Человекочитаемое сообщение для исключения и лога"""
        if self.kind == ViolationKind.LENGTH_MISMATCH:
            return (
                f"vec.{self.operation}: length of the first vector is {self.expected}, "
                f"length of the second vector is {self.actual}. They must match."
            )
        if self.kind == ViolationKind.ZERO_DIVISOR:
            return (
                f"vec.{self.operation}: entry {self.index} in the second vector is 0.0. "
                f"Cannot divide by 0.0."
            )
        return f"vec.{self.operation}: length must be non-negative, got {self.actual}."
