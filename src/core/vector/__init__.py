"""
Vector Ops Module

Элементарные операции над 1D векторами float и их исключения.

Операции импортируются как пространство имён, чтобы sum не затенял builtin:

    from src.core.vector import ops as vec
    vec.norm(vec.ones(4))
"""

from src.core.vector import ops
from src.core.vector.errors import (
    InvalidLengthError,
    LengthMismatchError,
    VectorPreconditionError,
    ZeroDivisorError,
)

__all__ = [
    # Module
    "ops",
    # Exceptions
    "InvalidLengthError",
    "LengthMismatchError",
    "VectorPreconditionError",
    "ZeroDivisorError",
]
