"""
Domain models and value objects.

Contains the Vector type, elemental function type, input coercion, and the
structured description of precondition violations.
"""

from src.core.domain.vector import (
    ElementalFn,
    Vector,
    VectorValidationError,
    to_vector,
)
from src.core.domain.violation import PreconditionDetails, ViolationKind

__all__ = [
    # Vector
    "ElementalFn",
    "Vector",
    "VectorValidationError",
    "to_vector",
    # Violations
    "PreconditionDetails",
    "ViolationKind",
]
