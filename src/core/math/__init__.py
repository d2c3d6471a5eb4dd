"""
Core math modules для vecops

Скалярные float-примитивы, на которых строятся векторные операции.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_length,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_length",
]
