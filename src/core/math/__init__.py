"""
Core math modules

Численные примитивы для сравнения значений алгебр композиций.
"""

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_tolerance,
    values_equal,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Comparisons
    "is_close",
    "is_valid_float",
    "values_equal",
    # Validation
    "validate_tolerance",
]
