"""
Math primitives для econ

IEEE-754 арифметика без Python exceptions и epsilon-сравнения float.
"""

from src.econ.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-754 arithmetic
    ieee_arithmetic,
    ieee_result,
    to_ieee,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    is_valid_float,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ieee_arithmetic",
    "ieee_result",
    "to_ieee",
    "compare_with_tolerance",
    "is_close",
    "is_valid_float",
]
