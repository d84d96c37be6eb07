"""
Core math modules

Numerical primitives with guaranteed NaN/Inf hygiene.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    LENGTH_EPSILON,
    WEIGHT_EPSILON,
    # NaN/Inf validation
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_within_tolerance,
    # Quantization
    epsilon_steps,
    round_to_decimals,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "LENGTH_EPSILON",
    "WEIGHT_EPSILON",
    # NaN/Inf validation
    "is_valid_float",
    "validate_finite",
    # Epsilon comparisons
    "is_within_tolerance",
    # Quantization
    "epsilon_steps",
    "round_to_decimals",
]
