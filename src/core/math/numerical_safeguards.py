"""
Numerical Safeguards: Safe Math Primitives for quantities

Module guarantees numerical hygiene of every quantity operation:
- NaN/Inf detection before any arithmetic
- Epsilon comparisons for floats (tolerant equality)
- Epsilon quantization (hash buckets consistent with tolerant equality)

CRITICAL INVARIANTS:
1. NaN/Inf never propagate: they are rejected with InvalidValueError,
   never replaced by a fallback
2. Float equality always goes through an explicit epsilon
3. All operations are deterministic and reproducible
"""

import math
from numbers import Real
from typing import Final

from src.core.errors import InvalidValueError

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Tolerance for length equality, in base inches
LENGTH_EPSILON: Final[float] = 1e-6

# Tolerance for weight equality, in base kilograms
WEIGHT_EPSILON: Final[float] = 1e-6

# Default tolerance for free-standing float comparisons
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-6


# =============================================================================
# NaN/Inf VALIDATION
# =============================================================================


def is_valid_float(value: object) -> bool:
    """
    Check that value is a finite real number (not NaN, not Inf).

    bool is rejected: True/False are not measurements.

    Args:
        value: Value to check (any object)

    Returns:
        True if value is a finite real number, False otherwise

    Examples:
        >>> is_valid_float(10.0)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float("1.0")
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def validate_finite(value: object, name: str) -> float:
    """
    Validate that value is a finite real number.

    Args:
        value: Value to check
        name: Argument name (for the error message)

    Returns:
        value as float

    Raises:
        InvalidValueError: If value is NaN, Inf or not a real number
    """
    if not is_valid_float(value):
        raise InvalidValueError(
            f"{name} must be a finite number (not NaN/Inf), got {value!r}",
            argument=name,
        )
    return float(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_within_tolerance(a: float, b: float, eps: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Strict tolerant equality: abs(a - b) < eps.

    Not transitive: a ≈ b and b ≈ c does not imply a ≈ c once the
    accumulated drift reaches eps.

    Args:
        a: First value
        b: Second value
        eps: Absolute tolerance (must be positive)

    Returns:
        True if values differ by strictly less than eps

    Examples:
        >>> is_within_tolerance(1.0, 1.0 + 1e-7)
        True
        >>> is_within_tolerance(1.0, 1.0 + 1e-6)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(a - b) < eps


# =============================================================================
# EPSILON QUANTIZATION
# =============================================================================


def epsilon_steps(value: float, eps: float) -> int:
    """
    Number of whole eps steps nearest to value (round half away from zero).

    Used as the hash bucket of a tolerant-equality value.

    Args:
        value: Value to quantize
        eps: Quantization step

    Returns:
        Integer step count

    Examples:
        >>> epsilon_steps(12.0, 1e-6)
        12000000
        >>> epsilon_steps(-0.0000026, 1e-6)
        -3
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    ratio = value / eps

    if ratio >= 0:
        return math.floor(ratio + 0.5)
    return math.ceil(ratio - 0.5)


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Round value to a fixed number of decimals (round half away from zero).

    Args:
        value: Value to round
        decimals: Number of decimal places (>= 0)

    Returns:
        Rounded value

    Examples:
        >>> round_to_decimals(0.3333333333, 6)
        0.333333
        >>> round_to_decimals(2.5, 0)
        3.0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    scale = 10.0**decimals
    return epsilon_steps(value * scale, 1.0) / scale
