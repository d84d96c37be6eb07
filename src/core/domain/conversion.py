"""
Conversion: standalone numeric conversion and comparison helpers

For callers that hold bare floats rather than Quantity instances:
- convert_length / convert_weight: value in one unit -> value in another,
  rounded to ConversionConfig.round_decimals
- almost_equal: strict tolerant comparison of two floats
"""

from dataclasses import dataclass

from src.core.domain.quantity import Length, Quantity, Weight
from src.core.domain.units import LengthUnit, MeasurementUnit, WeightUnit
from src.core.errors import MissingUnitError
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_within_tolerance,
    round_to_decimals,
    validate_finite,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Numeric conversion config.

    Rounding applies to converted values only; same-unit conversion returns
    the input untouched.
    """

    epsilon: float = EPS_FLOAT_COMPARE_ABS
    round_decimals: int = 6


# =============================================================================
# CONVERSIONS
# =============================================================================


def _convert(
    quantity_type: type[Quantity],
    value: float,
    from_unit: MeasurementUnit | None,
    to_unit: MeasurementUnit | None,
    config: ConversionConfig | None,
) -> float:
    config = config or ConversionConfig()

    if from_unit is None:
        raise MissingUnitError("Source unit must not be None", argument="from_unit")
    if to_unit is None:
        raise MissingUnitError("Target unit must not be None", argument="to_unit")
    value = validate_finite(value, "value")

    if from_unit is to_unit:
        return value

    converted = quantity_type(value, from_unit).convert_to(to_unit)
    return round_to_decimals(converted.value, config.round_decimals)


def convert_length(
    value: float,
    from_unit: LengthUnit | None,
    to_unit: LengthUnit | None,
    config: ConversionConfig | None = None,
) -> float:
    """
    Convert a bare length value between units.

    Args:
        value: Length value in from_unit
        from_unit: Source unit
        to_unit: Target unit
        config: Rounding config (optional, default used)

    Returns:
        Value in to_unit, rounded to config.round_decimals

    Raises:
        MissingUnitError: If either unit is None
        InvalidValueError: If value is NaN/Inf

    Examples:
        >>> convert_length(1.0, LengthUnit.FOOT, LengthUnit.INCH)
        12.0
        >>> convert_length(1.0, LengthUnit.YARD, LengthUnit.FOOT)
        3.0
    """
    return _convert(Length, value, from_unit, to_unit, config)


def convert_weight(
    value: float,
    from_unit: WeightUnit | None,
    to_unit: WeightUnit | None,
    config: ConversionConfig | None = None,
) -> float:
    """
    Convert a bare weight value between units.

    Same contract as convert_length.

    Examples:
        >>> convert_weight(1.0, WeightUnit.POUND, WeightUnit.GRAM)
        453.59237
    """
    return _convert(Weight, value, from_unit, to_unit, config)


def almost_equal(a: float, b: float, config: ConversionConfig | None = None) -> bool:
    """True if abs(a - b) < config.epsilon."""
    config = config or ConversionConfig()
    return is_within_tolerance(a, b, config.epsilon)
