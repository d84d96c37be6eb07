"""
Domain models and value objects.

Unit enumerations (LengthUnit, WeightUnit) and the Quantity value types
(Length, Weight) built on them.
"""

from src.core.domain.conversion import (
    ConversionConfig,
    almost_equal,
    convert_length,
    convert_weight,
)
from src.core.domain.quantity import Length, Quantity, Weight
from src.core.domain.units import (
    LENGTH_SPELLINGS,
    UNIT_TYPES,
    WEIGHT_SPELLINGS,
    LengthUnit,
    MeasurementUnit,
    WeightUnit,
    parse_unit,
)
from src.core.errors import (
    InvalidValueError,
    MissingOperandError,
    MissingOperandUnitError,
    MissingUnitError,
    QuantityError,
    UnitDomainError,
    UnrecognizedUnitError,
)

__all__ = [
    # Units
    "MeasurementUnit",
    "LengthUnit",
    "WeightUnit",
    "LENGTH_SPELLINGS",
    "WEIGHT_SPELLINGS",
    "UNIT_TYPES",
    "parse_unit",
    # Quantities
    "Quantity",
    "Length",
    "Weight",
    # Conversion utility
    "ConversionConfig",
    "convert_length",
    "convert_weight",
    "almost_equal",
    # Errors
    "QuantityError",
    "MissingUnitError",
    "MissingOperandError",
    "MissingOperandUnitError",
    "InvalidValueError",
    "UnrecognizedUnitError",
    "UnitDomainError",
]
