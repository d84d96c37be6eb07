"""
Units: closed unit enumerations with conversion factors to a base unit

The only place where conversion factors live. Every enumeration member
carries its factor as the enum value: "1 unit = factor base units".

Base units:
- length: INCH (factor 1.0)
- weight: KILOGRAM (factor 1.0)

Plural spellings are enum aliases (same factor => same member), so
LengthUnit.FEET is LengthUnit.FOOT.

Units are pure and stateless: validation of quantities lives in the
Quantity layer, the helpers here only reject non-finite input.
"""

from enum import Enum
from typing import Final

import structlog

from src.core.errors import UnrecognizedUnitError
from src.core.math.numerical_safeguards import validate_finite

logger = structlog.get_logger(__name__)


# =============================================================================
# BASE ENUMERATION
# =============================================================================


class MeasurementUnit(Enum):
    """
    Base for per-domain unit enumerations.

    Has no members of its own; subclasses define members whose value is the
    multiplicative factor to the domain's base unit.
    """

    @property
    def factor(self) -> float:
        """Multiplicative factor: 1 unit = factor base units."""
        return self.value

    @property
    def is_base(self) -> bool:
        return self.value == 1.0

    @property
    def dimension(self) -> str:
        return _DIMENSION_BY_TYPE[type(self)]

    def to_base(self, value: float) -> float:
        """
        Convert value expressed in this unit to the base unit.

        Args:
            value: Value in this unit

        Returns:
            value * factor

        Raises:
            InvalidValueError: If value is NaN/Inf
        """
        return validate_finite(value, "value") * self.value

    def from_base(self, base_value: float) -> float:
        """
        Convert value expressed in the base unit to this unit.

        Args:
            base_value: Value in the base unit

        Returns:
            base_value / factor

        Raises:
            InvalidValueError: If base_value is NaN/Inf
        """
        return validate_finite(base_value, "base_value") / self.value

    def canonical(self) -> "MeasurementUnit":
        """
        Single representative member for this physical unit.

        Display/dedup only; arithmetic goes through the factor regardless.
        """
        return type(self)(self.value)

    @classmethod
    def base_unit(cls) -> "MeasurementUnit":
        return next(unit for unit in cls if unit.is_base)

    @classmethod
    def parse(cls, text: str) -> "MeasurementUnit":
        """
        Lenient unit lookup.

        Case-insensitive, trims whitespace, accepts singular, plural and
        abbreviated spellings ("in", "ft", "cm", "lb", ...). Falls back to
        exact member names (aliases included).

        Args:
            text: Unit name as free text

        Returns:
            Matching member (canonical)

        Raises:
            UnrecognizedUnitError: If text matches no unit of this domain
        """
        if not isinstance(text, str):
            raise UnrecognizedUnitError(
                f"{cls.__name__} text must be a string, got {text!r}", argument="text"
            )

        key = text.strip().lower()
        unit = _SPELLINGS_BY_TYPE.get(cls, {}).get(key)
        if unit is not None:
            logger.debug("unit_parsed", text=text, unit=unit.name)
            return unit

        # Fallback: exact enum names (developer input)
        try:
            unit = cls[key.upper()]
        except KeyError:
            raise UnrecognizedUnitError(
                f"Unknown {cls.__name__} text: {text!r}", argument="text"
            ) from None

        logger.debug("unit_alias_fallback", text=text, unit=unit.name)
        return unit


# =============================================================================
# LENGTH (base: inch)
# =============================================================================


class LengthUnit(MeasurementUnit):
    """Length units, factor = inches per unit."""

    INCH = 1.0
    INCHES = 1.0

    FOOT = 12.0  # 1 ft = 12 in
    FEET = 12.0

    YARD = 36.0  # 1 yd = 36 in
    YARDS = 36.0

    CENTIMETER = 0.3937007874  # 1 cm = 1/2.54 in
    CENTIMETERS = 0.3937007874


# =============================================================================
# WEIGHT (base: kilogram)
# =============================================================================


class WeightUnit(MeasurementUnit):
    """Weight units, factor = kilograms per unit."""

    KILOGRAM = 1.0
    KILOGRAMS = 1.0

    GRAM = 0.001
    GRAMS = 0.001

    POUND = 0.45359237  # international avoirdupois pound
    POUNDS = 0.45359237


# =============================================================================
# SPELLINGS
# =============================================================================

LENGTH_SPELLINGS: Final[dict[str, LengthUnit]] = {
    "inch": LengthUnit.INCH,
    "inches": LengthUnit.INCH,
    "in": LengthUnit.INCH,
    "foot": LengthUnit.FOOT,
    "feet": LengthUnit.FOOT,
    "ft": LengthUnit.FOOT,
    "yard": LengthUnit.YARD,
    "yards": LengthUnit.YARD,
    "yd": LengthUnit.YARD,
    "centimeter": LengthUnit.CENTIMETER,
    "centimeters": LengthUnit.CENTIMETER,
    "centimetre": LengthUnit.CENTIMETER,
    "centimetres": LengthUnit.CENTIMETER,
    "cm": LengthUnit.CENTIMETER,
    "cms": LengthUnit.CENTIMETER,
}

WEIGHT_SPELLINGS: Final[dict[str, WeightUnit]] = {
    "kilogram": WeightUnit.KILOGRAM,
    "kilograms": WeightUnit.KILOGRAM,
    "kilogramme": WeightUnit.KILOGRAM,
    "kg": WeightUnit.KILOGRAM,
    "kgs": WeightUnit.KILOGRAM,
    "gram": WeightUnit.GRAM,
    "grams": WeightUnit.GRAM,
    "gramme": WeightUnit.GRAM,
    "g": WeightUnit.GRAM,
    "gm": WeightUnit.GRAM,
    "pound": WeightUnit.POUND,
    "pounds": WeightUnit.POUND,
    "lb": WeightUnit.POUND,
    "lbs": WeightUnit.POUND,
}

_SPELLINGS_BY_TYPE: Final[dict[type[MeasurementUnit], dict[str, MeasurementUnit]]] = {
    LengthUnit: LENGTH_SPELLINGS,
    WeightUnit: WEIGHT_SPELLINGS,
}

_DIMENSION_BY_TYPE: Final[dict[type[MeasurementUnit], str]] = {
    LengthUnit: "length",
    WeightUnit: "weight",
}

UNIT_TYPES: Final[dict[str, type[MeasurementUnit]]] = {
    dimension: unit_type for unit_type, dimension in _DIMENSION_BY_TYPE.items()
}


def parse_unit(text: str, dimension: str | None = None) -> MeasurementUnit:
    """
    Domain-agnostic lenient lookup.

    Args:
        text: Unit name as free text
        dimension: "length" or "weight" to restrict the lookup (optional)

    Returns:
        First matching member across the allowed domains

    Raises:
        UnrecognizedUnitError: If no domain recognizes text, or dimension is unknown
    """
    if dimension is None:
        candidates = list(UNIT_TYPES.values())
    elif dimension in UNIT_TYPES:
        candidates = [UNIT_TYPES[dimension]]
    else:
        raise UnrecognizedUnitError(f"Unknown dimension: {dimension!r}", argument="dimension")

    for unit_type in candidates:
        try:
            return unit_type.parse(text)
        except UnrecognizedUnitError:
            continue

    raise UnrecognizedUnitError(f"Unknown unit text: {text!r}", argument="text")
