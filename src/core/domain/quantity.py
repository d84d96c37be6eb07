"""
Quantity: immutable measurement value (value + unit)

One generic Pydantic model parameterized by the unit enumeration:
- Length = Quantity[LengthUnit] (base: inch)
- Weight = Quantity[WeightUnit] (base: kilogram)

All unit arithmetic is delegated to the unit enumeration (to_base/from_base).

CRITICAL INVARIANTS:
1. value is always finite (checked at construction, so also at every
   conversion/addition output)
2. unit is never absent (MissingUnitError, distinct from InvalidValueError)
3. Immutable (frozen=True): every operation returns a new instance
4. Equality is tolerant: |a.to_base() - b.to_base()| < EPSILON
5. Equal quantities hash identically (hash of the base value quantized
   to EPSILON)

Tolerant equality is not strictly transitive: long chains of values each
within EPSILON of the next can drift apart. This is a property of the
tolerance model.
"""

import math
from typing import Any, ClassVar, Final, Generic, TypeVar

from pydantic import BaseModel, Field

from src.core.domain.units import LengthUnit, MeasurementUnit, WeightUnit
from src.core.errors import (
    MissingOperandError,
    MissingOperandUnitError,
    MissingUnitError,
    UnitDomainError,
)
from src.core.math.numerical_safeguards import (
    LENGTH_EPSILON,
    WEIGHT_EPSILON,
    epsilon_steps,
    is_within_tolerance,
    validate_finite,
)

U = TypeVar("U", bound=MeasurementUnit)

# Marker for add() called without an explicit target unit
_LEFT_OPERAND_UNIT: Final[Any] = object()


# =============================================================================
# GENERIC QUANTITY
# =============================================================================


class Quantity(BaseModel, Generic[U]):
    """
    Immutable (value, unit) pair.

    Concrete domains subclass Quantity[UnitEnum] and set unit_type/EPSILON.
    """

    value: float = Field(..., allow_inf_nan=False, description="Finite numeric value")
    unit: U = Field(..., description="Unit of the matching domain")

    unit_type: ClassVar[type[MeasurementUnit]] = MeasurementUnit
    EPSILON: ClassVar[float] = 1e-6

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: float, unit: U | str | None = None, **data: Any) -> None:
        """
        Args:
            value: Finite numeric value
            unit: Unit member, or unit text resolved by the lenient parser

        Raises:
            MissingUnitError: If unit is None
            UnrecognizedUnitError: If unit text matches no unit of this domain
            UnitDomainError: If unit belongs to another domain
            InvalidValueError: If value is NaN/Inf, not a real number, or
                overflows when expressed in the base unit
        """
        if unit is None:
            raise MissingUnitError(f"{type(self).__name__} unit must not be None", argument="unit")
        unit = self._resolve_unit(unit, "unit")
        value = validate_finite(value, "value")
        # Base value must be finite too (1e308 yards overflows in inches)
        validate_finite(unit.to_base(value), "value")
        super().__init__(value=value, unit=unit, **data)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_base(self) -> float:
        """Value normalized to the domain's base unit."""
        return self.unit.to_base(self.value)

    def convert_to(self, target_unit: U | str | None) -> "Quantity[U]":
        """
        Express this quantity in target_unit.

        Args:
            target_unit: Unit to convert to, or unit text

        Returns:
            self if target_unit is the current unit, else a new instance

        Raises:
            MissingUnitError: If target_unit is None
            UnrecognizedUnitError: If unit text matches no unit of this domain
            UnitDomainError: If target_unit belongs to another domain
            InvalidValueError: If the converted value overflows to Inf
        """
        if target_unit is None:
            raise MissingUnitError("Target unit must not be None", argument="target_unit")
        target_unit = self._resolve_unit(target_unit, "target_unit")
        if target_unit is self.unit:
            return self

        return type(self)(target_unit.from_base(self.to_base()), target_unit)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def same_as(self, other: "Quantity[U] | None") -> bool:
        """Tolerant equality; False for None or another domain."""
        if other is None or not self._same_domain(other):
            return False
        return is_within_tolerance(self.to_base(), other.to_base(), self.EPSILON)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.same_as(other)

    def __hash__(self) -> int:
        base = self.to_base()
        if not math.isfinite(base / self.EPSILON):
            # Float spacing at this magnitude is far above EPSILON, so tolerant
            # equality reduces to exact equality of the base value
            return hash((self.unit_type.__name__, base))
        return hash((self.unit_type.__name__, epsilon_steps(base, self.EPSILON)))

    # -------------------------------------------------------------------------
    # Addition
    # -------------------------------------------------------------------------

    def add(
        self,
        other: "Quantity[U] | None",
        target_unit: U | str | None = _LEFT_OPERAND_UNIT,
    ) -> "Quantity[U]":
        """
        Sum of two quantities of the same domain.

        Without target_unit the result is expressed in this instance's unit
        (left-operand-unit rule): Length(1, FOOT).add(Length(12, INCH)) is
        2 ft, while Length(12, INCH).add(Length(1, FOOT)) is 24 in. Both
        results are equal under tolerant equality.

        Args:
            other: Second operand
            target_unit: Unit (or unit text) of the result; optional, explicit
                None is an error

        Returns:
            New quantity

        Raises:
            MissingOperandError: If other is None or target_unit is explicitly None
            MissingOperandUnitError: If other carries no unit
            UnrecognizedUnitError: If target_unit text matches no unit
            UnitDomainError: If other or target_unit belongs to another domain
        """
        if other is None:
            raise MissingOperandError("Second operand must not be None", argument="other")
        if getattr(other, "unit", None) is None:
            raise MissingOperandUnitError("Second operand must have a unit", argument="other.unit")
        if not self._same_domain(other):
            raise UnitDomainError(
                f"Cannot add {type(other).__name__} to {type(self).__name__}",
                argument="other",
            )

        if target_unit is _LEFT_OPERAND_UNIT:
            target_unit = self.unit
        elif target_unit is None:
            raise MissingOperandError("Target unit must not be None", argument="target_unit")
        else:
            target_unit = self._resolve_unit(target_unit, "target_unit")

        sum_base = self.to_base() + other.to_base()
        return type(self)(target_unit.from_base(sum_base), target_unit)

    def __add__(self, other: object) -> "Quantity[U]":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.value} {self.unit.name.lower()}"

    def to_contract(self) -> dict[str, Any]:
        """Render as a quantity contract payload."""
        return {
            "value": self.value,
            "unit": self.unit.name.lower(),
            "dimension": self.unit.dimension,
        }

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _same_domain(self, other: object) -> bool:
        return isinstance(other, Quantity) and other.unit_type is self.unit_type

    def _resolve_unit(self, unit: object, argument: str) -> U:
        """Unit member of this domain; unit text goes through the lenient parser."""
        if isinstance(unit, str):
            unit = self.unit_type.parse(unit)
        if not isinstance(unit, self.unit_type):
            raise UnitDomainError(
                f"{type(self).__name__} requires a {self.unit_type.__name__}, got {unit!r}",
                argument=argument,
            )
        return unit


# =============================================================================
# DOMAINS
# =============================================================================


class Length(Quantity[LengthUnit]):
    """Length; base unit INCH, tolerance LENGTH_EPSILON inches."""

    unit_type: ClassVar[type[MeasurementUnit]] = LengthUnit
    EPSILON: ClassVar[float] = LENGTH_EPSILON


class Weight(Quantity[WeightUnit]):
    """Weight; base unit KILOGRAM, tolerance WEIGHT_EPSILON kilograms."""

    unit_type: ClassVar[type[MeasurementUnit]] = WeightUnit
    EPSILON: ClassVar[float] = WEIGHT_EPSILON
