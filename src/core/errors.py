"""
Quantity errors: validation failure taxonomy

Each failure kind has its own exception class so callers can tell a missing
argument from an invalid one. Every exception carries:
- kind: snake_case reason tag (also appended to the message)
- argument: name of the offending argument

All classes derive from ValueError: every condition is caller-recoverable.
"""

from typing import ClassVar


class QuantityError(ValueError):
    """Base class for quantity and unit validation failures."""

    kind: ClassVar[str] = "quantity_error"

    def __init__(self, message: str, argument: str = "") -> None:
        self.argument = argument
        super().__init__(f"{message} ({self.kind})")


class MissingUnitError(QuantityError):
    """Construction or conversion invoked without a unit."""

    kind = "missing_unit"


class MissingOperandError(QuantityError):
    """Addition invoked without a second operand or explicit target unit."""

    kind = "missing_operand"


class MissingOperandUnitError(MissingOperandError):
    """Addition operand exists but carries no unit."""

    kind = "missing_operand_unit"


class InvalidValueError(QuantityError):
    """Value is NaN, infinite or not a real number."""

    kind = "invalid_value"


class UnrecognizedUnitError(QuantityError):
    """Lenient unit lookup matched no known unit or alias."""

    kind = "unrecognized_unit"


class UnitDomainError(QuantityError):
    """Length and weight mixed in one operation."""

    kind = "unit_domain_mismatch"
