"""
JSON Schema Contract Validators

Validation of quantity payloads received as JSON (configuration values,
user input) against the formal JSON Schema contract.
Uses the jsonschema library.

Schemas:
- quantity.json ({"value": number, "unit": string, "dimension"?: string})
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
import structlog
from jsonschema import Draft202012Validator

from src.core.domain.quantity import Length, Quantity, Weight
from src.core.domain.units import LengthUnit, parse_unit

logger = structlog.get_logger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Schemas are shipped with the package in contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'quantity')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data does not match the schema
        """
        self.validator.validate(data)


class QuantityValidator(ContractValidator):
    """Validator for the quantity contract."""

    def __init__(self):
        super().__init__("quantity")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Validate quantity payload.

    Raises:
        ValidationError: If data does not match the schema
    """
    QuantityValidator().validate(data)


def quantity_from_contract(data: Dict[str, Any]) -> Quantity:
    """
    Build a Length or Weight from a quantity payload.

    The payload is validated against the schema first. The domain is taken
    from "dimension" when present, otherwise from the unit text.

    Args:
        data: Quantity payload

    Returns:
        Length or Weight

    Raises:
        ValidationError: If data does not match the schema
        UnrecognizedUnitError: If the unit text matches no known unit
        InvalidValueError: If value is NaN/Inf
    """
    validate_quantity(data)

    unit = parse_unit(data["unit"], data.get("dimension"))
    quantity_type = Length if isinstance(unit, LengthUnit) else Weight
    quantity = quantity_type(data["value"], unit)

    logger.debug(
        "quantity_contract_loaded",
        value=quantity.value,
        unit=quantity.unit.name,
        dimension=unit.dimension,
    )
    return quantity
