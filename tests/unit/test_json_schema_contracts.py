"""
Tests for JSON Schema Contract Validators

Checks:
- Validity of the shipped schema itself
- Validation of correct payloads
- Detection of required-field, type and enum violations
- Building Length/Weight from payloads and rendering them back
"""

import math

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    QuantityValidator,
    SchemaLoader,
    quantity_from_contract,
    validate_quantity,
)
from src.core.domain import Length, LengthUnit, Weight, WeightUnit
from src.core.errors import InvalidValueError, UnrecognizedUnitError


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_length_payload():
    return {"value": 1.0, "unit": "Feet", "dimension": "length"}


@pytest.fixture
def valid_weight_payload():
    return {"value": 1000, "unit": "g"}


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """Tests for SchemaLoader"""

    def test_quantity_schema_is_valid(self):
        schema = SchemaLoader().load_schema("quantity")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("quantity") is loader.load_schema("quantity")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("volume")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")


# =============================================================================
# VALIDATION
# =============================================================================


class TestQuantityValidator:
    """Tests for the quantity contract"""

    def test_valid_payloads(self, valid_length_payload, valid_weight_payload):
        validate_quantity(valid_length_payload)
        validate_quantity(valid_weight_payload)

    def test_missing_unit(self):
        with pytest.raises(ValidationError, match="'unit' is a required property"):
            validate_quantity({"value": 1.0})

    def test_value_type(self):
        with pytest.raises(ValidationError):
            validate_quantity({"value": "1.0", "unit": "ft"})

    def test_unknown_dimension(self):
        with pytest.raises(ValidationError):
            validate_quantity({"value": 1.0, "unit": "l", "dimension": "volume"})

    def test_additional_properties(self):
        with pytest.raises(ValidationError):
            QuantityValidator().validate({"value": 1.0, "unit": "ft", "scale": 2})

    def test_empty_unit(self):
        with pytest.raises(ValidationError):
            validate_quantity({"value": 1.0, "unit": ""})


# =============================================================================
# CONTRACT → DOMAIN
# =============================================================================


class TestQuantityFromContract:
    """Tests for quantity_from_contract"""

    def test_length(self, valid_length_payload):
        quantity = quantity_from_contract(valid_length_payload)
        assert isinstance(quantity, Length)
        assert quantity.unit is LengthUnit.FOOT
        assert quantity == Length(12.0, LengthUnit.INCH)

    def test_weight_inferred_from_unit(self, valid_weight_payload):
        quantity = quantity_from_contract(valid_weight_payload)
        assert isinstance(quantity, Weight)
        assert quantity == Weight(1.0, WeightUnit.KILOGRAM)

    def test_dimension_restricts_lookup(self):
        with pytest.raises(UnrecognizedUnitError):
            quantity_from_contract({"value": 1.0, "unit": "ft", "dimension": "weight"})

    def test_unknown_unit(self):
        with pytest.raises(UnrecognizedUnitError):
            quantity_from_contract({"value": 1.0, "unit": "furlong"})

    def test_nan_value(self):
        with pytest.raises(InvalidValueError):
            quantity_from_contract({"value": math.nan, "unit": "kg"})

    def test_schema_violation_first(self):
        with pytest.raises(ValidationError):
            quantity_from_contract({"unit": "kg"})

    @pytest.mark.parametrize(
        "quantity",
        [Length(3.0, LengthUnit.YARDS), Weight(2.5, WeightUnit.POUND)],
    )
    def test_to_contract_loads_back(self, quantity):
        payload = quantity.to_contract()
        validate_quantity(payload)
        loaded = quantity_from_contract(payload)
        assert loaded == quantity
        assert loaded.unit is quantity.unit

    def test_to_contract_shape(self):
        assert Length(2.0, LengthUnit.FEET).to_contract() == {
            "value": 2.0,
            "unit": "foot",
            "dimension": "length",
        }
