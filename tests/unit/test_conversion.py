"""
Tests for the standalone conversion helpers

convert_length / convert_weight operate on bare floats and round the
converted value; almost_equal compares floats with the configured epsilon.
"""

import math

import pytest

from src.core.domain import (
    ConversionConfig,
    LengthUnit,
    WeightUnit,
    almost_equal,
    convert_length,
    convert_weight,
)
from src.core.errors import InvalidValueError, MissingUnitError, UnitDomainError


class TestConvertLength:
    """Tests for convert_length"""

    def test_basic(self) -> None:
        assert convert_length(1.0, LengthUnit.FOOT, LengthUnit.INCH) == 12.0
        assert convert_length(1.0, LengthUnit.YARD, LengthUnit.FOOT) == 3.0
        assert convert_length(36.0, LengthUnit.INCH, LengthUnit.YARD) == 1.0

    def test_rounded_to_six_decimals(self) -> None:
        """Factor noise is rounded away"""
        assert convert_length(1.0, LengthUnit.INCH, LengthUnit.CENTIMETER) == 2.54
        assert convert_length(30.48, LengthUnit.CENTIMETER, LengthUnit.INCH) == 12.0

    def test_same_unit_untouched(self) -> None:
        """Same unit → value returned as is (no rounding)"""
        assert convert_length(0.1234567891, LengthUnit.FOOT, LengthUnit.FEET) == 0.1234567891

    def test_custom_rounding(self) -> None:
        config = ConversionConfig(round_decimals=1)
        assert convert_length(1.0, LengthUnit.INCH, LengthUnit.CENTIMETER, config) == 2.5

    def test_missing_units(self) -> None:
        with pytest.raises(MissingUnitError) as exc_info:
            convert_length(1.0, None, LengthUnit.INCH)
        assert exc_info.value.argument == "from_unit"

        with pytest.raises(MissingUnitError) as exc_info:
            convert_length(1.0, LengthUnit.INCH, None)
        assert exc_info.value.argument == "to_unit"

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_invalid_value(self, bad) -> None:
        with pytest.raises(InvalidValueError):
            convert_length(bad, LengthUnit.FOOT, LengthUnit.INCH)

    def test_weight_unit_rejected(self) -> None:
        with pytest.raises(UnitDomainError):
            convert_length(1.0, WeightUnit.GRAM, LengthUnit.INCH)


class TestConvertWeight:
    """Tests for convert_weight"""

    def test_basic(self) -> None:
        assert convert_weight(1.0, WeightUnit.KILOGRAM, WeightUnit.GRAM) == 1000.0
        assert convert_weight(1.0, WeightUnit.POUND, WeightUnit.GRAM) == 453.59237

    def test_missing_unit(self) -> None:
        with pytest.raises(MissingUnitError):
            convert_weight(1.0, WeightUnit.GRAM, None)


class TestAlmostEqual:
    """Tests for almost_equal"""

    def test_default_epsilon(self) -> None:
        assert almost_equal(1.0, 1.0000001)
        assert not almost_equal(1.0, 1.00001)

    def test_configured_epsilon(self) -> None:
        assert almost_equal(1.0, 1.0005, ConversionConfig(epsilon=1e-3))
