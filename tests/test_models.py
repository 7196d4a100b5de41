"""
Tests for pydantic request/response models.
"""

import pytest
from pydantic import ValidationError

from aerounits.calculator import calculate
from aerounits.models import (
    CalculationRequest,
    ConvertRequest,
    Operation,
    QuantityModel,
    StallSpeedRequest,
    UnitInfo,
    from_operand,
    to_operand,
)
from aerounits.units import Dimension, Quantity, Unit


class TestQuantityModel:
    """Tests for QuantityModel."""

    def test_valid(self):
        """Test a valid quantity."""
        model = QuantityModel(value=175, unit="mph")
        assert model.unit is Unit.MPH
        assert model.to_quantity() == Quantity(175, Unit.MPH)

    def test_unknown_unit(self):
        """Test that unit identifiers are validated."""
        with pytest.raises(ValidationError):
            QuantityModel(value=1, unit="feet")

    def test_from_quantity(self):
        """Test building a model from a core quantity."""
        model = QuantityModel.from_quantity(Quantity(12.0, Unit.IN))
        assert model.value == 12.0
        assert model.unit is Unit.IN


class TestOperands:
    """Tests for operand translation."""

    def test_number_passthrough(self):
        """Test that numbers are returned as-is."""
        assert to_operand(2.5) == 2.5
        assert from_operand(3) == 3.0

    def test_quantity_roundtrip(self):
        """Test quantity translation in both directions."""
        q = Quantity(1, Unit.FT)
        assert to_operand(from_operand(q)) == q


class TestCalculationRequest:
    """Tests for CalculationRequest validation."""

    def test_binary(self):
        """Test a valid binary request with mixed operand shapes."""
        request = CalculationRequest(
            operation="multiply",
            a=4,
            b={"value": 3, "unit": "knots"},
        )
        assert request.operation == Operation.MULTIPLY
        assert request.a == 4
        assert isinstance(request.b, QuantityModel)

    def test_binary_missing_b(self):
        """Test that binary operations require b."""
        with pytest.raises(ValidationError):
            CalculationRequest(operation="add", a=1)

    def test_negate_with_b(self):
        """Test that negate rejects a second operand."""
        with pytest.raises(ValidationError):
            CalculationRequest(operation="negate", a=1, b=2)

    def test_unknown_operation(self):
        """Test that operations are a closed set."""
        with pytest.raises(ValidationError):
            CalculationRequest(operation="power", a=1, b=2)


class TestOtherModels:
    """Tests for remaining request/response models."""

    def test_convert_request(self):
        """Test conversion request parsing."""
        request = ConvertRequest(quantity={"value": 10, "unit": "ms"}, to_unit="kph")
        assert request.to_unit is Unit.KPH

    def test_stall_speed_cl_max_positive(self):
        """Test that Cl max must be positive."""
        with pytest.raises(ValidationError):
            StallSpeedRequest(
                gross_weight={"value": 120, "unit": "kg"},
                wing_area={"value": 31, "unit": "m2"},
                cl_max=0,
            )

    def test_unit_info_base(self):
        """Test registry info for a base unit."""
        info = UnitInfo.from_unit(Unit.M)
        assert info.dimension == Dimension.LENGTH
        assert info.base is True
        assert info.factor == 1.0

    def test_unit_info_affine(self):
        """Test registry info for an offset unit."""
        info = UnitInfo.from_unit(Unit.F)
        assert info.base is False
        assert info.factor is None
        assert info.description == "degrees fahrenheit"


class TestCalculate:
    """Tests for the shared calculation handler."""

    def test_non_finite_result(self):
        """Test that overflow is reported instead of returning inf."""
        request = CalculationRequest(operation="multiply", a=1e308, b=10)
        with pytest.raises(ValueError, match="non-finite"):
            calculate(request)

    def test_finite_result(self):
        """Test a normal product of plain numbers."""
        result = calculate(CalculationRequest(operation="multiply", a=2, b=3))
        assert result.result == 6.0
        assert result.dimension is None
