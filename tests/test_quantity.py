"""
Tests for the Quantity type and its operator layer.
"""

import dataclasses

import pytest

from aerounits.units.errors import DimensionMismatch, MixedOperands, UnknownUnit
from aerounits.units.quantity import Quantity, construct, is_number
from aerounits.units.registry import Dimension, Unit


class TestConstruction:
    """Tests for construct() and Quantity validation."""

    def test_construct(self):
        """Test tagging a number with a unit."""
        q = construct(10, "kph")
        assert q == Quantity(10, Unit.KPH)
        assert q.unit is Unit.KPH

    def test_string_unit_coerced(self):
        """Test that string identifiers become Unit members."""
        assert Quantity(1, "ft").unit is Unit.FT

    def test_unknown_unit(self):
        """Test that unregistered identifiers are rejected."""
        with pytest.raises(UnknownUnit):
            construct(10, "feet")

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_non_numeric_value(self, value):
        """Test that values must be real numbers."""
        with pytest.raises(TypeError):
            Quantity(value, Unit.FT)

    def test_immutable(self, one_foot):
        """Test that quantities are frozen."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            one_foot.value = 2

    def test_hashable(self):
        """Test that equal quantities hash equal."""
        assert hash(Quantity(1, Unit.FT)) == hash(Quantity(1, "ft"))

    def test_is_number(self):
        """Test the plain number predicate."""
        assert is_number(1)
        assert is_number(2.5)
        assert not is_number(True)
        assert not is_number(Quantity(1, Unit.FT))


class TestProperties:
    """Tests for Quantity helpers."""

    def test_dimension(self):
        """Test the dimension property."""
        assert Quantity(10, Unit.KPH).dimension == Dimension.VELOCITY

    def test_description(self):
        """Test the description property."""
        assert Quantity(10, Unit.KPH).description == "kilometres per hour"

    def test_to(self):
        """Test the conversion shortcut."""
        assert Quantity(10, Unit.MS).to("kph") == Quantity(36.0, Unit.KPH)

    def test_str(self):
        """Test string formatting."""
        assert str(Quantity(12.0, Unit.IN)) == "12.0 in"


class TestOperators:
    """Tests for the operator overloads."""

    def test_add(self, one_inch, one_foot):
        """Test + with cross-unit operands."""
        assert one_inch + one_foot == Quantity(13.0, Unit.IN)

    def test_subtract(self):
        """Test - with cross-unit operands."""
        assert Quantity(61, Unit.S) - Quantity(1, Unit.MIN) == Quantity(1.0, Unit.S)

    def test_multiply(self):
        """Test * between quantities and with numbers."""
        assert Quantity(1, Unit.M) * Quantity(200, Unit.CM) == Quantity(2.0, Unit.M2)
        assert 4 * Quantity(3, Unit.KNOTS) == Quantity(12, Unit.KNOTS)
        assert Quantity(3, Unit.KNOTS) * 4 == Quantity(12, Unit.KNOTS)

    def test_divide(self):
        """Test / between quantities and with numbers."""
        assert Quantity(2.0, Unit.M2) / Quantity(200, Unit.CM) == Quantity(1.0, Unit.M)
        assert Quantity(3, Unit.KNOTS) / 4 == Quantity(0.75, Unit.KNOTS)
        assert (4 / Quantity(2, Unit.KNOTS)) == Quantity(2.0, Unit.KNOTS)

    def test_unary(self):
        """Test unary minus and plus."""
        assert -Quantity(3, Unit.MM) == Quantity(-3, Unit.MM)
        assert +Quantity(3, Unit.MM) == Quantity(3, Unit.MM)

    def test_reflected_mixed_add(self, one_foot):
        """Test that number + quantity raises MixedOperands."""
        with pytest.raises(MixedOperands):
            1 + one_foot
        with pytest.raises(MixedOperands):
            1 - one_foot

    def test_foreign_operand(self, one_foot):
        """Test that unsupported types fall back to Python's TypeError."""
        with pytest.raises(TypeError):
            one_foot + "1"
        with pytest.raises(TypeError):
            "1" * one_foot

    def test_dimension_mismatch(self, one_foot):
        """Test that incompatible sums raise."""
        with pytest.raises(DimensionMismatch):
            one_foot + Quantity(1, Unit.S)

    def test_expression(self):
        """Test a chained expression: distance over time plus a velocity."""
        distance = Quantity(100, Unit.M)
        time = Quantity(10, Unit.S)
        result = distance / time + Quantity(36, Unit.KPH)
        assert result.unit is Unit.MS
        assert result.value == pytest.approx(20.0)
