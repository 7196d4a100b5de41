"""
Tests for the pint bridge.
"""

import pytest

from aerounits.units.algebra import base_unit_of
from aerounits.units.errors import DimensionMismatch
from aerounits.units.interop import PINT_UNITS, Q_, from_pint, to_pint
from aerounits.units.quantity import Quantity
from aerounits.units.registry import UNITS, Unit


class TestToPint:
    """Tests for to_pint()."""

    def test_value_carried_over(self):
        """Test that the magnitude is unchanged."""
        pq = to_pint(Quantity(12, Unit.IN))
        assert pq.magnitude == 12
        assert pq.to("foot").magnitude == pytest.approx(1.0)

    def test_every_unit_mapped(self):
        """Test that each registered unit has a pint expression."""
        assert set(PINT_UNITS) == set(Unit)
        for unit in Unit:
            to_pint(Quantity(1, unit))

    def test_handbook_factors_close_to_pint(self):
        """Test scalar factors against pint's definitions (handbook values are rounded)."""
        for unit, descriptor in UNITS.items():
            factor = descriptor.conversion.factor
            if factor is None:
                continue
            base = base_unit_of(descriptor.dimension)
            in_base = to_pint(Quantity(1.0, unit)).to(PINT_UNITS[base]).magnitude
            assert in_base == pytest.approx(factor, rel=2e-2), unit


class TestFromPint:
    """Tests for from_pint()."""

    def test_length(self):
        """Test bringing a pint length into the registry."""
        assert from_pint(Q_(1, "foot"), Unit.IN) == Quantity(12.0, Unit.IN)

    def test_temperature(self):
        """Test offset units."""
        result = from_pint(Q_(50, "degree_Fahrenheit"), "c")
        assert result.unit is Unit.C
        assert result.value == pytest.approx(10.0)

    def test_incompatible(self):
        """Test that pint dimensionality errors become DimensionMismatch."""
        with pytest.raises(DimensionMismatch):
            from_pint(Q_(1, "foot"), Unit.KG)
