"""
Pytest configuration and shared fixtures.
"""

import pytest

from aerounits.units import Quantity, Unit


@pytest.fixture
def one_foot() -> Quantity:
    """One foot."""
    return Quantity(1, Unit.FT)


@pytest.fixture
def one_inch() -> Quantity:
    """One inch."""
    return Quantity(1, Unit.IN)


@pytest.fixture
def sample_values() -> list[float]:
    """Values used for conversion properties across the whole registry."""
    return [0, 1, 2.5, -3.5, 123.456, 1 / 3]
