"""
Unit-qualified values.

A ``Quantity`` is an immutable (value, unit) pair. The arithmetic
operators on it are a thin layer over the named operations in
``aerounits.units.arithmetic``, which are the actual contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Union

from aerounits.units.registry import Dimension, Unit, describe, dimension_of, parse_unit


def is_number(value: object) -> bool:
    """True for plain real numbers (bools excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Quantity:
    """A numeric value tagged with a registered unit."""
    value: float
    unit: Unit

    def __post_init__(self):
        if not is_number(self.value):
            raise TypeError(f"Quantity value must be a number, got {self.value!r}")
        # Coerce string identifiers into the closed Unit set
        object.__setattr__(self, "unit", parse_unit(self.unit))

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"

    @property
    def dimension(self) -> Dimension:
        """Dimension of this quantity's unit."""
        return dimension_of(self)

    @property
    def description(self) -> str:
        """Human-readable unit name."""
        return describe(self)

    def to(self, unit: Unit | str) -> "Quantity":
        """Convert to another unit of the same dimension."""
        from aerounits.units.convert import convert
        return convert(self, unit)

    # Operator layer

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import subtract
        return subtract(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import subtract
        return subtract(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import multiply
        return multiply(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from aerounits.units.arithmetic import divide
        return divide(other, self)

    def __neg__(self):
        from aerounits.units.arithmetic import negate
        return negate(self)

    def __pos__(self):
        from aerounits.units.arithmetic import positive
        return positive(self)


Operand = Union[float, int, Quantity]


def _is_operand(value: object) -> bool:
    return is_number(value) or isinstance(value, Quantity)


def construct(value: float, unit: Unit | str) -> Quantity:
    """
    Tag a number with a unit.

    Args:
        value: Numeric value
        unit: Unit member or its identifier string (e.g. "kph")

    Returns:
        New Quantity

    Raises:
        UnknownUnit: if the unit identifier is not registered
    """
    return Quantity(value, parse_unit(unit))
